"""Action outcomes returned to the presentation layer.

Usage:
    result = session.remove(0)
    if result.status is ActionStatus.REJECTED:
        show_warning(result.message)
    elif result.ok:
        redraw(result.lines)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ActionStatus(Enum):
    """How a lab action resolved."""

    APPLIED = auto()  # Roster or a player was mutated
    REJECTED = auto()  # Guard tripped; message is an advisory for the user
    IGNORED = auto()  # Silent no-op


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Outcome of a single lab action.

    Attributes:
        status: How the action resolved.
        message: Text for the user (confirmation or advisory), if any.
        lines: Re-rendered roster after an applied action; empty otherwise.
    """

    status: ActionStatus
    message: str | None = None
    lines: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is ActionStatus.APPLIED

    @classmethod
    def rejected(cls, message: str) -> ActionResult:
        return cls(ActionStatus.REJECTED, message)

    @classmethod
    def ignored(cls) -> ActionResult:
        return cls(ActionStatus.IGNORED)
