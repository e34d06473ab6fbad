"""Pure functions for player stat arithmetic and display.

These are stateless helpers shared by Player and by anything that renders a
roster. They never mutate their arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prototypelab.core.player.models import Player

BASE_XP_THRESHOLD = 100
XP_THRESHOLD_STEP = 50
MIN_XP_THRESHOLD = 1  # keeps level-up loops finite for constructed levels <= -1
LEVEL_UP_HEALTH_BONUS = 10


def xp_threshold(level: int) -> int:
    """Experience needed to advance past ``level``.

    Args:
        level: Current level.

    Returns:
        ``100 + (level - 1) * 50``, never less than 1.
    """
    return max(MIN_XP_THRESHOLD, BASE_XP_THRESHOLD + (level - 1) * XP_THRESHOLD_STEP)


def summarize(player: Player) -> str:
    """One-line stat summary: ``"<name> | HP:<hp> | XP:<xp> | Lvl:<level>"``."""
    return (
        f"{player.name} | HP:{player.health} | XP:{player.experience} | Lvl:{player.level}"
    )


def format_roster_line(index: int, player: Player) -> str:
    """Roster display line with a zero-padded position prefix.

    Args:
        index: Position in the roster (0 = original).
        player: Player at that position.

    Returns:
        ``"<index> - <summary>"`` with index padded to at least two digits.
    """
    return f"{index:02d} - {summarize(player)}"
