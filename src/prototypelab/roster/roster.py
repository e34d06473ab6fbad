"""Ordered player collection with a protected original slot.

Usage:
    roster = Roster()
    roster.set_original(Player("Hero"))
    roster.add_clone(roster.get_original().duplicate())
    roster.remove_at(1)
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator

from prototypelab.core.player import Player


class Roster:
    """Players in display order; position 0 is always the original.

    Structure:
        _players[0] = original
        _players[1:] = clones, in insertion order

    Removal never targets position 0. Out-of-range or protected targets are
    silent no-ops rather than errors.
    """

    def __init__(self) -> None:
        self._players: list[Player] = []

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(tuple(self._players))

    def set_original(self, player: Player) -> None:
        """Install ``player`` as the original.

        Appends when the roster is empty, otherwise overwrites position 0 so
        existing clones keep their positions. The replaced original is simply
        dropped from the roster.
        """
        if not self._players:
            self._players.append(player)
        else:
            self._players[0] = player

    def get_original(self) -> Player | None:
        """Return the original, or None if none has been set."""
        return self._players[0] if self._players else None

    def add_clone(self, player: Player) -> None:
        """Append a clone.

        Uniqueness is not enforced. Re-adding an object already present emits
        a warning but still appends, matching how callers are expected to pass
        freshly duplicated players.
        """
        if any(existing is player for existing in self._players):
            warnings.warn(
                f"add_clone() received player {player.id.short} that is already in the roster. "
                f"The same object will appear more than once.",
                stacklevel=2,
            )
        self._players.append(player)

    def get_all(self) -> tuple[Player, ...]:
        """Read-only snapshot of the roster, original first.

        The tuple cannot be used to reorder or resize the roster; the players
        in it are the live objects and may be mutated through their own methods.
        """
        return tuple(self._players)

    def get(self, index: int) -> Player | None:
        """Player at ``index``, or None if out of range. Negative indexes are not wrapped."""
        if 0 <= index < len(self._players):
            return self._players[index]
        return None

    def clones(self) -> tuple[Player, ...]:
        """Every player except the original."""
        return tuple(self._players[1:])

    def clear_clones_keep_original(self) -> None:
        """Drop every clone, leaving only the original. No-op when empty."""
        del self._players[1:]

    def remove_at(self, index: int) -> None:
        """Remove the clone at ``index``.

        Silently ignores ``index <= 0`` (the original, or negative) and
        ``index >= len(self)``.
        """
        if index <= 0 or index >= len(self._players):
            return  # original is never removed through here
        del self._players[index]
