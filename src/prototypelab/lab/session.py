"""LabSession: the action surface a presentation layer drives.

A front end (terminal, web page, test) calls one method per user action and
redraws from the returned lines. Guards that the user can trip come back as
REJECTED results carrying an advisory message; nothing here raises for bad
selections.

Usage:
    session = LabSession()
    session.mass_clone(10)
    session.damage(3)
    result = session.remove(0)  # REJECTED: the original is protected
"""

from __future__ import annotations

from collections.abc import Callable

from prototypelab.config import LabSettings
from prototypelab.core.player import Player, format_roster_line
from prototypelab.lab.result import ActionResult, ActionStatus
from prototypelab.roster import Roster

SELECT_FIRST = "Select a player first."
ORIGINAL_PROTECTED = "Cannot remove the original (index 0). Select a clone."


class LabSession:
    """Coordinates a roster with the fixed lab actions.

    Owns the roster and settings. On construction the starting hero is built
    from settings and installed as the original, unless the supplied roster
    already has one.

    Args:
        settings: Session settings (default: loaded from environment).
        roster: Existing roster to drive (default: new empty roster).
    """

    def __init__(
        self,
        settings: LabSettings | None = None,
        roster: Roster | None = None,
    ):
        self._settings = settings or LabSettings()
        self._roster = roster if roster is not None else Roster()
        if self._roster.get_original() is None:
            self._roster.set_original(self._new_hero())

    @property
    def settings(self) -> LabSettings:
        return self._settings

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def original(self) -> Player:
        original = self._roster.get_original()
        assert original is not None  # installed in __init__, never removed
        return original

    def _new_hero(self) -> Player:
        s = self._settings
        return Player(s.hero_name, s.hero_health, s.hero_experience, s.hero_level)

    def _applied(self, message: str | None = None) -> ActionResult:
        return ActionResult(ActionStatus.APPLIED, message, tuple(self.render()))

    def _selected(self, index: int | None) -> Player | None:
        if index is None:
            return None
        return self._roster.get(index)

    def _apply_to(self, index: int | None, op: Callable[[Player], None]) -> ActionResult:
        player = self._selected(index)
        if player is None:
            return ActionResult.rejected(SELECT_FIRST)
        op(player)
        return self._applied()

    # Cloning

    def clone(self, index: int | None = None) -> ActionResult:
        """Duplicate the selected player, or the original when nothing is selected.

        Args:
            index: Roster position to clone. None or negative means the original.

        Returns:
            APPLIED with ``"Cloned: <summary>"``, or REJECTED if ``index`` is past the end.
        """
        if index is None or index < 0:
            source: Player | None = self.original
        else:
            source = self._roster.get(index)
        if source is None:
            return ActionResult.rejected(SELECT_FIRST)

        clone = source.duplicate(self._settings.clone_suffix)
        self._roster.add_clone(clone)
        return self._applied(f"Cloned: {clone.summary()}")

    def mass_clone(self, count: int | None = None) -> ActionResult:
        """Append ``count`` duplicates of the original.

        Args:
            count: Number of clones (default ``settings.default_batch_size``).

        Returns:
            APPLIED with a count message; IGNORED for ``count <= 0``; REJECTED
            above ``settings.max_batch_size``.
        """
        if count is None:
            count = self._settings.default_batch_size
        if count <= 0:
            return ActionResult.ignored()
        limit = self._settings.max_batch_size
        if count > limit:
            return ActionResult.rejected(f"Clone count must be between 1 and {limit}.")

        base = self.original
        for _ in range(count):
            self._roster.add_clone(base.duplicate(self._settings.clone_suffix))
        return self._applied(f"Created {count} clones of original.")

    def clear_clones(self) -> ActionResult:
        """Drop every clone, keeping the original."""
        self._roster.clear_clones_keep_original()
        return self._applied()

    # Per-player actions

    def damage(self, index: int | None) -> ActionResult:
        amount = self._settings.damage_amount
        return self._apply_to(index, lambda p: p.take_damage(amount))

    def heal(self, index: int | None) -> ActionResult:
        amount = self._settings.heal_amount
        return self._apply_to(index, lambda p: p.heal(amount))

    def gain_experience(self, index: int | None) -> ActionResult:
        amount = self._settings.experience_amount
        return self._apply_to(index, lambda p: p.gain_experience(amount))

    def level_up(self, index: int | None) -> ActionResult:
        return self._apply_to(index, Player.level_up)

    def remove(self, index: int | None) -> ActionResult:
        """Remove the clone at ``index``.

        The original (and no selection) is rejected with an advisory; a
        position past the end is ignored.
        """
        if index is None or index <= 0:
            return ActionResult.rejected(ORIGINAL_PROTECTED)
        if index >= len(self._roster):
            return ActionResult.ignored()
        self._roster.remove_at(index)
        return self._applied()

    def rename(self, index: int | None, new_name: str | None) -> ActionResult:
        """Assign a new name to the player at ``index``.

        Blank or missing names (a cancelled prompt) are ignored silently.
        """
        name = new_name.strip() if new_name is not None else ""
        if not name:
            return ActionResult.ignored()
        player = self._selected(index)
        if player is None:
            return ActionResult.rejected(SELECT_FIRST)
        player.name = name
        return self._applied()

    # Rendering

    def render(self) -> list[str]:
        """One summary line per roster position, original first."""
        return [format_roster_line(i, p) for i, p in enumerate(self._roster.get_all())]

    def original_card(self) -> list[str]:
        """Detail card for the original player."""
        p = self.original
        return [
            f"Name: {p.id.short}{p.name}",
            f"HP: {p.health}",
            f"XP: {p.experience}",
            f"Level: {p.level}",
        ]
