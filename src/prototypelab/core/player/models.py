"""Player entity model and the prototype protocol.

Usage:
    hero = Player("Hero", health=100)
    twin = hero.duplicate()
    twin.take_damage(30)  # hero is unaffected
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Self, runtime_checkable

from prototypelab.core.identity import EntityId
from prototypelab.core.player.operations import LEVEL_UP_HEALTH_BONUS, summarize, xp_threshold

CLONE_SUFFIX = " (clone)"


@runtime_checkable
class Prototype(Protocol):
    """One instance → independent copy with a new identity."""

    def duplicate(self) -> Self: ...


@dataclass(slots=True, eq=False)
class Player:
    """A game character with identity and mutable stats.

    Stats are plain ints, so a duplicate never aliases its source. Equality is
    identity: two players with identical stats are still different entities.

    Construction accepts any values as given; only the mutating operations
    enforce the health floor.
    """

    name: str
    health: int = 100
    experience: int = 0
    level: int = 1
    _id: EntityId = field(default_factory=EntityId.new, init=False, repr=False)

    @property
    def id(self) -> EntityId:
        """Identifier assigned at construction. Read-only."""
        return self._id

    def duplicate(self, suffix: str = CLONE_SUFFIX) -> Player:
        """Create an independent copy with a fresh identity.

        Args:
            suffix: Marker appended to the copy's name.

        Returns:
            New Player with a new id, ``name + suffix`` and the current stats.
        """
        return Player(
            name=f"{self.name}{suffix}",
            health=self.health,
            experience=self.experience,
            level=self.level,
        )

    def take_damage(self, amount: int) -> None:
        """Reduce health by ``amount``, flooring at zero."""
        self.health = max(0, self.health - amount)

    def heal(self, amount: int) -> None:
        """Increase health by ``amount``. No upper bound."""
        self.health += amount

    def gain_experience(self, amount: int) -> None:
        """Add experience and resolve every level-up it pays for.

        A single large grant may cross several thresholds; each crossing
        consumes the threshold of the level being left.

        Args:
            amount: Experience to add.
        """
        self.experience += amount
        while self.experience >= xp_threshold(self.level):
            self.experience -= xp_threshold(self.level)
            self.level_up()

    def level_up(self) -> None:
        """Advance one level and grant the flat health bonus."""
        self.level += 1
        self.health += LEVEL_UP_HEALTH_BONUS

    def summary(self) -> str:
        return summarize(self)
