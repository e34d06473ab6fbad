"""Entity identity models.

Usage:
    entity = EntityId.new()
    print(entity.short)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class EntityId:
    """Opaque identifier for a single entity.

    Identifiers are random UUIDs, so a duplicate never inherits or collides with
    its source's id and freed ids are never handed out again.
    """

    value: UUID = field(default_factory=uuid4)

    @classmethod
    def new(cls) -> EntityId:
        """Allocate a fresh identifier.

        Returns:
            New EntityId distinct from every previously allocated one.
        """
        return cls(uuid4())

    @property
    def short(self) -> str:
        """First 8 hex characters, for compact display."""
        return self.value.hex[:8]

    def __str__(self) -> str:
        return self.value.hex
