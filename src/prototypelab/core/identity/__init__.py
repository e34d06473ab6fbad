"""Entity identity: process-unique, never-reused identifiers."""

from prototypelab.core.identity.models import EntityId

__all__ = [
    "EntityId",
]
