"""Core functionalities: identity, the player entity and its pure stat rules.

Architecture Note:
    core/ holds the entity model and stateless helpers. It knows nothing about
    rosters, sessions or settings. For stateful services, see roster/ and lab/.
"""

from prototypelab.core.identity import EntityId
from prototypelab.core.player import (
    CLONE_SUFFIX,
    LEVEL_UP_HEALTH_BONUS,
    Player,
    Prototype,
    format_roster_line,
    summarize,
    xp_threshold,
)

__all__ = [
    # Identity
    "EntityId",
    # Player
    "Player",
    "Prototype",
    "CLONE_SUFFIX",
    "LEVEL_UP_HEALTH_BONUS",
    "xp_threshold",
    "summarize",
    "format_roster_line",
]
