"""Player entity: the cloneable character and its stat rules."""

from prototypelab.core.player.models import CLONE_SUFFIX, Player, Prototype
from prototypelab.core.player.operations import (
    LEVEL_UP_HEALTH_BONUS,
    format_roster_line,
    summarize,
    xp_threshold,
)

__all__ = [
    "Player",
    "Prototype",
    "CLONE_SUFFIX",
    "LEVEL_UP_HEALTH_BONUS",
    "xp_threshold",
    "summarize",
    "format_roster_line",
]
