"""prototypelab: the Prototype pattern with cloneable game characters.

Usage:
    from prototypelab import LabSession, Player, Roster

    hero = Player("Hero", health=100)
    roster = Roster()
    roster.set_original(hero)
    roster.add_clone(hero.duplicate())

    session = LabSession(roster=roster)
    session.mass_clone(10)
    session.damage(3)
    print("\\n".join(session.render()))
"""

__version__ = "0.1.0"

# Core primitives
from prototypelab.core import (
    CLONE_SUFFIX,
    LEVEL_UP_HEALTH_BONUS,
    EntityId,
    Player,
    Prototype,
    format_roster_line,
    summarize,
    xp_threshold,
)

# Configuration
from prototypelab.config import LabSettings

# Session
from prototypelab.lab import ActionResult, ActionStatus, LabSession

# Roster
from prototypelab.roster import Roster

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "Player",
    "Prototype",
    "CLONE_SUFFIX",
    "LEVEL_UP_HEALTH_BONUS",
    "xp_threshold",
    "summarize",
    "format_roster_line",
    # Roster
    "Roster",
    # Session
    "LabSession",
    "ActionResult",
    "ActionStatus",
    # Config
    "LabSettings",
]
