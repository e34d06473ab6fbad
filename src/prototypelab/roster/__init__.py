"""Roster: stateful collection of one original and its clones.

Architecture Note:
    roster/ maintains runtime state. Unlike core/ (stateless rules), it owns
    the ordering and the original-vs-clone distinction.
"""

from prototypelab.roster.roster import Roster

__all__ = [
    "Roster",
]
