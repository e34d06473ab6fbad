"""Lab session: presentation-facing actions over a roster.

Architecture Note:
    lab/ is the only layer that knows about settings and user-facing
    messages. Front ends depend on it; core/ and roster/ never import it.
"""

from prototypelab.lab.result import ActionResult, ActionStatus
from prototypelab.lab.session import ORIGINAL_PROTECTED, SELECT_FIRST, LabSession

__all__ = [
    "LabSession",
    "ActionResult",
    "ActionStatus",
    "SELECT_FIRST",
    "ORIGINAL_PROTECTED",
]
