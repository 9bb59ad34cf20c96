"""Navigation core: machine state, listeners and the timeline."""

from steptrace.core.listener import CallbackListener, UpdateListener
from steptrace.core.state import ACCU, IAR, State
from steptrace.core.timeline import Timeline
from steptrace.core.validation import validate_log

__all__ = [
    "State",
    "IAR",
    "ACCU",
    "Timeline",
    "UpdateListener",
    "CallbackListener",
    "validate_log",
]
