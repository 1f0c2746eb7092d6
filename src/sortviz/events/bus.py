from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: key=str
EVENT_TEXT_INPUT = "text_input"                    # payload: text=str
EVENT_INPUT_LOCK = "input_lock"                    # payload: locked=bool


# ============================================================================
# ARRAY LIFECYCLE
# ============================================================================
EVENT_ARRAY_GENERATE_REQUEST = "array_generate_request"  # payload: count=int|None
EVENT_ARRAY_LOAD_REQUEST = "array_load_request"          # payload: text=str
EVENT_ARRAY_BUILT = "array_built"                        # payload: entities=list[int], values=list[float]


# ============================================================================
# EXCHANGE & ANIMATION
# ============================================================================
EVENT_EXCHANGE_START = "exchange_start"            # payload: a=int, b=int
EVENT_EXCHANGE_COMPLETE = "exchange_complete"      # payload: a=int, b=int, order=list[int]
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, entity=int


# ============================================================================
# RUNS
# ============================================================================
EVENT_RUN_REQUEST = "run_request"                  # payload: algorithm=str
EVENT_RUN_STATUS = "run_status"                    # payload: message=str, is_error=bool
