from sortviz.events.bus import (
    EventBus,
    EVENT_ARRAY_GENERATE_REQUEST,
    EVENT_ARRAY_LOAD_REQUEST,
    EVENT_INPUT_LOCK,
    EVENT_KEY_PRESS,
    EVENT_RUN_REQUEST,
    EVENT_TEXT_INPUT,
)
from sortviz.sorting.catalog import HOTKEYS

ENTRY_CHARS = frozenset("0123456789.,-+eE ")
ENTRY_MAX_LENGTH = 2000


class InputSystem:
    """Maps key presses and typed text to array and run requests.

    Everything is ignored while a run holds the input lock.
    """
    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.locked = False
        self.buffer = ""
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_TEXT_INPUT, self.on_text_input)
        self.event_bus.subscribe(EVENT_INPUT_LOCK, self.on_input_lock)

    def on_input_lock(self, sender, **kwargs):
        self.locked = bool(kwargs.get('locked'))

    def on_key_press(self, sender, **kwargs):
        key = kwargs.get('key')
        if not key or self.locked:
            return
        key = key.lower()
        if key == 'enter':
            self.event_bus.emit(EVENT_ARRAY_LOAD_REQUEST, text=self.buffer)
        elif key == 'backspace':
            self.buffer = self.buffer[:-1]
        elif key == 'escape':
            self.buffer = ""
        elif key == 'n':
            self.event_bus.emit(EVENT_ARRAY_GENERATE_REQUEST, count=None)
        elif key in HOTKEYS:
            self.event_bus.emit(EVENT_RUN_REQUEST, algorithm=HOTKEYS[key].key)

    def on_text_input(self, sender, **kwargs):
        text = kwargs.get('text') or ""
        if self.locked:
            return
        accepted = "".join(ch for ch in text if ch in ENTRY_CHARS)
        if accepted:
            self.buffer = (self.buffer + accepted)[:ENTRY_MAX_LENGTH]
