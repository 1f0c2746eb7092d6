"""Array source wiring: random generation and typed input feed the registry."""
from __future__ import annotations

import logging

from esper import World

from sortviz.constants import DEFAULT_ARRAY_SIZE
from sortviz.errors import AlreadyRunning, ArrayInputError
from sortviz.events.bus import (
    EVENT_ARRAY_GENERATE_REQUEST, EVENT_ARRAY_LOAD_REQUEST, EVENT_INPUT_LOCK, EVENT_RUN_STATUS,
    EventBus,
)
from sortviz.systems.registry import ElementRegistry
from sortviz.utils.array_source import parse_values, random_values

logger = logging.getLogger(__name__)


class ArraySystem:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        registry: ElementRegistry,
        *,
        default_count: int = DEFAULT_ARRAY_SIZE,
    ):
        self.world = world
        self.event_bus = event_bus
        self.registry = registry
        self.default_count = default_count
        self.locked = False
        self.event_bus.subscribe(EVENT_ARRAY_GENERATE_REQUEST, self.on_generate_request)
        self.event_bus.subscribe(EVENT_ARRAY_LOAD_REQUEST, self.on_load_request)
        self.event_bus.subscribe(EVENT_INPUT_LOCK, self.on_input_lock)

    def generate(self, count: int | None = None) -> list[int] | None:
        try:
            values = random_values(self.default_count if count is None else count,
                                   getattr(self.world, "random", None))
        except ArrayInputError as exc:
            self._status(str(exc), is_error=True)
            return None
        entities = self.registry.build(values)
        self._status("Random array generated")
        return entities

    def load(self, text: str) -> list[int] | None:
        try:
            values = parse_values(text)
        except ArrayInputError as exc:
            logger.debug("Rejected array input %r: %s", text, exc)
            self._status(str(exc), is_error=True)
            return None
        entities = self.registry.build(values)
        self._status(f"Array loaded ({len(values)} elements)")
        return entities

    def on_input_lock(self, sender, **kwargs):
        self.locked = bool(kwargs.get('locked'))

    def on_generate_request(self, sender, **kwargs):
        if self._reject_while_locked():
            return
        self.generate(kwargs.get('count'))

    def on_load_request(self, sender, **kwargs):
        if self._reject_while_locked():
            return
        self.load(kwargs.get('text', ''))

    def _reject_while_locked(self) -> bool:
        # No rebuilds while a run holds the input lock.
        if self.locked:
            self._status(str(AlreadyRunning()), is_error=True)
        return self.locked

    def _status(self, message: str, is_error: bool = False) -> None:
        self.event_bus.emit(EVENT_RUN_STATUS, message=message, is_error=is_error)
