"""Position-indexed view of the array handed to sort drivers.

Drivers only ever see positions. Every call resolves the position through the
registry's live Order, so a driver never holds on to an element across an
exchange. A view is bound to the array that existed when it was created: once
the registry is rebuilt, every call raises ``StaleElement``.
"""
from __future__ import annotations

from sortviz.components.node_flags import NodeFlag
from sortviz.constants import STEP_DELAY
from sortviz.errors import StaleElement
from sortviz.systems.registry import ElementRegistry
from sortviz.systems.reorder import ReorderEngine
from sortviz.utils.clock import TickClock


class SortView:
    def __init__(
        self,
        registry: ElementRegistry,
        engine: ReorderEngine,
        clock: TickClock,
        step_delay: float = STEP_DELAY,
    ):
        self.registry = registry
        self.engine = engine
        self.clock = clock
        self.step_delay = step_delay
        self.generation = registry.generation
        self.reads = 0

    def check(self) -> None:
        if self.registry.generation != self.generation:
            raise StaleElement()

    def length(self) -> int:
        self.check()
        return len(self.registry)

    def value_at(self, pos: int) -> float:
        self.check()
        self.reads += 1
        return self.registry.value_of(self.registry.entity_at(pos))

    async def exchange(self, pos_a: int, pos_b: int) -> None:
        self.check()
        a = self.registry.entity_at(pos_a)
        b = self.registry.entity_at(pos_b)
        await self.engine.exchange(a, b)

    def mark(self, pos: int, flag: NodeFlag) -> None:
        self.check()
        self.registry.flags_of(self.registry.entity_at(pos)).add(flag)

    def unmark(self, pos: int, flag: NodeFlag) -> None:
        self.check()
        self.registry.flags_of(self.registry.entity_at(pos)).discard(flag)

    async def pause(self, seconds: float | None = None) -> None:
        await self.clock.sleep(self.step_delay if seconds is None else seconds)
        self.check()
