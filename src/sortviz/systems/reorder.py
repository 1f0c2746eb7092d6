"""Reorder engine: animated exchange of two nodes (First, Last, Invert, Play).

The engine swaps the rendered slots of two nodes instantly, offsets them back
to where they were drawn, lets the ``AnimationSystem`` play the offset down to
zero and finally resynchronizes the registry's Order from the rendered slots.
Order is never written while a transition is in flight.
"""
from __future__ import annotations

import logging

from esper import World

from sortviz.components.animation_flip import FlipAnimation
from sortviz.components.node_flags import NodeFlag, NodeFlags
from sortviz.components.render_slot import RenderSlot
from sortviz.constants import EXCHANGE_DURATION, EXCHANGE_SETTLE
from sortviz.errors import StaleElement
from sortviz.events.bus import EVENT_EXCHANGE_COMPLETE, EVENT_EXCHANGE_START, EventBus
from sortviz.systems.registry import ElementRegistry
from sortviz.utils.clock import TickClock
from sortviz.utils.layout import Point, RowLayout

logger = logging.getLogger(__name__)


class ReorderEngine:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        registry: ElementRegistry,
        clock: TickClock,
        layout: RowLayout | None = None,
        *,
        duration: float = EXCHANGE_DURATION,
        settle: float = EXCHANGE_SETTLE,
    ):
        self.world = world
        self.event_bus = event_bus
        self.registry = registry
        self.clock = clock
        self.layout = layout or RowLayout()
        self.duration = duration
        self.settle = settle
        self.exchange_count = 0
        self.in_flight: tuple[int, int] | None = None

    async def exchange(self, a: int, b: int) -> None:
        if a == b:
            return
        for ent in (a, b):
            if not self.registry.contains(ent):
                raise StaleElement(ent)
        self.in_flight = (a, b)
        try:
            self._set_swapping(a, b)
            first = self._measure(a, b)
            slot_a = self.world.component_for_entity(a, RenderSlot)
            slot_b = self.world.component_for_entity(b, RenderSlot)
            slot_a.index, slot_b.index = slot_b.index, slot_a.index
            last = self._measure(a, b)
            # Invert: offset each node back to where it was drawn, no transition yet.
            flips = []
            for ent in (a, b):
                (fx, fy), (lx, ly) = first[ent], last[ent]
                flip = FlipAnimation(dx=fx - lx, dy=fy - ly, duration=self.duration)
                self.world.add_component(ent, flip)
                flips.append(flip)
            # Play: let the animation system ease the offset back to zero.
            for flip in flips:
                flip.phase = 'play'
            self.event_bus.emit(EVENT_EXCHANGE_START, a=a, b=b)
            await self.clock.sleep(self.duration + self.settle)
            for ent in (a, b):
                if not self.registry.contains(ent) or not self.world.entity_exists(ent):
                    raise StaleElement(ent)
            order = self.registry.resync()
        finally:
            self._clear(a, b)
            self.in_flight = None
        self.exchange_count += 1
        logger.debug("Exchanged %s <-> %s", a, b)
        self.event_bus.emit(EVENT_EXCHANGE_COMPLETE, a=a, b=b, order=order)

    def _measure(self, a: int, b: int) -> dict[int, Point]:
        positions = self.layout.positions(self.world)
        return {a: positions[a], b: positions[b]}

    def _set_swapping(self, a: int, b: int) -> None:
        for ent in (a, b):
            self.world.component_for_entity(ent, NodeFlags).add(NodeFlag.SWAPPING)

    def _clear(self, a: int, b: int) -> None:
        for ent in (a, b):
            if not self.world.entity_exists(ent):
                continue
            if self.world.has_component(ent, FlipAnimation):
                self.world.remove_component(ent, FlipAnimation)
            flags = self.world.try_component(ent, NodeFlags)
            if flags is not None:
                flags.discard(NodeFlag.SWAPPING)
