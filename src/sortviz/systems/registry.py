"""Element registry: node entities, their logical values and the current Order."""
from __future__ import annotations

import logging
from typing import Sequence

from esper import World

from sortviz.components.fresh_highlight import FreshHighlight
from sortviz.components.node_flags import NodeFlag, NodeFlags
from sortviz.components.node_size import NodeSize
from sortviz.components.node_value import NodeValue
from sortviz.components.render_slot import RenderSlot
from sortviz.constants import FRESH_HIGHLIGHT_DURATION
from sortviz.errors import UnknownElement
from sortviz.events.bus import EVENT_ARRAY_BUILT, EventBus
from sortviz.utils.array_source import visual_sizes

logger = logging.getLogger(__name__)


class ElementRegistry:
    """Owns the node entities of the current array.

    ``Order`` is only rewritten by ``build`` (wholesale) and ``resync`` (called
    by the reorder engine once an exchange has fully settled). Every ``build``
    bumps ``generation``.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._order: list[int] = []
        self._values: dict[int, float] = {}
        self.generation = 0

    def __len__(self) -> int:
        return len(self._order)

    def build(self, values: Sequence[float]) -> list[int]:
        values = list(values)
        for ent in list(self._values):
            if self.world.entity_exists(ent):
                self.world.delete_entity(ent, immediate=True)
        self._order = []
        self._values = {}
        self.generation += 1
        for index, (value, size) in enumerate(zip(values, visual_sizes(values))):
            ent = self.world.create_entity(
                NodeValue(value),
                NodeSize(size),
                NodeFlags({NodeFlag.FRESH}),
                RenderSlot(index),
                FreshHighlight(FRESH_HIGHLIGHT_DURATION),
            )
            self._order.append(ent)
            self._values[ent] = value
        logger.debug("Built array of %d nodes", len(self._order))
        self.event_bus.emit(EVENT_ARRAY_BUILT, entities=list(self._order), values=values)
        return list(self._order)

    def current_order(self) -> list[int]:
        return list(self._order)

    def entity_at(self, pos: int) -> int:
        if pos < 0 or pos >= len(self._order):
            raise IndexError(f"position {pos} out of range for {len(self._order)} nodes")
        return self._order[pos]

    def contains(self, entity: int) -> bool:
        return entity in self._values

    def value_of(self, entity: int) -> float:
        try:
            return self._values[entity]
        except KeyError:
            raise UnknownElement(entity) from None

    def values(self) -> list[float]:
        return [self._values[ent] for ent in self._order]

    def flags_of(self, entity: int) -> NodeFlags:
        if entity not in self._values:
            raise UnknownElement(entity)
        return self.world.component_for_entity(entity, NodeFlags)

    def resync(self) -> list[int]:
        """Re-derive Order from the rendered slot of every registered node."""
        slots = sorted(
            (self.world.component_for_entity(ent, RenderSlot).index, ent)
            for ent in self._values
        )
        self._order = [ent for _, ent in slots]
        return list(self._order)
