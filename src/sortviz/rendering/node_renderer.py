from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

from sortviz.components.node_flags import NodeFlag, NodeFlags
from sortviz.components.node_size import NodeSize
from sortviz.components.node_value import NodeValue
from sortviz.constants import (
    COMPARE_COLOR, FRESH_COLOR, LABEL_COLOR, LABEL_FONT_SIZE, LABEL_OFFSET, NODE_COLOR,
    PIVOT_COLOR, SORTED_COLOR, SWAPPING_COLOR,
)
from sortviz.utils.array_source import format_value

if TYPE_CHECKING:
    from sortviz.systems.render import RenderSystem

Color = Tuple[int, int, int]

# First matching flag wins.
FLAG_COLORS: tuple[tuple[NodeFlag, Color], ...] = (
    (NodeFlag.SWAPPING, SWAPPING_COLOR),
    (NodeFlag.PIVOT, PIVOT_COLOR),
    (NodeFlag.COMPARE, COMPARE_COLOR),
    (NodeFlag.SORTED, SORTED_COLOR),
    (NodeFlag.FRESH, FRESH_COLOR),
)


def node_color(flags: NodeFlags | None) -> Color:
    if flags is not None:
        for flag, color in FLAG_COLORS:
            if flag in flags:
                return color
    return NODE_COLOR


class NodeRenderer:
    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, coords: Dict[int, Tuple[float, float]]) -> None:
        world = self._rs.world
        for ent in self._rs.registry.current_order():
            if ent not in coords:
                continue
            x, y = coords[ent]
            size = world.component_for_entity(ent, NodeSize).size
            value = world.component_for_entity(ent, NodeValue).value
            flags = world.try_component(ent, NodeFlags)
            radius = size / 2
            arcade.draw_circle_filled(x, y, radius, node_color(flags))
            if flags is not None and NodeFlag.SWAPPING in flags:
                arcade.draw_circle_outline(x, y, radius + 2, SWAPPING_COLOR, 2)
            arcade.draw_text(
                format_value(value),
                x,
                y - radius - LABEL_OFFSET,
                LABEL_COLOR,
                LABEL_FONT_SIZE,
                anchor_x="center",
            )
