"""Row layout for nodes: wrappers flow left to right and wrap onto new lines."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from esper import World

from sortviz.components.node_size import NodeSize
from sortviz.components.render_slot import RenderSlot
from sortviz.constants import (
    LABEL_MIN_WIDTH, NODE_GAP, ROW_HEIGHT, ROW_SIDE_MARGIN, ROW_TOP_Y, WINDOW_WIDTH,
)

Point = Tuple[float, float]


@dataclass(slots=True)
class RowLayout:
    width: float = WINDOW_WIDTH
    top_y: float = ROW_TOP_Y
    line_height: float = ROW_HEIGHT
    gap: float = NODE_GAP
    label_width: float = LABEL_MIN_WIDTH
    side_margin: float = ROW_SIDE_MARGIN

    def centers(self, sizes: Sequence[int]) -> list[Point]:
        """Return the center of every wrapper, in slot order."""
        usable = max(1.0, self.width - 2 * self.side_margin)
        lines: list[list[float]] = [[]]
        line_width = 0.0
        for size in sizes:
            w = max(float(size), self.label_width)
            needed = w if not lines[-1] else line_width + self.gap + w
            if lines[-1] and needed > usable:
                lines.append([])
                line_width = 0.0
                needed = w
            lines[-1].append(w)
            line_width = needed
        out: list[Point] = []
        for line_no, widths in enumerate(lines):
            if not widths:
                continue
            total = sum(widths) + self.gap * (len(widths) - 1)
            x = (self.width - total) / 2
            y = self.top_y - line_no * self.line_height
            for w in widths:
                out.append((x + w / 2, y))
                x += w + self.gap
        return out

    def positions(self, world: World) -> Dict[int, Point]:
        """Rendered position of every node entity, keyed by entity id."""
        rows = sorted(
            (slot.index, ent, size.size)
            for ent, (slot, size) in world.get_components(RenderSlot, NodeSize)
        )
        centers = self.centers([size for _, _, size in rows])
        return {ent: center for (_, ent, _), center in zip(rows, centers)}
