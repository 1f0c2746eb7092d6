from esper import World

from sortviz.components.node_size import NodeSize
from sortviz.components.render_slot import RenderSlot
from sortviz.utils.layout import RowLayout


def test_single_line_is_centered():
    layout = RowLayout(width=400, top_y=300, gap=10, label_width=20, side_margin=0)
    centers = layout.centers([20, 20, 20])
    assert [y for _, y in centers] == [300, 300, 300]
    # total width 80, so the row starts at 160
    assert [x for x, _ in centers] == [170, 200, 230]


def test_wide_nodes_use_their_own_width():
    layout = RowLayout(width=400, top_y=300, gap=10, label_width=20, side_margin=0)
    (x1, _), (x2, _) = layout.centers([60, 20])
    assert x2 - x1 == 30 + 10 + 10


def test_overflowing_row_wraps_downwards():
    layout = RowLayout(width=100, top_y=300, line_height=50, gap=10, label_width=20, side_margin=0)
    centers = layout.centers([20] * 6)
    ys = [y for _, y in centers]
    # 20 + 10 + 20 + 10 + 20 = 80 fits, a fourth node would need 110
    assert ys[:3] == [300] * 3
    assert ys[3:] == [250] * 3


def test_positions_follow_render_slots():
    world = World()
    a = world.create_entity(RenderSlot(1), NodeSize(20))
    b = world.create_entity(RenderSlot(0), NodeSize(20))
    layout = RowLayout(width=400, top_y=300, gap=10, label_width=20, side_margin=0)
    positions = layout.positions(world)
    assert positions[b][0] < positions[a][0]
    world.component_for_entity(a, RenderSlot).index = 0
    world.component_for_entity(b, RenderSlot).index = 1
    swapped = layout.positions(world)
    assert swapped[a] == positions[b]
    assert swapped[b] == positions[a]
