import asyncio
import random

import pytest

from sortviz.components.animation_flip import FlipAnimation
from sortviz.components.node_flags import NodeFlag, NodeFlags
from sortviz.components.render_slot import RenderSlot
from sortviz.errors import StaleElement
from sortviz.events.bus import EVENT_ANIMATION_COMPLETE, EVENT_EXCHANGE_COMPLETE, EVENT_EXCHANGE_START
from sortviz.systems.render import RenderSystem
from tests.helpers import drive, drive_async, record


class DummyWindow:
    def __init__(self, width=1000, height=760):
        self.width = width
        self.height = height


def slots(world, ents):
    return [world.component_for_entity(e, RenderSlot).index for e in ents]


def test_adjacent_exchange(env):
    bus, world, systems = env
    a, b, c, d = systems.registry.build([5, 3, 8, 1])
    drive(bus, systems.engine.exchange(a, b))
    assert systems.registry.current_order() == [b, a, c, d]
    assert systems.engine.exchange_count == 1


def test_distant_exchange_moves_only_the_pair(env):
    bus, world, systems = env
    ents = systems.registry.build([1, 2, 3, 4, 5])
    drive(bus, systems.engine.exchange(ents[0], ents[4]))
    order = systems.registry.current_order()
    assert order == [ents[4], ents[1], ents[2], ents[3], ents[0]]
    assert slots(world, order) == [0, 1, 2, 3, 4]


def test_exchange_is_symmetric_in_argument_order(env):
    bus, world, systems = env
    ents = systems.registry.build([1, 2, 3, 4])
    drive(bus, systems.engine.exchange(ents[3], ents[1]))
    assert systems.registry.current_order() == [ents[0], ents[3], ents[2], ents[1]]


def test_self_exchange_is_a_noop(env):
    bus, world, systems = env
    starts = record(bus, EVENT_EXCHANGE_START)
    ents = systems.registry.build([4, 2])
    drive(bus, systems.engine.exchange(ents[0], ents[0]))
    assert systems.registry.current_order() == ents
    assert not list(world.get_component(FlipAnimation))
    assert starts == []
    assert systems.engine.exchange_count == 0
    assert NodeFlag.SWAPPING not in world.component_for_entity(ents[0], NodeFlags)


def test_random_exchanges_keep_order_and_slots_consistent(env):
    bus, world, systems = env
    rng = random.Random(99)
    ents = systems.registry.build([rng.randint(0, 50) for _ in range(9)])

    async def scenario():
        for _ in range(25):
            before = systems.registry.current_order()
            i, j = rng.sample(range(len(before)), 2)
            await systems.engine.exchange(before[i], before[j])
            after = systems.registry.current_order()
            expected = list(before)
            expected[i], expected[j] = expected[j], expected[i]
            assert after == expected
            assert slots(world, after) == list(range(len(after)))

    drive(bus, scenario(), dt=0.1)
    assert sorted(systems.registry.current_order()) == sorted(ents)
    assert systems.engine.exchange_count == 25


def test_order_is_untouched_while_animation_is_in_flight(env):
    bus, world, systems = env
    a, b, c = systems.registry.build([3, 1, 2])

    async def scenario():
        task = asyncio.ensure_future(systems.engine.exchange(a, b))
        await asyncio.sleep(0)
        assert systems.engine.in_flight == (a, b)
        assert systems.registry.current_order() == [a, b, c]
        assert slots(world, [a, b]) == [1, 0]
        assert world.component_for_entity(a, FlipAnimation).phase == 'play'
        assert NodeFlag.SWAPPING in world.component_for_entity(b, NodeFlags)
        await drive_async(bus, task)
        assert systems.engine.in_flight is None
        assert systems.registry.current_order() == [b, a, c]
        assert not world.has_component(a, FlipAnimation)
        assert not world.has_component(b, FlipAnimation)
        assert NodeFlag.SWAPPING not in world.component_for_entity(a, NodeFlags)

    asyncio.run(scenario())


def test_flip_starts_where_nodes_were_drawn_and_ends_at_layout(env):
    bus, world, systems = env
    render = RenderSystem(world, bus, DummyWindow(), systems.registry, systems.engine.layout)
    a, b, c = systems.registry.build([10, 60, 30])
    before = render.draw_coords()

    async def scenario():
        task = asyncio.ensure_future(systems.engine.exchange(a, c))
        await asyncio.sleep(0)
        first = render.draw_coords()
        # The exchanged pair is drawn exactly where it was before the swap.
        for ent in (a, c):
            assert first[ent] == pytest.approx(before[ent])
        await drive_async(bus, task, dt=0.02)

    asyncio.run(scenario())
    after = render.draw_coords()
    assert after == systems.engine.layout.positions(world)
    assert slots(world, [c, b, a]) == [0, 1, 2]
    assert after[a][0] > after[c][0]


def test_exchange_events(env):
    bus, world, systems = env
    starts = record(bus, EVENT_EXCHANGE_START)
    completes = record(bus, EVENT_EXCHANGE_COMPLETE)
    animations = record(bus, EVENT_ANIMATION_COMPLETE)
    a, b = systems.registry.build([2, 1])
    drive(bus, systems.engine.exchange(a, b))
    assert starts == [{"a": a, "b": b}]
    assert completes == [{"a": a, "b": b, "order": [b, a]}]
    assert {(e["kind"], e["entity"]) for e in animations if e["kind"] == "flip"} == {("flip", a), ("flip", b)}


def test_exchange_with_unregistered_element_is_stale(env):
    bus, world, systems = env
    a, b = systems.registry.build([1, 2])
    with pytest.raises(StaleElement):
        drive(bus, systems.engine.exchange(a, 424242))
    assert systems.registry.current_order() == [a, b]
    assert not list(world.get_component(FlipAnimation))


def test_rebuild_mid_animation_raises_stale(env):
    bus, world, systems = env
    a, b = systems.registry.build([2, 1])

    async def scenario():
        task = asyncio.ensure_future(systems.engine.exchange(a, b))
        await asyncio.sleep(0)
        fresh = systems.registry.build([7, 8, 9])
        with pytest.raises(StaleElement):
            await drive_async(bus, task)
        return fresh

    fresh = asyncio.run(scenario())
    assert systems.registry.current_order() == fresh
    assert systems.engine.in_flight is None
    assert systems.engine.exchange_count == 0
