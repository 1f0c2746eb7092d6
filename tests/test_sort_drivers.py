import random

import pytest

from sortviz.components.node_flags import NodeFlag
from sortviz.events.bus import EVENT_EXCHANGE_START
from sortviz.sorting.catalog import HOTKEYS, SORTERS
from tests.helpers import drive, flags_of, record

ALGORITHMS = sorted(SORTERS)

_rng = random.Random(2024)
CASES = [
    [],
    [1],
    [2, 1],
    [2, 2, 2],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [3, -1.5, 3, 0, 2.25, -1.5],
] + [[_rng.randint(0, 6) for _ in range(n)] for n in (3, 7, 10, 12)]


def inversions(values):
    return sum(1 for i in range(len(values)) for j in range(i + 1, len(values)) if values[i] > values[j])


def run_sort(env, key, values):
    bus, world, systems = env
    systems.registry.build(values)
    return drive(bus, systems.controller.run_algorithm(key), dt=1.0)


@pytest.mark.parametrize("key", ALGORITHMS)
@pytest.mark.parametrize("values", CASES, ids=lambda v: "-".join(map(str, v)) or "empty")
def test_sorts_and_preserves_values(env, key, values):
    bus, world, systems = env
    result = run_sort(env, key, values)
    assert result.ok, result.error
    final = systems.registry.values()
    assert final == sorted(values)
    order = systems.registry.current_order()
    assert all(NodeFlag.SORTED in flags for flags in flags_of(world, order))


@pytest.mark.parametrize("key", ["bubble", "insertion", "merge"])
@pytest.mark.parametrize("values", CASES[2:], ids=lambda v: "-".join(map(str, v)))
def test_adjacent_exchange_sorts_resolve_one_inversion_per_exchange(env, key, values):
    bus, world, systems = env
    distances = []
    bus.subscribe(EVENT_EXCHANGE_START, lambda sender, **kw: distances.append(
        abs(systems.registry.current_order().index(kw["a"]) - systems.registry.current_order().index(kw["b"]))
    ))
    result = run_sort(env, key, values)
    assert result.exchanges == inversions(values)
    assert set(distances) <= {1}


@pytest.mark.parametrize("values", CASES, ids=lambda v: "-".join(map(str, v)) or "empty")
def test_selection_exchanges_at_most_once_per_position(env, values):
    result = run_sort(env, "selection", values)
    assert result.exchanges <= max(0, len(values) - 1)


@pytest.mark.parametrize("key", ALGORITHMS)
def test_already_sorted_input_needs_no_exchanges(env, key):
    result = run_sort(env, key, [1, 2, 2, 3, 9])
    assert result.ok
    assert result.exchanges == 0


@pytest.mark.parametrize("key", ALGORITHMS)
def test_all_equal_input_needs_no_exchanges(env, key):
    result = run_sort(env, key, [4, 4, 4, 4])
    assert result.ok
    assert result.exchanges == 0


@pytest.mark.parametrize("key", ALGORITHMS)
def test_drivers_leave_no_transient_marks(env, key):
    bus, world, systems = env
    ents = systems.registry.build([4, 1, 3, 9, 0, 2])
    drive(bus, SORTERS[key].driver(systems.controller.make_view()), dt=1.0)
    for flags in flags_of(world, ents):
        assert not flags & {NodeFlag.COMPARE, NodeFlag.PIVOT, NodeFlag.SWAPPING}
    if key in ("bubble", "selection", "quick", "merge"):
        assert all(NodeFlag.SORTED in flags for flags in flags_of(world, ents))


def test_bubble_scenario_four_exchanges(env):
    bus, world, systems = env
    result = run_sort(env, "bubble", [5, 3, 8, 1])
    assert result.ok
    assert systems.registry.values() == [1, 3, 5, 8]
    assert result.exchanges == 4


@pytest.mark.parametrize("key", ALGORITHMS)
def test_empty_array_completes_immediately(env, key):
    bus, world, systems = env
    systems.registry.build([])
    starts = record(bus, EVENT_EXCHANGE_START)
    result = drive(bus, systems.controller.run_algorithm(key), max_ticks=0)
    assert result.ok
    assert result.exchanges == 0
    assert starts == []


def test_selection_all_equal_scenario(env):
    bus, world, systems = env
    result = run_sort(env, "selection", [2, 2, 2])
    assert result.ok and result.exchanges == 0
    order = systems.registry.current_order()
    assert all(NodeFlag.SORTED in flags for flags in flags_of(world, order))


def test_quick_two_elements_scenario(env):
    bus, world, systems = env
    nine, one = systems.registry.build([9, 1])
    starts = record(bus, EVENT_EXCHANGE_START)
    result = drive(bus, systems.controller.run_algorithm("quick"), dt=1.0)
    assert result.ok
    assert starts == [{"a": nine, "b": one}]
    assert systems.registry.current_order() == [one, nine]
    assert systems.registry.values() == [1, 9]


def test_hotkeys_cover_every_sorter():
    assert sorted(s.key for s in HOTKEYS.values()) == ALGORITHMS
    assert len(SORTERS) == 5
