from __future__ import annotations

import asyncio
from typing import Awaitable, Sequence

from sortviz.components.node_flags import NodeFlag, NodeFlags
from sortviz.events.bus import EVENT_TICK, EventBus


async def drive_async(event_bus: EventBus, aw: Awaitable, *, dt: float = 0.05, max_ticks: int = 100_000):
    """Alternate loop iterations and ticks until ``aw`` finishes; return its result."""
    task = asyncio.ensure_future(aw)
    ticks = 0
    while True:
        await asyncio.sleep(0)
        if task.done():
            return task.result()
        if ticks >= max_ticks:
            task.cancel()
            raise AssertionError(f"not finished after {ticks} ticks")
        event_bus.emit(EVENT_TICK, dt=dt)
        ticks += 1


def drive(event_bus: EventBus, aw: Awaitable, *, dt: float = 0.05, max_ticks: int = 100_000):
    return asyncio.run(drive_async(event_bus, aw, dt=dt, max_ticks=max_ticks))


def flags_of(world, entities: Sequence[int]) -> list[set[NodeFlag]]:
    return [set(world.component_for_entity(ent, NodeFlags).flags) for ent in entities]


def record(event_bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []
    event_bus.subscribe(name, lambda sender, **kwargs: received.append(kwargs))
    return received
