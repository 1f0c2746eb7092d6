"""Run a single sort without a window, driving the tick clock from asyncio."""
from __future__ import annotations

import asyncio
import random
from typing import Sequence

from sortviz.constants import FPS
from sortviz.events.bus import EVENT_TICK, EventBus
from sortviz.systems.run_controller import RunResult
from sortviz.world import create_systems, create_world


async def run_headless(
    values: Sequence[float],
    algorithm: str,
    *,
    fast: bool = False,
    fps: int = FPS,
    rng: random.Random | None = None,
) -> tuple[RunResult, list[float]]:
    """Sort ``values`` with ``algorithm`` and return the result and final order.

    In real-time mode one tick of ``1/fps`` seconds is emitted per frame. In
    fast mode every tick is a full second and no wall-clock time is spent.
    """
    event_bus = EventBus()
    world = create_world(rng)
    systems = create_systems(world, event_bus)
    systems.registry.build(values)
    task = asyncio.ensure_future(systems.controller.run_algorithm(algorithm))
    dt = 1.0 / fps
    while not task.done():
        if fast:
            await asyncio.sleep(0)
            event_bus.emit(EVENT_TICK, dt=1.0)
        else:
            await asyncio.sleep(dt)
            event_bus.emit(EVENT_TICK, dt=dt)
    return task.result(), systems.registry.values()
