"""Tick-driven timers for the cooperative sort runs.

Every suspension point of a run awaits ``TickClock.sleep``. Time only advances
when ``EVENT_TICK`` is emitted, so the window, the headless runner and the
tests all control the pace of an animation the same way.
"""
from __future__ import annotations

import asyncio
import heapq
import itertools

from sortviz.events.bus import EVENT_TICK, EventBus

_EPSILON = 1e-9


class TickClock:
    def __init__(self, event_bus: EventBus):
        self.now = 0.0
        self._timers: list[tuple[float, int, asyncio.Future]] = []
        self._sequence = itertools.count()
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    async def sleep(self, seconds: float) -> None:
        if seconds <= 0:
            return
        future = asyncio.get_running_loop().create_future()
        heapq.heappush(self._timers, (self.now + seconds, next(self._sequence), future))
        await future

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        self.now += float(dt)
        while self._timers and self._timers[0][0] <= self.now + _EPSILON:
            _, _, future = heapq.heappop(self._timers)
            if not future.done():
                future.set_result(None)

    @property
    def pending(self) -> int:
        return sum(1 for _, _, future in self._timers if not future.done())


def pump(loop: asyncio.AbstractEventLoop, iterations: int = 4) -> None:
    """Run a few iterations of a loop that is not otherwise running.

    Used by the arcade window after each tick so that coroutines woken by the
    tick advance to their next suspension point before the frame is drawn.
    """
    async def _yield():
        for _ in range(iterations):
            await asyncio.sleep(0)
    loop.run_until_complete(_yield())
