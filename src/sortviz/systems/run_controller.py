"""Single-flight execution of sort drivers."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from esper import World

from sortviz.components.node_flags import NodeFlag, NodeFlags
from sortviz.errors import AlreadyRunning
from sortviz.events.bus import EVENT_INPUT_LOCK, EVENT_RUN_REQUEST, EVENT_RUN_STATUS, EventBus
from sortviz.sorting.catalog import SORTERS, Driver
from sortviz.sorting.view import SortView
from sortviz.systems.registry import ElementRegistry
from sortviz.systems.reorder import ReorderEngine
from sortviz.utils.clock import TickClock

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    ok: bool
    error: BaseException | None = None
    exchanges: int = 0


class RunController:
    """Runs one driver at a time and owns the input lock and status reporting.

    The running flag is checked and set before the first suspension point of
    ``run`` so two requests scheduled back to back can never both start.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        registry: ElementRegistry,
        engine: ReorderEngine,
        clock: TickClock,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.registry = registry
        self.engine = engine
        self.clock = clock
        self.running = False
        self.current: str | None = None
        self._loop = loop
        self._tasks: set[asyncio.Task] = set()
        self.event_bus.subscribe(EVENT_RUN_REQUEST, self.on_run_request)

    def make_view(self) -> SortView:
        return SortView(self.registry, self.engine, self.clock)

    async def run(self, driver: Driver, name: str) -> RunResult:
        if self.running:
            error = AlreadyRunning()
            logger.info("Rejected %s while %s is running", name, self.current)
            self._status(str(error), is_error=True)
            return RunResult(ok=False, error=error)
        self.running = True
        self.current = name
        start_count = self.engine.exchange_count
        self.event_bus.emit(EVENT_INPUT_LOCK, locked=True)
        self._status(f"{name} running...")
        logger.info("%s started on %d nodes", name, len(self.registry))
        try:
            await driver(self.make_view())
        except Exception as exc:
            exchanges = self.engine.exchange_count - start_count
            logger.exception("%s failed after %d exchanges", name, exchanges)
            self._clear_transient_flags()
            self._status(f"Error: {str(exc) or exc.__class__.__name__}", is_error=True)
            return RunResult(ok=False, error=exc, exchanges=exchanges)
        else:
            exchanges = self.engine.exchange_count - start_count
            self._mark_all_sorted()
            logger.info("%s completed with %d exchanges", name, exchanges)
            self._status(f"{name} completed")
            return RunResult(ok=True, exchanges=exchanges)
        finally:
            self.running = False
            self.current = None
            self.event_bus.emit(EVENT_INPUT_LOCK, locked=False)

    async def run_algorithm(self, key: str) -> RunResult:
        sorter = SORTERS.get(key)
        if sorter is None:
            raise ValueError(f"Unknown algorithm: {key}")
        return await self.run(sorter.driver, sorter.label)

    def on_run_request(self, sender, **kwargs):
        key = kwargs.get('algorithm')
        if key not in SORTERS:
            return
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(self.run_algorithm(key))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _status(self, message: str, is_error: bool = False) -> None:
        self.event_bus.emit(EVENT_RUN_STATUS, message=message, is_error=is_error)

    def _mark_all_sorted(self) -> None:
        for ent in self.registry.current_order():
            flags = self.world.component_for_entity(ent, NodeFlags)
            flags.discard(NodeFlag.COMPARE, NodeFlag.PIVOT)
            flags.add(NodeFlag.SORTED)

    def _clear_transient_flags(self) -> None:
        for ent in self.registry.current_order():
            flags = self.world.try_component(ent, NodeFlags)
            if flags is not None:
                flags.discard(NodeFlag.COMPARE, NodeFlag.PIVOT, NodeFlag.SWAPPING, NodeFlag.SORTED)
