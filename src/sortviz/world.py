import asyncio
import random
from dataclasses import dataclass

from esper import World

from sortviz.events.bus import EventBus
from sortviz.systems.animation import AnimationSystem
from sortviz.systems.array_system import ArraySystem
from sortviz.systems.input import InputSystem
from sortviz.systems.registry import ElementRegistry
from sortviz.systems.reorder import ReorderEngine
from sortviz.systems.run_controller import RunController
from sortviz.utils.clock import TickClock
from sortviz.utils.layout import RowLayout


def create_world(rng: random.Random | None = None) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    return world


@dataclass(slots=True)
class Systems:
    clock: TickClock
    registry: ElementRegistry
    engine: ReorderEngine
    animation: AnimationSystem
    controller: RunController
    arrays: ArraySystem
    input: InputSystem


def create_systems(
    world: World,
    event_bus: EventBus,
    *,
    layout: RowLayout | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> Systems:
    """Wire the core systems onto one world and event bus."""
    clock = TickClock(event_bus)
    registry = ElementRegistry(world, event_bus)
    engine = ReorderEngine(world, event_bus, registry, clock, layout)
    animation = AnimationSystem(world, event_bus)
    controller = RunController(world, event_bus, registry, engine, clock, loop=loop)
    arrays = ArraySystem(world, event_bus, registry)
    input_system = InputSystem(event_bus)
    return Systems(
        clock=clock,
        registry=registry,
        engine=engine,
        animation=animation,
        controller=controller,
        arrays=arrays,
        input=input_system,
    )
