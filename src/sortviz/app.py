"""Arcade window for the sort visualizer.

Sets up the world, event bus, systems and an asyncio loop that is pumped once
per frame after the tick has been emitted.
"""
import asyncio
import random

import arcade

from sortviz.constants import BACKGROUND_COLOR, FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from sortviz.events.bus import (
    EVENT_ARRAY_LOAD_REQUEST, EVENT_KEY_PRESS, EVENT_TEXT_INPUT, EVENT_TICK, EventBus,
)
from sortviz.systems.render import RenderSystem
from sortviz.utils.clock import pump
from sortviz.utils.layout import RowLayout
from sortviz.world import create_systems, create_world

_NAMED_KEYS = {
    arcade.key.RETURN: 'enter',
    arcade.key.ENTER: 'enter',
    arcade.key.NUM_ENTER: 'enter',
    arcade.key.BACKSPACE: 'backspace',
    arcade.key.ESCAPE: 'escape',
}


def key_name(symbol: int) -> str | None:
    if symbol in _NAMED_KEYS:
        return _NAMED_KEYS[symbol]
    if arcade.key.A <= symbol <= arcade.key.Z:
        return chr(symbol)
    return None


class SortWindow(arcade.Window):
    def __init__(self, *, values_text: str | None = None, count: int | None = None,
                 rng: random.Random | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1 / FPS)
        self.loop = asyncio.new_event_loop()
        self.event_bus = EventBus()
        self.world = create_world(rng)
        self.layout = RowLayout(width=self.width)
        self.systems = create_systems(self.world, self.event_bus, layout=self.layout, loop=self.loop)
        self.render_system = RenderSystem(
            self.world,
            self.event_bus,
            self,
            self.systems.registry,
            self.layout,
            input_system=self.systems.input,
        )
        arcade.set_background_color(BACKGROUND_COLOR)
        if values_text:
            self.systems.input.buffer = values_text
            self.event_bus.emit(EVENT_ARRAY_LOAD_REQUEST, text=values_text)
        else:
            self.systems.arrays.generate(count)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)
        pump(self.loop)

    def on_key_press(self, symbol: int, modifiers: int):
        name = key_name(symbol)
        if name is not None:
            self.event_bus.emit(EVENT_KEY_PRESS, key=name)

    def on_text(self, text: str):
        self.event_bus.emit(EVENT_TEXT_INPUT, text=text)

    def on_close(self):
        for task in asyncio.all_tasks(self.loop):
            task.cancel()
        pump(self.loop)
        self.loop.close()
        super().on_close()


def run_window(*, values_text: str | None = None, count: int | None = None,
               rng: random.Random | None = None) -> None:
    SortWindow(values_text=values_text, count=count, rng=rng)
    arcade.run()
