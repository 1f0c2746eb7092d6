from typing import Dict, Tuple

from esper import World

from sortviz.components.animation_flip import FlipAnimation
from sortviz.constants import HELP_COLOR, LABEL_COLOR, STATUS_COLOR, STATUS_ERROR_COLOR
from sortviz.events.bus import EVENT_INPUT_LOCK, EVENT_RUN_STATUS, EventBus
from sortviz.rendering.node_renderer import NodeRenderer
from sortviz.sorting.catalog import SORTERS
from sortviz.systems.input import InputSystem
from sortviz.systems.registry import ElementRegistry
from sortviz.utils.layout import RowLayout

HELP_TEXT = "   ".join(
    [f"[{s.hotkey.upper()}] {s.label}" for s in SORTERS.values()]
    + ["[N] New array", "type numbers + [Enter] to load"]
)


class RenderSystem:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        window,
        registry: ElementRegistry,
        layout: RowLayout,
        input_system: InputSystem | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.registry = registry
        self.layout = layout
        self.input_system = input_system
        self.status_message = ""
        self.status_is_error = False
        self.input_locked = False
        self._last_draw_coords: Dict[int, Tuple[float, float]] = {}
        self._node_renderer = NodeRenderer(self)
        self.event_bus.subscribe(EVENT_RUN_STATUS, self.on_run_status)
        self.event_bus.subscribe(EVENT_INPUT_LOCK, self.on_input_lock)

    def on_run_status(self, sender, **kwargs):
        self.status_message = kwargs.get('message', '')
        self.status_is_error = bool(kwargs.get('is_error', False))

    def on_input_lock(self, sender, **kwargs):
        self.input_locked = bool(kwargs.get('locked'))

    def notify_resize(self, width: int, height: int):
        self.layout.width = width

    def draw_coords(self) -> Dict[int, Tuple[float, float]]:
        """Layout position of each node plus its in-flight FLIP offset."""
        coords = self.layout.positions(self.world)
        for ent, flip in self.world.get_component(FlipAnimation):
            if ent in coords:
                x, y = coords[ent]
                dx, dy = flip.offset()
                coords[ent] = (x + dx, y + dy)
        return coords

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if self.layout.width != self.window.width:
            self.layout.width = self.window.width
        coords = self.draw_coords()
        self._last_draw_coords = coords
        if headless:
            return
        self._node_renderer.render(arcade, coords)
        top = self.window.height
        color = STATUS_ERROR_COLOR if self.status_is_error else STATUS_COLOR
        if self.status_message:
            arcade.draw_text(self.status_message, 20, top - 36, color, 16)
        entry = self.input_system.buffer if self.input_system else ""
        prompt = "(locked) " if self.input_locked else "> "
        arcade.draw_text(prompt + entry, 20, top - 66, LABEL_COLOR, 13)
        arcade.draw_text(HELP_TEXT, 20, 16, HELP_COLOR, 11)
