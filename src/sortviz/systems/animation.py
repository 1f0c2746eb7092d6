from esper import World

from sortviz.components.animation_flip import FlipAnimation
from sortviz.components.fresh_highlight import FreshHighlight
from sortviz.components.node_flags import NodeFlag, NodeFlags
from sortviz.events.bus import EVENT_ANIMATION_COMPLETE, EVENT_TICK, EventBus


class AnimationSystem:
    """Drives timing of FLIP transitions and fresh highlights on each tick."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for ent, flip in list(self.world.get_component(FlipAnimation)):
            if flip.phase != 'play':
                continue
            flip.progress += dt / flip.duration if flip.duration > 0 else 1.0
            if flip.progress >= 1.0:
                flip.progress = 1.0
                flip.phase = 'done'
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='flip', entity=ent)
        for ent, fresh in list(self.world.get_component(FreshHighlight)):
            fresh.remaining -= dt
            if fresh.remaining > 0.0:
                continue
            flags = self.world.try_component(ent, NodeFlags)
            if flags is not None:
                flags.discard(NodeFlag.FRESH)
            self.world.remove_component(ent, FreshHighlight)
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='fresh', entity=ent)
