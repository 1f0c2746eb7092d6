import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from sortviz.events.bus import EventBus
from sortviz.world import create_systems, create_world


@pytest.fixture
def env():
    import random
    bus = EventBus()
    world = create_world(random.Random(1234))
    systems = create_systems(world, bus)
    return bus, world, systems
