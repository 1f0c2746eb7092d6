from dataclasses import dataclass

@dataclass(slots=True)
class NodeSize:
    """Presentation diameter in pixels; never consulted for ordering."""
    size: int
