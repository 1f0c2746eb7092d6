from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class NodeValue:
    """Logical value of a node. Fixed for the lifetime of the array."""
    value: float
