"""Transient cosmetic flags attached to each node."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Set


class NodeFlag(Enum):
    COMPARE = "compare"
    PIVOT = "pivot"
    SORTED = "sorted"
    SWAPPING = "swapping"
    FRESH = "fresh"


@dataclass(slots=True)
class NodeFlags:
    flags: Set[NodeFlag] = field(default_factory=set)

    def add(self, flag: NodeFlag) -> None:
        self.flags.add(flag)

    def discard(self, *flags: NodeFlag) -> None:
        for flag in flags:
            self.flags.discard(flag)

    def __contains__(self, flag: NodeFlag) -> bool:
        return flag in self.flags
