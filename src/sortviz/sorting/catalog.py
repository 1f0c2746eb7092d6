"""Named sort drivers exposed to the invocation surface."""
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict

from sortviz.sorting.bubble import bubble_sort
from sortviz.sorting.insertion import insertion_sort
from sortviz.sorting.merge import merge_sort
from sortviz.sorting.quick import quick_sort
from sortviz.sorting.selection import selection_sort
from sortviz.sorting.view import SortView

Driver = Callable[[SortView], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class Sorter:
    key: str
    label: str
    hotkey: str
    driver: Driver


SORTERS: Dict[str, Sorter] = {
    sorter.key: sorter
    for sorter in (
        Sorter("bubble", "Bubble Sort", "b", bubble_sort),
        Sorter("selection", "Selection Sort", "s", selection_sort),
        Sorter("insertion", "Insertion Sort", "i", insertion_sort),
        Sorter("quick", "Quick Sort", "q", quick_sort),
        Sorter("merge", "Merge Sort", "m", merge_sort),
    )
}

HOTKEYS: Dict[str, Sorter] = {sorter.hotkey: sorter for sorter in SORTERS.values()}
