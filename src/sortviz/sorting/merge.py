"""Merge sort whose merge step uses adjacent exchanges only.

When the head of the right run is smaller than the head of the left run it is
walked left to the left head's position. The whole left run shifts right by
one, so the left head, the end of the left run and the head of the right run
all move one position to the right.
"""
from sortviz.components.node_flags import NodeFlag
from sortviz.constants import MERGE_STEP_DELAY
from sortviz.sorting.view import SortView


async def merge_sort(view: SortView) -> None:
    await _merge_sort(view, 0, view.length() - 1)


async def _merge_sort(view: SortView, low: int, high: int) -> None:
    if low >= high:
        return
    mid = low + (high - low) // 2
    await _merge_sort(view, low, mid)
    await _merge_sort(view, mid + 1, high)
    await _merge(view, low, mid, high)


async def _merge(view: SortView, low: int, mid: int, high: int) -> None:
    i = low
    j = mid + 1
    while i <= mid and j <= high:
        view.mark(i, NodeFlag.COMPARE)
        view.mark(j, NodeFlag.COMPARE)
        await view.pause()
        in_order = view.value_at(i) <= view.value_at(j)
        view.unmark(i, NodeFlag.COMPARE)
        view.unmark(j, NodeFlag.COMPARE)
        if in_order:
            i += 1
            continue
        for idx in range(j, i, -1):
            await view.exchange(idx - 1, idx)
            await view.pause(MERGE_STEP_DELAY)
        i += 1
        mid += 1
        j += 1
    for x in range(low, high + 1):
        view.mark(x, NodeFlag.SORTED)
