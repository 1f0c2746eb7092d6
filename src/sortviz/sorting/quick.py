from sortviz.components.node_flags import NodeFlag
from sortviz.sorting.view import SortView


async def quick_sort(view: SortView) -> None:
    await _quick_sort(view, 0, view.length() - 1)


async def _quick_sort(view: SortView, start: int, end: int) -> None:
    if start >= end:
        if start == end:
            view.mark(start, NodeFlag.SORTED)
        return
    index = await _partition(view, start, end)
    # Left then right, one after the other, so the animation stays in order.
    await _quick_sort(view, start, index - 1)
    await _quick_sort(view, index + 1, end)


async def _partition(view: SortView, start: int, end: int) -> int:
    """Lomuto partition around the last element of the range."""
    pivot_index = start
    view.mark(end, NodeFlag.PIVOT)
    for i in range(start, end):
        view.mark(i, NodeFlag.COMPARE)
        await view.pause()
        less = view.value_at(i) < view.value_at(end)
        view.unmark(i, NodeFlag.COMPARE)
        if less:
            await view.exchange(i, pivot_index)
            pivot_index += 1
    # An equal value already sitting at pivot_index needs no exchange.
    if view.value_at(pivot_index) > view.value_at(end):
        await view.exchange(pivot_index, end)
    view.unmark(end, NodeFlag.PIVOT)
    view.unmark(pivot_index, NodeFlag.PIVOT)
    view.mark(pivot_index, NodeFlag.SORTED)
    return pivot_index
