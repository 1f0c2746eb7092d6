from sortviz.components.node_flags import NodeFlag
from sortviz.sorting.view import SortView


async def bubble_sort(view: SortView) -> None:
    n = view.length()
    for i in range(n):
        for j in range(n - i - 1):
            view.mark(j, NodeFlag.COMPARE)
            view.mark(j + 1, NodeFlag.COMPARE)
            await view.pause()
            if view.value_at(j) > view.value_at(j + 1):
                await view.exchange(j, j + 1)
            view.unmark(j, NodeFlag.COMPARE)
            view.unmark(j + 1, NodeFlag.COMPARE)
        view.mark(n - i - 1, NodeFlag.SORTED)
    if n:
        view.mark(0, NodeFlag.SORTED)
