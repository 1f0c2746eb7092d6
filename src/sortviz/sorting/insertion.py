from sortviz.components.node_flags import NodeFlag
from sortviz.sorting.view import SortView


async def insertion_sort(view: SortView) -> None:
    """Insertion sort that moves the key left one adjacent exchange at a time."""
    for i in range(1, view.length()):
        view.mark(i, NodeFlag.COMPARE)
        await view.pause()
        j = i - 1
        # The key sits at j + 1 throughout the walk.
        while j >= 0 and view.value_at(j) > view.value_at(j + 1):
            view.mark(j, NodeFlag.COMPARE)
            await view.exchange(j, j + 1)
            view.unmark(j + 1, NodeFlag.COMPARE)
            j -= 1
            await view.pause()
        view.unmark(j + 1, NodeFlag.COMPARE)
