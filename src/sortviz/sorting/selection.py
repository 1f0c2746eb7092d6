from sortviz.components.node_flags import NodeFlag
from sortviz.sorting.view import SortView


async def selection_sort(view: SortView) -> None:
    """Selection sort with at most one exchange per outer iteration."""
    n = view.length()
    for i in range(n):
        min_index = i
        view.mark(i, NodeFlag.COMPARE)
        for j in range(i + 1, n):
            view.mark(j, NodeFlag.COMPARE)
            await view.pause()
            if view.value_at(j) < view.value_at(min_index):
                if min_index != i:
                    view.unmark(min_index, NodeFlag.COMPARE)
                min_index = j
            else:
                view.unmark(j, NodeFlag.COMPARE)
        if min_index != i:
            await view.exchange(min_index, i)
            view.unmark(min_index, NodeFlag.COMPARE)
        view.unmark(i, NodeFlag.COMPARE)
        view.mark(i, NodeFlag.SORTED)
