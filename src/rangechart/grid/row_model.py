"""In-memory row model with client-side filtering and sorting."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..models.row import RowNode

logger = logging.getLogger(__name__)

RowFilter = Callable[[Any], bool]
SortKey = Callable[[Any], Any]


class RowModel:
    """Holds all row nodes and the displayed subset after filter and sort."""

    def __init__(self, row_data: Iterable[Any] = ()):
        self._all_nodes: list[RowNode] = []
        self._displayed: list[RowNode] = []
        self._filter: RowFilter | None = None
        self._sort_key: SortKey | None = None
        self._sort_reverse = False
        self.set_row_data(row_data)

    def set_row_data(self, row_data: Iterable[Any]) -> None:
        """Replace all rows; ids are the positions in the supplied data."""
        self._all_nodes = [RowNode(id=str(i), data=data) for i, data in enumerate(row_data)]
        self._refresh()

    def set_filter(self, predicate: RowFilter | None) -> None:
        """Only display rows whose data satisfies predicate (None clears)."""
        self._filter = predicate
        self._refresh()

    def set_sort(self, key: SortKey | None, reverse: bool = False) -> None:
        """Sort displayed rows by key applied to row data (None clears)."""
        self._sort_key = key
        self._sort_reverse = reverse
        self._refresh()

    def _refresh(self) -> None:
        nodes = self._all_nodes
        if self._filter is not None:
            nodes = [node for node in nodes if self._filter(node.data)]
        if self._sort_key is not None:
            sort_key = self._sort_key
            nodes = sorted(nodes, key=lambda node: sort_key(node.data), reverse=self._sort_reverse)

        for node in self._all_nodes:
            node.row_index = None
        for index, node in enumerate(nodes):
            node.row_index = index

        self._displayed = list(nodes)
        logger.debug(f"Row model refreshed: {len(self._displayed)}/{len(self._all_nodes)} rows")

    def get_row_count(self) -> int:
        """Number of displayed rows."""
        return len(self._displayed)

    def get_row(self, index: int) -> RowNode | None:
        if 0 <= index < len(self._displayed):
            return self._displayed[index]
        return None

    def get_row_node(self, row_id: str) -> RowNode | None:
        for node in self._all_nodes:
            if node.id == row_id:
                return node
        return None
