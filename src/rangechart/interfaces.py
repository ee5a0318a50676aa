"""Collaborator contracts consumed by the chart datasource.

The datasource only reads through these protocols, so any grid exposing the
same methods (or a test fake) can be charted.
"""

from collections.abc import Callable, Sequence
from typing import Any, Protocol

from .models import CellRange, Column, RowNode


class ColumnModelLike(Protocol):  # pragma: no cover - structural only
    """Read access to the grid's columns."""

    def get_all_displayed_columns(self) -> list[Column]: ...

    def get_display_name_for_column(self, column: Column, location: str) -> str | None: ...


class RowModelLike(Protocol):  # pragma: no cover - structural only
    """Read access to the grid's displayed rows."""

    def get_row_count(self) -> int: ...

    def get_row(self, index: int) -> RowNode | None: ...


class ValueResolver(Protocol):  # pragma: no cover - structural only
    """Resolves the value of a column for a row."""

    def get_value(self, column: Column, row_node: RowNode | None) -> Any: ...


class RangeResolver(Protocol):  # pragma: no cover - structural only
    """Resolves the first and last row of a cell range."""

    def get_range_start_row(self, cell_range: CellRange) -> int: ...

    def get_range_end_row(self, cell_range: CellRange) -> int: ...


class Aggregator(Protocol):  # pragma: no cover - structural only
    """Reduces a sequence of values to one aggregate value."""

    def aggregate_values(
        self, values: Sequence[Any], agg_func: str | Callable[[Sequence[Any]], Any]
    ) -> Any: ...
