"""Resolves and builds cell ranges against the column and row models."""

from collections.abc import Sequence

from ..models.cell_range import CellRange
from ..models.column import Column
from .column_model import ColumnModel
from .row_model import RowModel


class RangeController:
    """Range lookups for the in-memory grid."""

    def __init__(self, column_model: ColumnModel, row_model: RowModel):
        self.column_model = column_model
        self.row_model = row_model

    def get_range_start_row(self, cell_range: CellRange) -> int:
        """First row of the range, whichever end the selection started from."""
        bounds = cell_range.row_bounds
        if bounds is not None:
            return bounds[0]
        if cell_range.start_row is not None:
            return cell_range.start_row
        return 0

    def get_range_end_row(self, cell_range: CellRange) -> int:
        """Last row of the range, defaulting to the last displayed row."""
        bounds = cell_range.row_bounds
        if bounds is not None:
            return bounds[1]
        if cell_range.end_row is not None:
            return cell_range.end_row
        return self.row_model.get_row_count() - 1

    def create_cell_range(
        self,
        start_row: int | None = None,
        end_row: int | None = None,
        columns: Sequence[str | Column] | None = None,
        column_start: str | Column | None = None,
        column_end: str | Column | None = None,
    ) -> CellRange:
        """Build a cell range from column ids or a span of displayed columns.

        Args:
            start_row: First selected row
            end_row: Last selected row
            columns: Explicit columns (or ids) in selection order
            column_start: First column of a displayed column span
            column_end: Last column of a displayed column span

        Returns:
            The new CellRange

        Raises:
            ColumnNotFoundError: If a column id is unknown
        """
        if columns is not None:
            cols = [self._resolve(col) for col in columns]
        elif column_start is not None and column_end is not None:
            cols = self._columns_between(self._resolve(column_start), self._resolve(column_end))
        else:
            cols = []
        return CellRange(columns=tuple(cols), start_row=start_row, end_row=end_row)

    def _resolve(self, column: str | Column) -> Column:
        if isinstance(column, Column):
            return column
        return self.column_model.get_column(column)

    def _columns_between(self, first: Column, last: Column) -> list[Column]:
        displayed = self.column_model.get_all_displayed_columns()
        if first not in displayed or last not in displayed:
            return []
        start, end = displayed.index(first), displayed.index(last)
        if start > end:
            start, end = end, start
        return displayed[start : end + 1]
