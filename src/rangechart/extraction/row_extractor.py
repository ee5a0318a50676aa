"""Reads the rows of a cell range out of the row model."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..interfaces import RangeResolver, RowModelLike, ValueResolver
from ..models.cell_range import CellRange
from ..models.column import Column

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowSpan:
    """Rows of a range after clamping to the live row count."""

    start: int
    end: int
    range_end: int

    @property
    def row_count(self) -> int:
        """Rows to extract; zero or negative when nothing is left."""
        return self.end - self.start + 1

    @property
    def is_clamped(self) -> bool:
        return self.end < self.range_end


def resolve_row_span(
    cell_range: CellRange, range_resolver: RangeResolver, row_model: RowModelLike
) -> RowSpan:
    """
    Resolve the rows to read for a range.

    Filtering can leave fewer displayed rows than the range covered, so the
    end row is limited to the last displayed row.
    """
    start = range_resolver.get_range_start_row(cell_range)
    range_end = range_resolver.get_range_end_row(cell_range)
    model_last_row = row_model.get_row_count() - 1
    return RowSpan(start=start, end=min(range_end, model_last_row), range_end=range_end)


def safe_string(value: Any) -> str:
    """Category value as a string; empty for None or values that cannot be printed.

    Falsy values other than None keep their text, so 0 becomes "0".
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as e:
        logger.debug(f"Could not convert {type(value).__name__} to string: {e}")
        return ""


def extract_rows(
    span: RowSpan,
    category_cols: Sequence[Column],
    field_cols: Sequence[Column],
    row_model: RowModelLike,
    value_resolver: ValueResolver,
) -> list[dict[str, Any]]:
    """
    Extract one row dict per displayed row in the span.

    Category values are stored as strings so they can be used as grouping
    keys. Field values are stored untouched for aggregation.

    Args:
        span: Resolved row span
        category_cols: Dimension columns
        field_cols: Value columns
        row_model: Row source
        value_resolver: Resolves a column's value for a row

    Returns:
        Extracted rows keyed by column id
    """
    rows = []
    for index in range(span.start, span.end + 1):
        row_node = row_model.get_row(index)
        data: dict[str, Any] = {}

        for col in category_cols:
            data[col.get_id()] = safe_string(value_resolver.get_value(col, row_node))

        for col in field_cols:
            data[col.get_id()] = value_resolver.get_value(col, row_node)

        rows.append(data)

    return rows
