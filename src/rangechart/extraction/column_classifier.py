"""Splits the columns of a cell range into field and category columns."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models.column import Column


@dataclass
class ColumnClassification:
    """Field (value) and category (dimension) columns of a range."""

    field_cols: list[Column] = field(default_factory=list)
    category_cols: list[Column] = field(default_factory=list)


def select_field_columns(
    range_columns: Sequence[Column], displayed_columns: Sequence[Column]
) -> list[Column]:
    """
    Keep the range columns that can be charted as values.

    A column must have enable_value set and still be displayed. Columns that
    are no longer displayed (e.g. after switching pivot mode) are dropped.

    Args:
        range_columns: Columns of the cell range in range order
        displayed_columns: Currently displayed grid columns

    Returns:
        Field columns in range order
    """
    return [col for col in range_columns if col.is_value and col in displayed_columns]


def is_dimension(column: Column, displayed_columns: Sequence[Column]) -> bool:
    """Column is displayed and may be used for row grouping or pivoting."""
    return column.is_dimension and column in displayed_columns


def select_category_columns(
    range_columns: Sequence[Column], displayed_columns: Sequence[Column]
) -> list[Column]:
    """
    Pick the category columns for a range.

    Every dimension column of the range is used, in range order. If the range
    has none, only the first dimension column among all displayed columns is
    used so a chart still gets one category.

    Args:
        range_columns: Columns of the cell range in range order
        displayed_columns: Currently displayed grid columns in display order

    Returns:
        Category columns (possibly empty)
    """
    category_cols = [col for col in range_columns if is_dimension(col, displayed_columns)]
    if category_cols:
        return category_cols

    for col in displayed_columns:
        if is_dimension(col, displayed_columns):
            return [col]
    return []


def classify_columns(
    range_columns: Sequence[Column], displayed_columns: Sequence[Column]
) -> ColumnClassification:
    return ColumnClassification(
        field_cols=select_field_columns(range_columns, displayed_columns),
        category_cols=select_category_columns(range_columns, displayed_columns),
    )
