"""Chart data extraction stages and the datasource that runs them."""

from .column_classifier import (
    ColumnClassification,
    classify_columns,
    select_category_columns,
    select_field_columns,
)
from .datasource import RangeChartDatasource
from .errors import ErrorAccumulator
from .grouping import group_rows_by_category, should_group
from .row_extractor import RowSpan, extract_rows, resolve_row_span, safe_string

__all__ = [
    "ColumnClassification",
    "ErrorAccumulator",
    "RangeChartDatasource",
    "RowSpan",
    "classify_columns",
    "extract_rows",
    "group_rows_by_category",
    "resolve_row_span",
    "safe_string",
    "select_category_columns",
    "select_field_columns",
    "should_group",
]
