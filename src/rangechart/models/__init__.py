"""Data models for RangeChart."""

from .cell_range import CellRange
from .chart_data import ChartDataset, ExtractionResult, RowGroup
from .column import Column, ColumnDef
from .row import RowNode

__all__ = [
    "CellRange",
    "ChartDataset",
    "Column",
    "ColumnDef",
    "ExtractionResult",
    "RowGroup",
    "RowNode",
]
