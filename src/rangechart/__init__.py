"""RangeChart - Chart-ready datasets from grid cell ranges."""

__version__ = "0.1.0"

from rangechart.config import Config
from rangechart.extraction import RangeChartDatasource
from rangechart.grid import InMemoryGrid
from rangechart.models import CellRange, ChartDataset, ColumnDef, ExtractionResult
from rangechart.service import RangeChartService

__all__ = [
    "CellRange",
    "ChartDataset",
    "ColumnDef",
    "Config",
    "ExtractionResult",
    "InMemoryGrid",
    "RangeChartDatasource",
    "RangeChartService",
]
