"""In-memory grid collaborators."""

from .column_model import ColumnModel, to_human_text
from .in_memory_grid import InMemoryGrid
from .range_controller import RangeController
from .row_model import RowModel
from .value_service import ValueService, get_value_by_path

__all__ = [
    "ColumnModel",
    "InMemoryGrid",
    "RangeController",
    "RowModel",
    "ValueService",
    "get_value_by_path",
    "to_human_text",
]
