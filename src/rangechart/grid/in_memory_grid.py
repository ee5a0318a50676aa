"""A self-contained grid bundling the in-memory collaborators."""

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from ..models.cell_range import CellRange
from ..models.column import ColumnDef
from .column_model import ColumnModel
from .range_controller import RangeController
from .row_model import RowModel
from .value_service import ValueService

logger = logging.getLogger(__name__)


class InMemoryGrid:
    """Column model, row model, value service and range controller over plain data."""

    def __init__(self, column_defs: Iterable[ColumnDef], row_data: Iterable[Any] = ()):
        self.column_model = ColumnModel(column_defs)
        self.row_model = RowModel(row_data)
        self.value_service = ValueService()
        self.range_controller = RangeController(self.column_model, self.row_model)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "InMemoryGrid":
        """Build a grid from a DataFrame.

        Numeric columns become value columns, every other column becomes a
        row-group column.
        """
        column_defs = []
        for name in df.columns:
            dtype = df[name].dtype
            is_value = is_numeric_dtype(dtype) and not is_bool_dtype(dtype)
            column_defs.append(
                ColumnDef(field=str(name), enable_value=is_value, enable_row_group=not is_value)
            )
        df = df.rename(columns=str)
        logger.debug(f"Grid from DataFrame with {len(df)} rows, {len(column_defs)} columns")
        return cls(column_defs, df.to_dict(orient="records"))

    def create_cell_range(self, *args: Any, **kwargs: Any) -> CellRange:
        """Shortcut for RangeController.create_cell_range."""
        return self.range_controller.create_cell_range(*args, **kwargs)
