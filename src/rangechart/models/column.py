"""Column-related models."""

import itertools
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import DISPLAY

_generated_ids = itertools.count()


class ColumnDef(BaseModel):
    """User-supplied definition of a grid column."""

    model_config = ConfigDict(frozen=True)

    field: str | None = Field(None, description="Dotted path of the value in the row data")
    col_id: str | None = Field(None, description="Explicit column id (defaults to field)")
    header_name: str | None = Field(None, description="Header text shown for the column")
    header_value_getter: Callable[[Any, str], str | None] | None = Field(
        None, description="Callable (column, location) returning a header for a location"
    )
    value_getter: Callable[[Any, Any], Any] | None = Field(
        None, description="Callable (row_node, column) returning the cell value"
    )
    hide: bool = Field(False, description="Column starts hidden")

    # Capability flags
    enable_value: bool = Field(False, description="Column may be aggregated and charted")
    enable_row_group: bool = Field(False, description="Column may be used for row grouping")
    enable_pivot: bool = Field(False, description="Column may be used for pivoting")


class Column:
    """A column in the grid's column model.

    Columns are compared by identity: two columns built from equal definitions
    are still different columns.
    """

    def __init__(self, col_def: ColumnDef, col_id: str | None = None):
        self.col_def = col_def
        self.col_id = col_id or col_def.col_id or col_def.field or self._generate_id()
        self.visible = not col_def.hide

    @staticmethod
    def _generate_id() -> str:
        return f"{DISPLAY.GENERATED_COL_ID_PREFIX}{next(_generated_ids)}"

    def get_id(self) -> str:
        """Get the stable column id."""
        return self.col_id

    @property
    def field(self) -> str | None:
        return self.col_def.field

    @property
    def is_value(self) -> bool:
        """Column may be used as a chart field."""
        return self.col_def.enable_value

    @property
    def is_dimension(self) -> bool:
        """Column may be used as a chart category."""
        return self.col_def.enable_row_group or self.col_def.enable_pivot

    def __repr__(self) -> str:
        return f"Column(col_id={self.col_id!r})"
