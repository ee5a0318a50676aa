"""Cell range model."""

from pydantic import BaseModel, ConfigDict, Field

from .column import Column


class CellRange(BaseModel):
    """A rectangular selection of cells: ordered columns plus a row span.

    The row bounds are inclusive, 0-based and may be given in either order.
    A missing bound means the first (start) or last (end) displayed row.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    columns: tuple[Column, ...] = Field(default=(), description="Columns in selection order")
    start_row: int | None = Field(None, ge=0, description="Row where the selection started")
    end_row: int | None = Field(None, ge=0, description="Row where the selection ended")

    @property
    def col_ids(self) -> list[str]:
        """Ids of the columns in the range."""
        return [col.get_id() for col in self.columns]

    @property
    def row_bounds(self) -> tuple[int, int] | None:
        """Ordered (first, last) row indices when both bounds are set."""
        if self.start_row is None or self.end_row is None:
            return None
        return (min(self.start_row, self.end_row), max(self.start_row, self.end_row))
