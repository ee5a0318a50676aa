"""Row-related models."""

from typing import Any

from pydantic import BaseModel, Field


class RowNode(BaseModel):
    """A row of the grid's row model wrapping the user's row data."""

    id: str = Field(..., description="Stable row id")
    row_index: int | None = Field(None, ge=0, description="Displayed position or None if hidden")
    data: Any = Field(None, description="Backing row data (mapping or object)")
