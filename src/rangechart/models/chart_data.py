"""Models for the chart dataset produced from a cell range."""

from dataclasses import dataclass, field
from typing import Any, NamedTuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import ChartDataError
from .cell_range import CellRange
from .column import Column


@dataclass
class RowGroup:
    """Rows sharing one tuple of category values."""

    key: tuple[str, ...]
    values: dict[str, Any] = field(default_factory=dict)
    children: list[dict[str, Any]] = field(default_factory=list)

    @property
    def child_count(self) -> int:
        return len(self.children)


class ChartDataset(BaseModel):
    """Tabular data extracted from a cell range, ready for charting."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    cell_range: CellRange = Field(..., description="Range the data was extracted from")
    col_ids: list[str] = Field(default_factory=list, description="Field column ids in order")
    col_display_names: list[str] = Field(
        default_factory=list, description="Display names aligned with col_ids"
    )
    cols_mapped: dict[str, Column] = Field(
        default_factory=dict, description="Field column id to column"
    )
    field_cols: list[Column] = Field(default_factory=list, description="Value columns")
    category_cols: list[Column] = Field(default_factory=list, description="Dimension columns")
    rows: list[dict[str, Any]] = Field(
        default_factory=list, description="Flat extracted rows or aggregated group rows"
    )
    grouped: bool = Field(False, description="Rows are aggregated group records")

    @property
    def category_ids(self) -> list[str]:
        return [col.get_id() for col in self.category_cols]

    def category_values(self) -> list[tuple[Any, ...]]:
        """Category value tuple of each row, in row order."""
        category_ids = self.category_ids
        return [tuple(row.get(col_id) for col_id in category_ids) for row in self.rows]

    @property
    def is_empty(self) -> bool:
        """No rows or no field columns to chart."""
        return not self.rows or not self.col_ids

    def to_dataframe(self, use_display_names: bool = False) -> pd.DataFrame:
        """Convert the rows to a DataFrame with category columns first.

        Args:
            use_display_names: Label field columns with their display names

        Returns:
            DataFrame with one row per dataset row
        """
        columns = list(dict.fromkeys(self.category_ids + self.col_ids))
        df = pd.DataFrame(self.rows, columns=columns)
        if use_display_names:
            df = df.rename(columns=dict(zip(self.col_ids, self.col_display_names, strict=True)))
        return df


class ExtractionResult(NamedTuple):
    """Dataset plus the advisory errors collected while extracting it."""

    dataset: ChartDataset
    errors: list[str]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def raise_for_errors(self) -> "ExtractionResult":
        """Raise ChartDataError if any errors were collected, else return self."""
        if self.errors:
            raise ChartDataError(self.errors)
        return self
