"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest

from rangechart.aggregation import AggregationService
from rangechart.config import Config
from rangechart.extraction import RangeChartDatasource
from rangechart.grid import InMemoryGrid
from rangechart.models import CellRange, Column, ColumnDef, RowNode

SALES_ROWS = [
    {"region": "North", "country": "UK", "product": "Apples", "sales": 100, "units": 10},
    {"region": "North", "country": "UK", "product": "Pears", "sales": 50, "units": 5},
    {"region": "South", "country": "ES", "product": "Apples", "sales": 70, "units": 7},
    {"region": "North", "country": "IE", "product": "Apples", "sales": 30, "units": 3},
    {"region": "South", "country": "ES", "product": "Pears", "sales": 20, "units": 2},
    {"region": "East", "country": "PL", "product": "Plums", "sales": None, "units": "n/a"},
]


class FakeColumnModel:
    """Column model fake with a fixed list of displayed columns."""

    def __init__(self, displayed: list[Column], names: dict[str, str] | None = None):
        self.displayed = displayed
        self.names = names or {}
        self.locations: list[str] = []

    def get_all_displayed_columns(self) -> list[Column]:
        return list(self.displayed)

    def get_display_name_for_column(self, column: Column, location: str) -> str | None:
        self.locations.append(location)
        return self.names.get(column.get_id())


class FakeRowModel:
    """Row model fake over a list of dicts."""

    def __init__(self, rows: list[dict[str, Any]]):
        self.nodes = [RowNode(id=str(i), row_index=i, data=row) for i, row in enumerate(rows)]
        self.requested: list[int] = []

    def get_row_count(self) -> int:
        return len(self.nodes)

    def get_row(self, index: int) -> RowNode | None:
        self.requested.append(index)
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None


class FakeValueResolver:
    """Reads the column's field from the row data."""

    def get_value(self, column: Column, row_node: RowNode | None) -> Any:
        if row_node is None:
            return None
        return row_node.data.get(column.field)


class FakeRangeResolver:
    """Returns the range's bounds as given."""

    def get_range_start_row(self, cell_range: CellRange) -> int:
        return cell_range.start_row

    def get_range_end_row(self, cell_range: CellRange) -> int:
        return cell_range.end_row


def make_column(
    col_id: str,
    value: bool = False,
    row_group: bool = False,
    pivot: bool = False,
    **kwargs: Any,
) -> Column:
    """Helper to create a column whose field equals its id."""
    return Column(
        ColumnDef(
            field=col_id,
            enable_value=value,
            enable_row_group=row_group,
            enable_pivot=pivot,
            **kwargs,
        )
    )


@pytest.fixture
def config() -> Config:
    """Configuration that does not read the environment."""
    return Config(log_level="DEBUG")


@pytest.fixture
def aggregation_service() -> AggregationService:
    return AggregationService()


@pytest.fixture
def sales_column_defs() -> list[ColumnDef]:
    """Column definitions for the sales data."""
    return [
        ColumnDef(field="region", enable_row_group=True),
        ColumnDef(field="country", enable_row_group=True),
        ColumnDef(field="product", enable_pivot=True),
        ColumnDef(field="sales", header_name="Total Sales", enable_value=True),
        ColumnDef(field="units", enable_value=True),
        ColumnDef(field="notes"),
    ]


@pytest.fixture
def sales_grid(sales_column_defs) -> InMemoryGrid:
    """In-memory grid over the sales rows."""
    return InMemoryGrid(sales_column_defs, [dict(row) for row in SALES_ROWS])


@pytest.fixture
def make_datasource(sales_grid, aggregation_service):
    """Factory creating a datasource over the sales grid."""

    def _make(cell_range: CellRange, agg_func: Any = None, **kwargs: Any) -> RangeChartDatasource:
        return RangeChartDatasource(
            cell_range=cell_range,
            column_model=sales_grid.column_model,
            row_model=sales_grid.row_model,
            value_resolver=sales_grid.value_service,
            range_resolver=sales_grid.range_controller,
            aggregator=aggregation_service,
            agg_func=agg_func,
            **kwargs,
        )

    return _make
