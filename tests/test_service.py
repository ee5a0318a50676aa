"""Tests for the RangeChartService facade."""

import io
import logging
from unittest.mock import Mock

import pytest

from rangechart import Config, InMemoryGrid, RangeChartService
from rangechart.aggregation import AggregationService
from rangechart.core.exceptions import ChartDataError
from rangechart.extraction import RangeChartDatasource
from rangechart.telemetry import MetricsCollector


@pytest.fixture
def service(sales_grid, config) -> RangeChartService:
    return RangeChartService.from_grid(sales_grid, config=config)


class TestRangeChartService:
    """Test RangeChartService."""

    def test_from_grid_wiring(self, service, sales_grid):
        """Test the service uses the grid's collaborators."""
        assert service.column_model is sales_grid.column_model
        assert service.row_model is sales_grid.row_model
        assert service.value_resolver is sales_grid.value_service
        assert service.range_resolver is sales_grid.range_controller
        assert isinstance(service.aggregator, AggregationService)
        assert service.metrics is None

    def test_setup_logging_formats_context_fields(self, sales_grid, config):
        """Test the service installs the contextual log format on root handlers."""
        handler = logging.StreamHandler(io.StringIO())
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)
        try:
            RangeChartService.from_grid(sales_grid, config=config)
            assert "%(range)s" in handler.formatter._fmt
        finally:
            root_logger.removeHandler(handler)

    def test_create_datasource(self, service, sales_grid):
        """Test datasources are bound to the service configuration."""
        cell_range = sales_grid.create_cell_range(0, 5, columns=["region", "sales"])

        datasource = service.create_datasource(cell_range, agg_func="sum")

        assert isinstance(datasource, RangeChartDatasource)
        assert datasource.agg_func == "sum"
        assert datasource.display_name_location == "chart"

    def test_get_chart_data(self, service, sales_grid):
        """Test a full extraction through the service."""
        cell_range = sales_grid.create_cell_range(0, 4, columns=["region", "sales"])

        dataset, errors = service.get_chart_data(cell_range, agg_func="sum")

        assert errors == []
        assert dataset.to_dataframe(use_display_names=True).to_dict(orient="records") == [
            {"region": "North", "Total Sales": 180},
            {"region": "South", "Total Sales": 90},
        ]

    def test_errors_returned_by_default(self, service, sales_grid):
        """Test advisory errors are returned, not raised."""
        cell_range = sales_grid.create_cell_range(0, 5, columns=["region"])

        result = service.get_chart_data(cell_range)

        assert result.has_errors

    def test_raise_on_errors(self, sales_grid):
        """Test raise_on_errors turns advisory errors into ChartDataError."""
        service = RangeChartService.from_grid(sales_grid, config=Config(raise_on_errors=True))
        cell_range = sales_grid.create_cell_range(0, 5, columns=["region"])

        with pytest.raises(ChartDataError) as exc_info:
            service.get_chart_data(cell_range)

        assert exc_info.value.errors == ["No value column in selected range."]

    def test_custom_aggregator_and_metrics(self, sales_grid, config):
        """Test explicit collaborators are used as given."""
        aggregator = AggregationService()
        metrics = Mock(spec=MetricsCollector)

        service = RangeChartService.from_grid(
            sales_grid, config=config, aggregator=aggregator, metrics=metrics
        )

        assert service.aggregator is aggregator
        assert service.metrics is metrics

    def test_telemetry_enabled(self, sales_grid):
        """Test a metrics collector is created when telemetry is enabled."""
        service = RangeChartService.from_grid(sales_grid, config=Config(enable_telemetry=True))

        assert isinstance(service.metrics, MetricsCollector)
        service.metrics.shutdown()

    def test_config_from_env(self, sales_grid, monkeypatch, tmp_path):
        """Test the configuration is loaded from the environment when omitted."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("RANGECHART_DISPLAY_NAME_LOCATION", "legend")

        service = RangeChartService.from_grid(sales_grid)

        assert service.config.display_name_location == "legend"

    def test_dataframe_round_trip(self, config):
        """Test charting a grid built from a DataFrame."""
        import pandas as pd

        df = pd.DataFrame({"team": ["a", "b", "a"], "points": [1, 2, 3]})
        grid = InMemoryGrid.from_dataframe(df)
        service = RangeChartService.from_grid(grid, config=config)

        dataset, errors = service.get_chart_data(
            grid.create_cell_range(0, 2, columns=["team", "points"]), agg_func="sum"
        )

        assert errors == []
        assert dataset.rows == [{"team": "a", "points": 4}, {"team": "b", "points": 2}]
