"""Main RangeChart service."""

import logging
from typing import TYPE_CHECKING

from .aggregation import AggregationService
from .config import Config
from .extraction.datasource import AggDirective, RangeChartDatasource
from .interfaces import (
    Aggregator,
    ColumnModelLike,
    RangeResolver,
    RowModelLike,
    ValueResolver,
)
from .models import CellRange, ExtractionResult
from .telemetry import MetricsCollector
from .utils.logging_context import setup_contextual_logging

if TYPE_CHECKING:
    from .grid import InMemoryGrid

logger = logging.getLogger(__name__)


class RangeChartService:
    """Creates chart datasources for cell ranges of one grid."""

    def __init__(
        self,
        column_model: ColumnModelLike,
        row_model: RowModelLike,
        value_resolver: ValueResolver,
        range_resolver: RangeResolver,
        aggregator: Aggregator | None = None,
        config: Config | None = None,
        metrics: MetricsCollector | None = None,
    ):
        """Initialize the service.

        Args:
            column_model: Displayed columns and display names
            row_model: Displayed rows
            value_resolver: Resolves cell values
            range_resolver: Resolves range rows
            aggregator: Aggregation collaborator (defaults to AggregationService)
            config: Configuration object. If None, loads from environment.
            metrics: Metrics collector; created from config when telemetry is enabled
        """
        if config is None:
            config = Config.from_env()

        self.config = config
        self.column_model = column_model
        self.row_model = row_model
        self.value_resolver = value_resolver
        self.range_resolver = range_resolver
        self.aggregator = aggregator if aggregator is not None else AggregationService()

        self._setup_logging()
        self.metrics = metrics if metrics is not None else self._setup_telemetry()

        logger.debug(f"RangeChartService initialized with config: {config}")

    @classmethod
    def from_grid(
        cls, grid: "InMemoryGrid", config: Config | None = None, **kwargs
    ) -> "RangeChartService":
        """Create a service wired to an in-memory grid."""
        return cls(
            column_model=grid.column_model,
            row_model=grid.row_model,
            value_resolver=grid.value_service,
            range_resolver=grid.range_controller,
            config=config,
            **kwargs,
        )

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper()),
            filename=self.config.log_file,
        )
        setup_contextual_logging()

    def _setup_telemetry(self) -> MetricsCollector | None:
        """Create the metrics collector if telemetry is enabled."""
        if not self.config.enable_telemetry:
            return None
        try:
            collector = MetricsCollector(
                export_interval_millis=self.config.metrics_export_interval_millis
            )
            logger.info("Metrics collection initialized")
            return collector
        except Exception as e:
            logger.error(f"Failed to initialize metrics collection: {e}")
            # Charting works without metrics
            return None

    def create_datasource(
        self, cell_range: CellRange, agg_func: AggDirective = None
    ) -> RangeChartDatasource:
        """Create a datasource for a range.

        Args:
            cell_range: Selected range
            agg_func: Aggregation directive; when set, rows are grouped by category

        Returns:
            RangeChartDatasource bound to this service's collaborators
        """
        return RangeChartDatasource(
            cell_range=cell_range,
            column_model=self.column_model,
            row_model=self.row_model,
            value_resolver=self.value_resolver,
            range_resolver=self.range_resolver,
            aggregator=self.aggregator,
            agg_func=agg_func,
            display_name_location=self.config.display_name_location,
            metrics=self.metrics,
        )

    def get_chart_data(
        self, cell_range: CellRange, agg_func: AggDirective = None
    ) -> ExtractionResult:
        """Extract chart data for a range.

        Raises:
            ChartDataError: If config.raise_on_errors is set and errors were reported
        """
        result = self.create_datasource(cell_range, agg_func).extract()
        if self.config.raise_on_errors:
            result.raise_for_errors()
        return result
