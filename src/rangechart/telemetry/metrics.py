"""Metrics collection for chart data extraction."""

import logging
import time
from contextlib import contextmanager

from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    MetricReader,
    PeriodicExportingMetricReader,
)

logger = logging.getLogger(__name__)


class MetricsCollector:
    """Collect and export metrics using OpenTelemetry."""

    def __init__(
        self,
        service_name: str = "rangechart",
        reader: MetricReader | None = None,
        export_interval_millis: int = 60000,  # 1 minute
    ):
        """Initialize metrics collector.

        Args:
            service_name: Name of the service
            reader: Optional metric reader (defaults to periodic console export)
            export_interval_millis: Export interval for the default reader
        """
        if reader is None:
            reader = PeriodicExportingMetricReader(
                exporter=ConsoleMetricExporter(), export_interval_millis=export_interval_millis
            )

        self.provider = MeterProvider(metric_readers=[reader])
        self.meter = self.provider.get_meter(service_name)
        self._operation_timers = {}

        self._create_instruments()

    def _create_instruments(self):
        """Create common metric instruments."""
        # Counters
        self.extractions = self.meter.create_counter(
            name="rangechart.extractions",
            description="Number of chart data extractions",
            unit="extractions",
        )

        self.rows_extracted = self.meter.create_counter(
            name="rangechart.rows_extracted",
            description="Number of rows read from the row model",
            unit="rows",
        )

        self.groups_created = self.meter.create_counter(
            name="rangechart.groups_created",
            description="Number of category groups produced",
            unit="groups",
        )

        self.errors = self.meter.create_counter(
            name="rangechart.extraction_errors",
            description="Number of advisory extraction errors",
            unit="errors",
        )

        # Histograms
        self.extraction_time = self.meter.create_histogram(
            name="rangechart.extraction_time",
            description="Time to extract chart data",
            unit="seconds",
        )

    def record_extraction(
        self,
        rows_extracted: int,
        groups_created: int,
        processing_time_seconds: float,
        errors: list[str] | None = None,
        grouped: bool = False,
    ):
        """Record metrics for one extraction.

        Args:
            rows_extracted: Rows read from the row model
            groups_created: Groups produced (0 when not grouping)
            processing_time_seconds: Extraction time in seconds
            errors: Advisory errors reported by the extraction
            grouped: Whether rows were grouped
        """
        attributes = {"grouped": grouped}

        self.extractions.add(1, attributes)
        self.extraction_time.record(processing_time_seconds, attributes)

        if rows_extracted > 0:
            self.rows_extracted.add(rows_extracted, attributes)
        if groups_created > 0:
            self.groups_created.add(groups_created, attributes)

        for error in errors or []:
            self.errors.add(1, {"error_type": error})

    @contextmanager
    def measure_time(self, operation: str):
        """Context manager to measure operation time.

        Example:
            with metrics_collector.measure_time("grouping"):
                groups = group_rows_by_category(rows, category_cols, field_cols, aggregator)
        """
        start_time = time.time()

        try:
            yield
        finally:
            duration = time.time() - start_time

            histogram = self._operation_timers.get(operation)
            if histogram is None:
                histogram = self.meter.create_histogram(
                    name=f"rangechart.time.{operation}",
                    description=f"Time for {operation}",
                    unit="seconds",
                )
                self._operation_timers[operation] = histogram

            histogram.record(duration)
            logger.debug(f"{operation} took {duration:.4f}s")

    def shutdown(self):
        """Flush and stop the meter provider."""
        self.provider.shutdown()
