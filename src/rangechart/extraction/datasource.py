"""Chart datasource that extracts a dataset from a cell range."""

import time
from collections.abc import Callable, Sequence
from typing import Any

from ..core.constants import DISPLAY, ERROR_MESSAGES
from ..interfaces import (
    Aggregator,
    ColumnModelLike,
    RangeResolver,
    RowModelLike,
    ValueResolver,
)
from ..models.cell_range import CellRange
from ..models.chart_data import ChartDataset, ExtractionResult
from ..models.column import Column
from ..telemetry import MetricsCollector
from ..utils.logging_context import OperationContext, RangeContext, get_contextual_logger
from .column_classifier import classify_columns
from .errors import ErrorAccumulator
from .grouping import group_rows_by_category, should_group
from .row_extractor import extract_rows, resolve_row_span

logger = get_contextual_logger(__name__)

AggDirective = str | Callable[[Sequence[Any]], Any] | None


class RangeChartDatasource:
    """Extracts chart data for one cell range.

    The datasource only reads from its collaborators. Each call to extract()
    recomputes everything, so it always reflects the grid's current state.
    """

    def __init__(
        self,
        cell_range: CellRange,
        column_model: ColumnModelLike,
        row_model: RowModelLike,
        value_resolver: ValueResolver,
        range_resolver: RangeResolver,
        aggregator: Aggregator,
        agg_func: AggDirective = None,
        display_name_location: str = DISPLAY.CHART_LOCATION,
        metrics: MetricsCollector | None = None,
    ):
        """Initialize the datasource.

        Args:
            cell_range: Selected range to chart
            column_model: Displayed columns and display names
            row_model: Displayed rows
            value_resolver: Resolves cell values
            range_resolver: Resolves the range's first and last rows
            aggregator: Aggregates field values per category group
            agg_func: Aggregation directive; when set, rows are grouped by category
            display_name_location: Location passed when resolving display names
            metrics: Optional metrics collector
        """
        self.cell_range = cell_range
        self.column_model = column_model
        self.row_model = row_model
        self.value_resolver = value_resolver
        self.range_resolver = range_resolver
        self.aggregator = aggregator
        self.agg_func = agg_func
        self.display_name_location = display_name_location
        self.metrics = metrics

    def extract(self) -> ExtractionResult:
        """Extract the chart dataset for the range.

        Returns:
            ExtractionResult with the dataset and any advisory errors. Errors
            never stop the extraction; the dataset may be empty.
        """
        start_time = time.time()
        errors = ErrorAccumulator()

        with RangeContext(self._describe_range()):
            displayed_cols = self.column_model.get_all_displayed_columns()

            with OperationContext("classify_columns"):
                classification = classify_columns(self.cell_range.columns, displayed_cols)
                field_cols = classification.field_cols
                category_cols = classification.category_cols
                if not field_cols:
                    errors.add(ERROR_MESSAGES.NO_VALUE_COLUMN)
                    logger.warning(ERROR_MESSAGES.NO_VALUE_COLUMN)
                col_ids, col_display_names, cols_mapped = self._describe_fields(field_cols)
                logger.debug(
                    f"Fields: {col_ids}, categories: {[col.get_id() for col in category_cols]}"
                )

            with OperationContext("extract_rows"):
                span = resolve_row_span(self.cell_range, self.range_resolver, self.row_model)
                rows = extract_rows(
                    span, category_cols, field_cols, self.row_model, self.value_resolver
                )
                if span.row_count <= 0:
                    errors.add(ERROR_MESSAGES.NO_ROWS)
                    logger.warning(ERROR_MESSAGES.NO_ROWS)
                elif span.is_clamped:
                    logger.debug(f"Range end {span.range_end} clamped to row {span.end}")

            grouped = should_group(category_cols, self.agg_func)
            groups = []
            if grouped:
                with OperationContext("group_rows"):
                    groups = group_rows_by_category(
                        rows, category_cols, field_cols, self.aggregator
                    )
                    output_rows = [group.values for group in groups]
            else:
                output_rows = rows

            logger.info(
                f"Extracted {len(rows)} rows"
                + (f" into {len(groups)} groups" if grouped else "")
                + (f" with {len(errors)} errors" if errors else "")
            )

        dataset = ChartDataset(
            cell_range=self.cell_range,
            col_ids=col_ids,
            col_display_names=col_display_names,
            cols_mapped=cols_mapped,
            field_cols=field_cols,
            category_cols=category_cols,
            rows=output_rows,
            grouped=grouped,
        )

        if self.metrics is not None:
            self.metrics.record_extraction(
                rows_extracted=len(rows),
                groups_created=len(groups),
                processing_time_seconds=time.time() - start_time,
                errors=errors.get_errors(),
                grouped=grouped,
            )

        return ExtractionResult(dataset=dataset, errors=errors.get_errors())

    def _describe_fields(
        self, field_cols: list[Column]
    ) -> tuple[list[str], list[str], dict[str, Column]]:
        """Ids, display names and id mapping for the field columns, aligned by position."""
        col_ids = []
        col_display_names = []
        cols_mapped = {}

        for col in field_cols:
            col_id = col.get_id()
            display_name = self.column_model.get_display_name_for_column(
                col, self.display_name_location
            )
            col_ids.append(col_id)
            col_display_names.append(display_name or "")
            cols_mapped[col_id] = col

        return col_ids, col_display_names, cols_mapped

    def _describe_range(self) -> str:
        cols = ",".join(self.cell_range.col_ids)
        start = "" if self.cell_range.start_row is None else self.cell_range.start_row
        end = "" if self.cell_range.end_row is None else self.cell_range.end_row
        return f"{cols}:{start}-{end}"
