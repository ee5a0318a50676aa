"""Groups extracted rows by category values and aggregates the fields."""

import logging
from collections.abc import Sequence
from typing import Any

from ..core.constants import AGGREGATION
from ..interfaces import Aggregator
from ..models.chart_data import RowGroup
from ..models.column import Column
from .row_extractor import safe_string

logger = logging.getLogger(__name__)


def should_group(category_cols: Sequence[Column], agg_func: Any) -> bool:
    """Grouping needs at least one category column and an aggregation directive."""
    return len(category_cols) > 0 and agg_func is not None


def group_rows_by_category(
    rows: Sequence[dict[str, Any]],
    category_cols: Sequence[Column],
    field_cols: Sequence[Column],
    aggregator: Aggregator,
) -> list[RowGroup]:
    """
    Group rows by their tuple of category values and sum each field per group.

    Groups are returned in the order their key was first seen. The field
    columns are always aggregated with "sum"; the caller's aggregation
    directive only decides whether grouping happens.

    Args:
        rows: Extracted rows
        category_cols: Columns forming the grouping key, outermost first
        field_cols: Columns to aggregate
        aggregator: Aggregation collaborator

    Returns:
        One RowGroup per distinct category tuple
    """
    groups: dict[tuple[str, ...], RowGroup] = {}
    category_ids = [col.get_id() for col in category_cols]

    for row in rows:
        key = tuple(safe_string(row[col_id]) for col_id in category_ids)
        group = groups.get(key)
        if group is None:
            group = RowGroup(key=key, values={col_id: row[col_id] for col_id in category_ids})
            groups[key] = group
        group.children.append(row)

    for group in groups.values():
        for col in field_cols:
            col_id = col.get_id()
            values = [child[col_id] for child in group.children]
            group.values[col_id] = aggregator.aggregate_values(
                values, AGGREGATION.GROUP_AGG_FUNC
            )

    logger.debug(f"Grouped {len(rows)} rows into {len(groups)} groups")
    return list(groups.values())
