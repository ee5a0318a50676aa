"""Aggregation functions and their registry."""

from .agg_funcs import agg_avg, agg_count, agg_first, agg_last, agg_max, agg_min, agg_sum
from .service import BUILT_IN_AGG_FUNCS, AggregationService

__all__ = [
    "AggregationService",
    "BUILT_IN_AGG_FUNCS",
    "agg_sum",
    "agg_min",
    "agg_max",
    "agg_count",
    "agg_avg",
    "agg_first",
    "agg_last",
]
