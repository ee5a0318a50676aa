"""Core constants and exceptions for RangeChart."""

from .constants import AGGREGATION, DISPLAY, ERROR_MESSAGES
from .exceptions import (
    ChartDataError,
    ColumnNotFoundError,
    ConfigurationError,
    RangeChartError,
)

__all__ = [
    "AGGREGATION",
    "DISPLAY",
    "ERROR_MESSAGES",
    "RangeChartError",
    "ConfigurationError",
    "ChartDataError",
    "ColumnNotFoundError",
]
