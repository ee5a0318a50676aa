"""Centralized constants for RangeChart."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ErrorMessages:
    """Advisory messages reported alongside an extracted dataset."""

    NO_VALUE_COLUMN: Final[str] = "No value column in selected range."
    NO_ROWS: Final[str] = "No rows in selected range."


@dataclass(frozen=True)
class AggregationConstants:
    """Constants for grouping and aggregation."""

    # Function applied to every field column of a group
    GROUP_AGG_FUNC: Final[str] = "sum"

    # Built-in aggregation function names
    SUM: Final[str] = "sum"
    MIN: Final[str] = "min"
    MAX: Final[str] = "max"
    COUNT: Final[str] = "count"
    AVG: Final[str] = "avg"
    FIRST: Final[str] = "first"
    LAST: Final[str] = "last"


@dataclass(frozen=True)
class DisplayConstants:
    """Constants used when resolving column display names."""

    CHART_LOCATION: Final[str] = "chart"
    GENERATED_COL_ID_PREFIX: Final[str] = "col_"


# Create singleton instances for easy access
ERROR_MESSAGES = ErrorMessages()
AGGREGATION = AggregationConstants()
DISPLAY = DisplayConstants()
