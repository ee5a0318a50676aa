"""Built-in aggregation functions.

Numeric functions only look at real numbers and skip everything else
(strings, None, booleans). They return None when nothing numeric was seen.
"""

import numbers
from collections.abc import Sequence
from decimal import Decimal
from typing import Any


def is_number(value: Any) -> bool:
    """Check if value takes part in numeric aggregation."""
    if isinstance(value, bool):
        return False
    return isinstance(value, numbers.Real | Decimal)


def _add(left: Any, right: Any) -> Any:
    """Add two numbers, falling back to float when Decimal meets a non-int."""
    if isinstance(left, Decimal) != isinstance(right, Decimal) and not (
        isinstance(left, int) or isinstance(right, int)
    ):
        return float(left) + float(right)
    return left + right


def agg_sum(values: Sequence[Any]) -> Any:
    result = None
    for value in values:
        if is_number(value):
            result = value if result is None else _add(result, value)
    return result


def agg_min(values: Sequence[Any]) -> Any:
    result = None
    for value in values:
        if is_number(value) and (result is None or value < result):
            result = value
    return result


def agg_max(values: Sequence[Any]) -> Any:
    result = None
    for value in values:
        if is_number(value) and (result is None or value > result):
            result = value
    return result


def agg_count(values: Sequence[Any]) -> int:
    return len(values)


def agg_avg(values: Sequence[Any]) -> float | None:
    numbers = [value for value in values if is_number(value)]
    if not numbers:
        return None
    return agg_sum(numbers) / len(numbers)


def agg_first(values: Sequence[Any]) -> Any:
    return values[0] if len(values) > 0 else None


def agg_last(values: Sequence[Any]) -> Any:
    return values[-1] if len(values) > 0 else None
