"""Registry of named aggregation functions."""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ..core.constants import AGGREGATION
from ..core.exceptions import ConfigurationError
from . import agg_funcs

logger = logging.getLogger(__name__)

AggFunc = Callable[[Sequence[Any]], Any]

BUILT_IN_AGG_FUNCS: dict[str, AggFunc] = {
    AGGREGATION.SUM: agg_funcs.agg_sum,
    AGGREGATION.MIN: agg_funcs.agg_min,
    AGGREGATION.MAX: agg_funcs.agg_max,
    AGGREGATION.COUNT: agg_funcs.agg_count,
    AGGREGATION.AVG: agg_funcs.agg_avg,
    AGGREGATION.FIRST: agg_funcs.agg_first,
    AGGREGATION.LAST: agg_funcs.agg_last,
}


class AggregationService:
    """Looks up aggregation functions by name and applies them to values."""

    def __init__(self, include_defaults: bool = True):
        """Initialize the service.

        Args:
            include_defaults: Register the built-in functions
        """
        self._agg_funcs: dict[str, AggFunc] = {}
        if include_defaults:
            self._agg_funcs.update(BUILT_IN_AGG_FUNCS)

    def add_agg_func(self, name: str, func: AggFunc) -> None:
        """Register (or replace) an aggregation function."""
        if not callable(func):
            raise ConfigurationError(f"Aggregation function {name!r} is not callable")
        self._agg_funcs[name] = func

    def add_agg_funcs(self, funcs: Mapping[str, AggFunc]) -> None:
        for name, func in funcs.items():
            self.add_agg_func(name, func)

    def get_agg_func(self, name: str) -> AggFunc | None:
        return self._agg_funcs.get(name)

    def get_func_names(self) -> list[str]:
        return sorted(self._agg_funcs)

    def clear(self) -> None:
        """Remove every registered function, built-ins included."""
        self._agg_funcs.clear()

    def aggregate_values(self, values: Sequence[Any], agg_func: str | AggFunc) -> Any:
        """Aggregate values with a named or callable aggregation function.

        Args:
            values: Values to aggregate
            agg_func: Registered function name or a callable

        Returns:
            The aggregate, or None when the function name is unknown
        """
        func = self.get_agg_func(agg_func) if isinstance(agg_func, str) else agg_func
        if not callable(func):
            logger.error(f"Unrecognised aggregation function {agg_func!r}")
            return None
        return func(values)
