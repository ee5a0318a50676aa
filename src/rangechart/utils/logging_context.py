"""Context-aware logging utilities for RangeChart."""

import contextvars
import logging
from collections.abc import Mapping
from typing import Any

# Context variables for tracking current extraction context
current_range = contextvars.ContextVar[str | None]("current_range", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        cell_range = current_range.get()
        operation = current_operation.get()

        extra = dict(kwargs.get("extra", {}))
        if cell_range:
            extra["range"] = cell_range
        if operation:
            extra["operation"] = operation

        kwargs = {**kwargs, "extra": extra}

        context_parts = []
        if cell_range:
            context_parts.append(f"range={cell_range}")
        if operation:
            context_parts.append(f"op={operation}")

        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class _ContextVarScope:
    """Sets a context variable for the duration of a with block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str):
        self.value = value
        self.token: contextvars.Token | None = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)
            self.token = None


class RangeContext(_ContextVarScope):
    """Context manager for tracking the cell range being extracted."""

    var = current_range


class OperationContext(_ContextVarScope):
    """Context manager for tracking current operation."""

    var = current_operation


def setup_contextual_logging():
    """Set up contextual logging with structured format.

    This should be called once at application startup.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(range)s %(operation)s",
        defaults={"range": "", "operation": ""},
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
