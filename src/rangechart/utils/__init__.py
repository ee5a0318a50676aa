"""Utility functions for RangeChart."""

from .logging_context import (
    OperationContext,
    RangeContext,
    get_contextual_logger,
    setup_contextual_logging,
)

__all__ = [
    "OperationContext",
    "RangeContext",
    "get_contextual_logger",
    "setup_contextual_logging",
]
