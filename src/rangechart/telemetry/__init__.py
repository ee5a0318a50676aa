"""Telemetry module for tracking extraction metrics."""

from .metrics import MetricsCollector

__all__ = ["MetricsCollector"]
