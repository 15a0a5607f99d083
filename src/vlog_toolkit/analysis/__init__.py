"""Statistics and diagnostics over signal data."""

from .statistics import StatisticsAggregator
from .diagnostics import DiagnosticClient

__all__ = ["StatisticsAggregator", "DiagnosticClient"]
