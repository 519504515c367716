"""Compute backends for descriptive statistics."""

from pydescriptive.descriptive.backends.cpu import CPUStatisticsBackend

__all__ = ["CPUStatisticsBackend"]
