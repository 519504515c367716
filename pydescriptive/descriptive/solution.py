"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TYPE_CHECKING

from pydescriptive.core.result import Result
from pydescriptive.descriptive._export import report_dict, write_report

if TYPE_CHECKING:
    from pydescriptive.descriptive.design import StatisticsDesign


@dataclass(frozen=True)
class DetailedParams:
    """
    Fields added by detailed mode.

    q1/q3 are nearest-rank quartiles. skewness and kurtosis are population
    standardized moments and are NaN when the standard deviation is zero.
    """
    q1: float
    q3: float
    interquartile_range: float
    skewness: float
    kurtosis: float


@dataclass(frozen=True)
class StatisticsParams:
    """
    Parameter payload for descriptive statistics.

    Basic fields are always populated. detailed is None unless detailed
    mode was requested.
    """
    count: int
    sum: float
    mean: float
    median: float
    mode: float
    min: float
    max: float
    range: float
    variance: float
    standard_deviation: float
    detailed: DetailedParams | None = None


# Row labels for summary(), in display order
_BASIC_ROWS = (
    ("Count", "count"),
    ("Sum", "sum"),
    ("Mean", "mean"),
    ("Median", "median"),
    ("Mode", "mode"),
    ("Min.", "min"),
    ("Max.", "max"),
    ("Range", "range"),
    ("Variance", "variance"),
    ("Std. Dev.", "standard_deviation"),
)

_DETAILED_ROWS = (
    ("1st Qu.", "q1"),
    ("3rd Qu.", "q3"),
    ("IQR", "interquartile_range"),
    ("Skewness", "skewness"),
    ("Kurtosis", "kurtosis"),
)


@dataclass
class StatisticsSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[StatisticsParams] and provides convenient accessors.
    """
    _result: Result[StatisticsParams]
    _design: 'StatisticsDesign'

    # --- Basic statistics ---

    @property
    def params(self) -> StatisticsParams:
        return self._result.params

    @property
    def count(self) -> int:
        """Number of numeric observations analyzed."""
        return self._result.params.count

    @property
    def sum(self) -> float:
        return self._result.params.sum

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> float:
        """Most frequent value (smallest on ties)."""
        return self._result.params.mode

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def variance(self) -> float:
        """Population variance (divisor n)."""
        return self._result.params.variance

    @property
    def standard_deviation(self) -> float:
        """Population standard deviation."""
        return self._result.params.standard_deviation

    # --- Detailed statistics ---

    @property
    def is_detailed(self) -> bool:
        return self._result.params.detailed is not None

    @property
    def q1(self) -> float | None:
        """First quartile (nearest-rank), or None if not detailed."""
        d = self._result.params.detailed
        return d.q1 if d is not None else None

    @property
    def q3(self) -> float | None:
        """Third quartile (nearest-rank), or None if not detailed."""
        d = self._result.params.detailed
        return d.q3 if d is not None else None

    @property
    def interquartile_range(self) -> float | None:
        d = self._result.params.detailed
        return d.interquartile_range if d is not None else None

    @property
    def skewness(self) -> float | None:
        """Population skewness; NaN for constant data, None if not detailed."""
        d = self._result.params.detailed
        return d.skewness if d is not None else None

    @property
    def kurtosis(self) -> float | None:
        """Population kurtosis (not excess); NaN for constant data."""
        d = self._result.params.detailed
        return d.kurtosis if d is not None else None

    # --- Metadata ---

    @property
    def n_dropped(self) -> int:
        """Raw values discarded as non-numeric."""
        return self._design.n_dropped

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    # --- Output ---

    def to_dict(self) -> dict[str, Any]:
        """JSON-shaped report (camelCase keys, NaN as None)."""
        return report_dict(self._result.params)

    def export(self, path: str | Path) -> Path:
        """
        Write the report as indented JSON.

        Raises
        ------
        ExportError
            If the file cannot be written.
        """
        return write_report(self.to_dict(), path)

    def summary(self) -> str:
        """Aligned text table of every computed statistic."""
        params = self._result.params
        rows: list[tuple[str, Any]] = [
            (label, getattr(params, attr)) for label, attr in _BASIC_ROWS
        ]
        if params.detailed is not None:
            rows.extend(
                (label, getattr(params.detailed, attr))
                for label, attr in _DETAILED_ROWS
            )

        cells = [(label, _format_value(value)) for label, value in rows]
        label_width = max(len(label) for label, _ in cells)
        value_width = max(len(text) for _, text in cells)

        lines = ["Descriptive Statistics:"]
        for label, text in cells:
            lines.append(f"  {label.ljust(label_width)}  {text.rjust(value_width)}")
        if self.n_dropped:
            lines.append(f"  ({self.n_dropped} non-numeric values ignored)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        mode = "detailed" if self.is_detailed else "basic"
        return (
            f"StatisticsSolution(n={self.count}, mean={self.mean:.6g}, "
            f"sd={self.standard_deviation:.6g}, {mode})"
        )


def _format_value(value: Any) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    return f"{value:.6f}"
