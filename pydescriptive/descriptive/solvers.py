"""
Solver dispatch for descriptive statistics.

describe() is the single entry point; describe_file() is the file-backed
shorthand. Both resolve exactly one data source, run the CPU backend,
and optionally write a JSON report.

Outcome policy:
    - unresolvable input (no source, two sources, missing file,
      unknown column): InputResolutionError propagates
    - no numeric values after coercion: NoNumericDataWarning, returns None
    - zero variance in detailed mode: ZeroVarianceWarning, NaN moments
    - a sum, range or variance beyond float64: NumericalWarning, inf value
    - report write failure: ExportWarning, solution still returned

Warnings are emitted here rather than in the backend so that they point
at the caller of describe() or describe_file().
"""

from __future__ import annotations

import dataclasses
import warnings
from pathlib import Path
from typing import Any

from pydescriptive.core.datasource import DataSource
from pydescriptive.core.exceptions import (
    EmptyDataError,
    ExportError,
    ExportWarning,
    InputResolutionError,
    NoNumericDataWarning,
)
from pydescriptive.core.validation import check_flag
from pydescriptive.descriptive.design import StatisticsDesign
from pydescriptive.descriptive.solution import StatisticsSolution
from pydescriptive.descriptive._export import report_dict, write_report
from pydescriptive.descriptive.backends.cpu import (
    CPUStatisticsBackend,
    warning_category,
)


def _resolve_design(
    values: Any,
    path: str | Path | None,
    column: str | None,
) -> StatisticsDesign:
    """Build a design from exactly one of values / path."""
    if values is not None and path is not None:
        raise InputResolutionError(
            "Supply either values or path, not both", path=str(path),
        )
    if values is None and path is None:
        raise InputResolutionError("No data source: supply values or path")

    if path is not None:
        return StatisticsDesign.from_file(path, column=column)

    if column is not None:
        if isinstance(values, StatisticsDesign) or not hasattr(values, 'columns'):
            raise InputResolutionError(
                f"column='{column}' requires tabular input, got "
                f"{type(values).__name__}",
                column=column,
            )
        return StatisticsDesign.from_datasource(
            DataSource.from_dataframe(values), column=column,
        )
    if isinstance(values, StatisticsDesign):
        return values
    return StatisticsDesign.from_values(values)


def describe(
    values: Any = None,
    *,
    path: str | Path | None = None,
    column: str | None = None,
    detailed: bool = False,
    output_path: str | Path | None = None,
) -> StatisticsSolution | None:
    """
    Compute descriptive statistics.

    Computes: count, sum, mean, median, mode, min, max, range, population
    variance and population standard deviation. With detailed=True also
    nearest-rank Q1/Q3, interquartile range, population skewness and
    population kurtosis.

    Parameters
    ----------
    values : sequence, ndarray, pandas object or StatisticsDesign, optional
        Raw observations. Numbers and numeric-looking strings are used;
        everything else is silently dropped.
    path : str or Path, optional
        Input file (CSV/TSV, JSON, or one value per line). Mutually
        exclusive with values.
    column : str, optional
        Column to analyze. Only valid for tabular input (a DataFrame or
        a CSV/TSV path).
    detailed : bool
        Add quartiles and higher moments.
    output_path : str or Path, optional
        Where to write a JSON report.

    Returns
    -------
    StatisticsSolution, or None when the input holds no numeric values.

    Raises
    ------
    InputResolutionError
        If the data source cannot be resolved.
    """
    return _describe(values, path, column, detailed, output_path)


def describe_file(
    path: str | Path,
    *,
    column: str | None = None,
    detailed: bool = False,
    output_path: str | Path | None = None,
) -> StatisticsSolution | None:
    """
    Compute descriptive statistics for the values in a file.

    Equivalent to describe(path=path, ...). See describe() for details.
    """
    return _describe(None, path, column, detailed, output_path)


# Frames between warnings.warn in _describe and the user: _describe and
# the public entry point that called it
_STACKLEVEL = 3


def _describe(
    values: Any,
    path: str | Path | None,
    column: str | None,
    detailed: bool,
    output_path: str | Path | None,
) -> StatisticsSolution | None:
    check_flag(detailed, 'detailed')

    try:
        design = _resolve_design(values, path, column)
    except EmptyDataError as e:
        warnings.warn(str(e), NoNumericDataWarning, stacklevel=_STACKLEVEL)
        return None

    solution, pending = _solve(design, detailed=detailed, output_path=output_path)
    for message, category in pending:
        warnings.warn(message, category, stacklevel=_STACKLEVEL)
    return solution


def _solve(
    design: StatisticsDesign,
    *,
    detailed: bool,
    output_path: str | Path | None,
) -> tuple[StatisticsSolution, list[tuple[str, type[UserWarning]]]]:
    """Run the backend and the optional export; return the warnings to emit."""
    be = CPUStatisticsBackend()
    result = be.solve(design, detailed=detailed)
    pending = [(message, warning_category(message)) for message in result.warnings]

    if output_path is not None:
        try:
            written = write_report(report_dict(result.params), output_path)
        except ExportError as e:
            pending.append((str(e), ExportWarning))
            result = dataclasses.replace(
                result, warnings=result.warnings + (str(e),),
            )
        else:
            result = dataclasses.replace(
                result, info={**result.info, 'output_path': str(written)},
            )

    return StatisticsSolution(_result=result, _design=design), pending
