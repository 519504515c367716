"""
Report serialization for descriptive statistics.

The report is a convenience dump: a JSON-shaped key/value document with
camelCase keys and nested objects for the detailed fields. It carries no
schema version and makes no compatibility promises.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, TYPE_CHECKING

from pydescriptive.core.exceptions import ExportError

if TYPE_CHECKING:
    from pydescriptive.descriptive.solution import StatisticsParams


def _json_number(value: float) -> float | None:
    """JSON has no NaN or inf; write them as null."""
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def report_dict(params: 'StatisticsParams') -> dict[str, Any]:
    """
    Build the report mapping for a statistics payload.

    Layout:
        {count, sum, mean, median, mode, min, max, range, variance,
         standardDeviation,
         quartiles: {q1, q3, interquartileRange},     # detailed only
         distribution: {skewness, kurtosis}}          # detailed only
    """
    report: dict[str, Any] = {
        'count': params.count,
        'sum': _json_number(params.sum),
        'mean': _json_number(params.mean),
        'median': _json_number(params.median),
        'mode': _json_number(params.mode),
        'min': _json_number(params.min),
        'max': _json_number(params.max),
        'range': _json_number(params.range),
        'variance': _json_number(params.variance),
        'standardDeviation': _json_number(params.standard_deviation),
    }

    detailed = params.detailed
    if detailed is not None:
        report['quartiles'] = {
            'q1': _json_number(detailed.q1),
            'q3': _json_number(detailed.q3),
            'interquartileRange': _json_number(detailed.interquartile_range),
        }
        report['distribution'] = {
            'skewness': _json_number(detailed.skewness),
            'kurtosis': _json_number(detailed.kurtosis),
        }

    return report


def write_report(report: dict[str, Any], path: str | Path) -> Path:
    """
    Write a report as indented JSON, creating parent directories.

    Returns
    -------
    Path
        The path written.

    Raises
    ------
    ExportError
        If the directory cannot be created or the file cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding='utf-8') as fh:
            json.dump(report, fh, indent=2)
            fh.write('\n')
    except OSError as e:
        raise ExportError(
            f"Cannot write statistics report to {path}: {e}", path=str(path),
        ) from e
    return path
