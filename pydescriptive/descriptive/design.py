"""
StatisticsDesign: data wrapper for the descriptive statistics engine.

Wraps the coerced observation vector and records how much of the raw
input was discarded on the way. Follows the pydescriptive Design pattern:
build once through a classmethod, immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydescriptive.core.datasource import DataSource
from pydescriptive.core.exceptions import EmptyDataError
from pydescriptive.core.validation import coerce_numeric, is_real_array


@dataclass(frozen=True)
class StatisticsDesign:
    """
    Design for descriptive statistics.

    Holds a non-empty 1D float64 vector of observations, sorted ascending.
    Order of the raw input never matters to any statistic, so the sort is
    done once here.

    Construction:
        StatisticsDesign.from_values([10, "20", "abc", None])
        StatisticsDesign.from_file("latency.csv", column="ms")
        StatisticsDesign.from_datasource(ds, column="ms")
    """
    _values: NDArray[np.floating[Any]]
    _n_raw: int
    _n_dropped: int
    _source: str

    @classmethod
    def from_values(cls, values: Any) -> StatisticsDesign:
        """
        Build from an in-memory sequence.

        Parameters
        ----------
        values : sequence, ndarray, pandas Series or DataFrame
            Raw observations. A DataFrame contributes its first column.
        """
        if is_real_array(values):
            return cls._build(values, source='values')
        if hasattr(values, 'columns'):
            return cls.from_datasource(DataSource.from_dataframe(values))
        return cls.from_datasource(DataSource.from_values(values))

    @classmethod
    def from_file(
        cls, path: str | Path, *, column: str | None = None,
    ) -> StatisticsDesign:
        """
        Build from a CSV/TSV table, JSON document, or plain-text file.

        Parameters
        ----------
        path : str or Path
            Input file.
        column : str, optional
            Column to analyze for tabular files.
        """
        return cls.from_datasource(DataSource.from_file(path), column=column)

    @classmethod
    def from_datasource(
        cls, source: DataSource, *, column: str | None = None,
    ) -> StatisticsDesign:
        """Build from a DataSource, selecting one column or the default sequence."""
        raw = source.sequence(column)
        label = source.metadata.get('source', 'values')
        if column is not None:
            label = f"{label}:{column}"
        return cls._build(raw, source=label)

    @classmethod
    def _build(cls, raw: Any, *, source: str) -> StatisticsDesign:
        """Internal builder: coerce, reject empty, sort."""
        report = coerce_numeric(raw)

        if report.is_empty:
            raise EmptyDataError(
                f"No numeric data: {report.n_raw} raw values, "
                f"{report.n_dropped} discarded as non-numeric",
                n_raw=report.n_raw,
                n_dropped=report.n_dropped,
            )

        values = np.sort(report.values)
        values.setflags(write=False)

        return cls(
            _values=values,
            _n_raw=report.n_raw,
            _n_dropped=report.n_dropped,
            _source=source,
        )

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observations, sorted ascending, read-only."""
        return self._values

    @property
    def n(self) -> int:
        """Number of numeric observations."""
        return int(self._values.size)

    @property
    def n_raw(self) -> int:
        """Number of raw values inspected."""
        return self._n_raw

    @property
    def n_dropped(self) -> int:
        """Number of raw values discarded as non-numeric."""
        return self._n_dropped

    @property
    def source(self) -> str:
        return self._source

    def __repr__(self) -> str:
        dropped = f", dropped={self._n_dropped}" if self._n_dropped else ""
        return f"StatisticsDesign(n={self.n}{dropped}, source={self._source!r})"
