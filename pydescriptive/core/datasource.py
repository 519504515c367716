"""
Universal DataSource for PyDescriptive.

DataSource is the "I have data" abstraction. It turns a file, a table,
or an in-memory sequence into named columns of raw, still-untyped values.
It does not coerce anything; classification into numbers happens later
in pydescriptive.core.validation.

Usage:
    from pydescriptive.core.datasource import DataSource

    ds = DataSource.from_values([1, "2.5", None])
    ds = DataSource.from_file("measurements.csv")
    ds = DataSource.from_file("readings.json")
    ds = DataSource.from_file("values.txt")
    ds = DataSource.from_dataframe(df)

    ds.keys()                   # frozenset({'latency_ms', 'host'})
    raw = ds.sequence()         # one item per row / element / line
    raw = ds.sequence('latency_ms')
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from pydescriptive.core.exceptions import InputResolutionError


# Storage key for the default flat sequence
_ITEMS = '_items'

TABLE_SUFFIXES = {'.csv': ',', '.tsv': '\t'}
JSON_SUFFIXES = frozenset({'.json'})


@dataclass
class DataSource:
    """
    Raw value container. Domain-agnostic.

    Construct via factory classmethods, not directly.

    Every DataSource carries a default flat sequence (one item per row,
    array element, or text line). Tabular sources additionally expose each
    column by name.
    """
    _data: dict[str, list[Any]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Access ===

    def keys(self) -> frozenset[str]:
        """
        Return the names of all available columns.

        Example:
            >>> ds = DataSource.from_file("hosts.csv")
            >>> ds.keys()
            frozenset({'host', 'latency_ms'})
        """
        return frozenset(k for k in self._data.keys() if not k.startswith('_'))

    def __getitem__(self, key: str) -> list[Any]:
        if key not in self._data:
            available = sorted(self.keys())
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {available}"
            )
        return self._data[key]

    def sequence(self, column: str | None = None) -> list[Any]:
        """
        Flat sequence of raw values.

        Args:
            column: Column to select. None selects the default sequence.

        Raises:
            InputResolutionError: If the column does not exist
        """
        if column is None:
            return self._data[_ITEMS]
        if column.startswith('_') or column not in self._data:
            raise InputResolutionError(
                f"Column '{column}' not found. Available: {sorted(self.keys())}",
                path=self._metadata.get('source_path'),
                column=column,
            )
        return self._data[column]

    # === Properties ===

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_values(cls, values: Any) -> DataSource:
        """Construct from an in-memory sequence (list, tuple, ndarray, Series)."""
        if isinstance(values, np.ndarray):
            items = values.ravel().tolist()
        elif hasattr(values, 'tolist'):
            items = values.tolist()
        elif isinstance(values, dict):
            items = list(values.values())
        elif isinstance(values, (str, bytes)) or not hasattr(values, '__iter__'):
            items = [values]
        else:
            items = list(values)
        if not isinstance(items, list):
            items = [items]
        return cls(
            _data={_ITEMS: items},
            _metadata={'source': 'values'},
        )

    @classmethod
    def from_dataframe(
        cls, df: pd.DataFrame, *, source_path: str | None = None,
    ) -> DataSource:
        """
        Construct from a pandas DataFrame.

        Each column is exposed by its (stringified) name. The default
        sequence holds one item per row: the row's first cell, since a
        whole row is not itself a number.
        """
        storage: dict[str, list[Any]] = {}
        for col in df.columns:
            storage[str(col)] = df[col].tolist()

        if len(df.columns) > 0:
            storage[_ITEMS] = df.iloc[:, 0].tolist()
        else:
            storage[_ITEMS] = []

        metadata: dict[str, Any] = {
            'source': 'dataframe',
            'columns': [str(c) for c in df.columns],
        }
        if source_path:
            metadata['source_path'] = source_path

        return cls(_data=storage, _metadata=metadata)

    @classmethod
    def from_file(cls, path: str | Path) -> DataSource:
        """
        Construct from a file, dispatching on suffix.

        .csv / .tsv -> delimited table with a header row
        .json       -> parsed document
        other       -> one item per line of text

        Raises:
            InputResolutionError: If the file is missing or cannot be parsed
        """
        path = Path(path)
        if not path.is_file():
            raise InputResolutionError(
                f"Input file not found: {path}", path=str(path),
            )

        suffix = path.suffix.lower()
        if suffix in TABLE_SUFFIXES:
            return cls._from_table(path, TABLE_SUFFIXES[suffix])
        elif suffix in JSON_SUFFIXES:
            return cls._from_json(path)
        else:
            return cls._from_lines(path)

    @classmethod
    def _from_table(cls, path: Path, sep: str) -> DataSource:
        try:
            df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            df = pd.DataFrame()
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise InputResolutionError(
                f"Cannot parse table {path}: {e}", path=str(path),
            ) from e
        return cls.from_dataframe(df, source_path=str(path))

    @classmethod
    def _from_json(cls, path: Path) -> DataSource:
        try:
            with path.open(encoding='utf-8') as fh:
                document = json.load(fh)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise InputResolutionError(
                f"Cannot parse JSON {path}: {e}", path=str(path),
            ) from e

        if isinstance(document, list):
            items = document
        elif isinstance(document, dict):
            items = list(document.values())
        else:
            items = [document]

        return cls(
            _data={_ITEMS: items},
            _metadata={'source': 'json', 'source_path': str(path)},
        )

    @classmethod
    def _from_lines(cls, path: Path) -> DataSource:
        try:
            text = path.read_text(encoding='utf-8')
        except (UnicodeDecodeError, OSError) as e:
            raise InputResolutionError(
                f"Cannot read {path}: {e}", path=str(path),
            ) from e

        return cls(
            _data={_ITEMS: text.splitlines()},
            _metadata={'source': 'lines', 'source_path': str(path)},
        )
