"""
Tests for file-backed invocation: describe_file() and describe(path=...).
"""

import json

import pytest

from pydescriptive import describe, describe_file
from pydescriptive.core.exceptions import (
    InputResolutionError,
    NoNumericDataWarning,
)
from pydescriptive.descriptive import StatisticsDesign


@pytest.fixture
def hosts_csv(tmp_path):
    path = tmp_path / "hosts.csv"
    path.write_text(
        "host,latency_ms\n"
        "web1,10\n"
        "web2,20\n"
        "web3,timeout\n"
        "web4,20\n"
        "web5,30\n"
        "web6,40\n"
    )
    return path


class TestCsv:

    def test_column(self, hosts_csv):
        result = describe_file(hosts_csv, column="latency_ms")
        assert result.count == 5
        assert result.mean == 24.0
        assert result.mode == 20.0
        assert result.n_dropped == 1
        assert result.info["source"] == "dataframe:latency_ms"

    def test_without_column_uses_first_cell(self, hosts_csv):
        # First column is host names: nothing numeric
        with pytest.warns(NoNumericDataWarning):
            assert describe_file(hosts_csv) is None

    def test_single_column_rows(self, tmp_path):
        path = tmp_path / "values.csv"
        path.write_text("value\n1\n2\n3\n4\n")
        assert describe_file(path).median == 2.5

    def test_unknown_column(self, hosts_csv):
        with pytest.raises(InputResolutionError, match="cpu") as exc:
            describe_file(hosts_csv, column="cpu")
        assert exc.value.column == "cpu"

    def test_via_describe_path(self, hosts_csv):
        result = describe(path=hosts_csv, column="latency_ms", detailed=True)
        assert result.q1 == 20.0
        assert result.q3 == 30.0


class TestJson:

    def test_array(self, tmp_path):
        path = tmp_path / "readings.json"
        path.write_text(json.dumps([1, "2", None, "n/a", 3.5, True]))
        result = describe_file(path)
        assert result.count == 3
        assert result.sum == 6.5
        assert result.n_dropped == 3

    def test_nested_values_dropped(self, tmp_path):
        path = tmp_path / "nested.json"
        path.write_text(json.dumps([[1, 2], {"a": 3}, 4]))
        result = describe_file(path)
        assert result.count == 1
        assert result.mean == 4.0

    def test_malformed(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(InputResolutionError):
            describe_file(path)


class TestTextLines:

    def test_one_value_per_line(self, tmp_path):
        path = tmp_path / "values.txt"
        path.write_text("1\n2\n\nthree\n3\n4\n5\n")
        result = describe_file(path, detailed=True)
        assert result.count == 5
        assert result.median == 3.0
        assert result.n_dropped == 2

    def test_all_non_numeric_lines(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("alpha\nbeta\n")
        with pytest.warns(NoNumericDataWarning, match="2 raw values"):
            assert describe_file(path) is None

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.log"
        path.write_text("")
        with pytest.warns(NoNumericDataWarning):
            assert describe_file(path) is None


class TestMissingFile:

    def test_missing_path(self, tmp_path):
        with pytest.raises(InputResolutionError, match="not found"):
            describe_file(tmp_path / "absent.csv")

    def test_design_from_file(self, tmp_path):
        path = tmp_path / "v.txt"
        path.write_text("5\n1\n")
        design = StatisticsDesign.from_file(path)
        assert design.n == 2
        assert design.source == "lines"
