"""
Tests for numeric-literal classification and coercion.

Validates every function in core/validation.py:
    - is_numeric_literal: the sign / digits / single decimal point grammar
    - coerce_value: per-element classification, bool and non-finite rejection
    - coerce_numeric: sequence coercion and drop accounting
    - check_quartile / check_flag
"""

from decimal import Decimal

import numpy as np
import pytest

from pydescriptive.core.exceptions import ValidationError
from pydescriptive.core.validation import (
    check_flag,
    check_quartile,
    coerce_numeric,
    coerce_value,
    is_numeric_literal,
)


# ═══════════════════════════════════════════════════════════════════════
# is_numeric_literal
# ═══════════════════════════════════════════════════════════════════════


class TestIsNumericLiteral:

    @pytest.mark.parametrize("text", [
        "0", "42", "-7", "+7", "3.14", "-0.5", "5.", ".5", "+.25", "  12  ", "007",
    ])
    def test_accepts(self, text):
        assert is_numeric_literal(text)

    @pytest.mark.parametrize("text", [
        "", " ", "abc", "1e5", "1.2.3", "1,000", "--1", "+-1", "-", ".",
        "nan", "inf", "12abc", "0x1F", "1 2",
    ])
    def test_rejects(self, text):
        assert not is_numeric_literal(text)

    def test_rejects_non_ascii_digits(self):
        assert not is_numeric_literal("٣")  # Arabic-Indic three


# ═══════════════════════════════════════════════════════════════════════
# coerce_value
# ═══════════════════════════════════════════════════════════════════════


class TestCoerceValue:

    def test_int(self):
        assert coerce_value(3) == 3.0

    def test_float(self):
        assert coerce_value(2.5) == 2.5

    def test_numeric_string(self):
        assert coerce_value(" -1.5 ") == -1.5

    def test_bytes(self):
        assert coerce_value(b"12") == 12.0

    def test_numpy_scalars(self):
        assert coerce_value(np.int32(4)) == 4.0
        assert coerce_value(np.float32(0.5)) == 0.5

    @pytest.mark.parametrize("value", [
        None, "", "abc", True, False, np.bool_(True), [1], {"a": 1},
        float("nan"), float("inf"), -np.inf, object(), Decimal("1.5"),
    ])
    def test_discarded(self, value):
        assert coerce_value(value) is None

    def test_result_is_plain_float(self):
        assert type(coerce_value(np.int64(9))) is float


# ═══════════════════════════════════════════════════════════════════════
# coerce_numeric
# ═══════════════════════════════════════════════════════════════════════


class TestCoerceNumeric:

    def test_mixed_list(self):
        report = coerce_numeric([1, "2", "abc", None, "", 3.5])
        np.testing.assert_array_equal(report.values, [1.0, 2.0, 3.5])
        assert report.n_raw == 6
        assert report.n_dropped == 3
        assert not report.is_empty

    def test_all_non_numeric(self):
        report = coerce_numeric(["abc", None, ""])
        assert report.is_empty
        assert report.n_raw == 3
        assert report.n_dropped == 3

    def test_empty_sequence(self):
        report = coerce_numeric([])
        assert report.is_empty
        assert report.n_raw == 0

    def test_none_is_empty(self):
        assert coerce_numeric(None).n_raw == 0

    def test_preserves_order(self):
        report = coerce_numeric(["3", 1, "2"])
        np.testing.assert_array_equal(report.values, [3.0, 1.0, 2.0])

    def test_string_is_one_element(self):
        report = coerce_numeric("12.5")
        np.testing.assert_array_equal(report.values, [12.5])
        assert report.n_raw == 1

    def test_scalar_is_one_element(self):
        report = coerce_numeric(7)
        np.testing.assert_array_equal(report.values, [7.0])

    def test_numeric_ndarray_fast_path(self):
        report = coerce_numeric(np.array([[1, 2], [3, 4]]))
        np.testing.assert_array_equal(report.values, [1.0, 2.0, 3.0, 4.0])
        assert report.values.dtype == np.float64
        assert report.n_dropped == 0

    def test_ndarray_drops_non_finite(self):
        report = coerce_numeric(np.array([1.0, np.nan, np.inf, 2.0]))
        np.testing.assert_array_equal(report.values, [1.0, 2.0])
        assert report.n_raw == 4
        assert report.n_dropped == 2

    def test_object_ndarray(self):
        report = coerce_numeric(np.array(["1", None, 2], dtype=object))
        np.testing.assert_array_equal(report.values, [1.0, 2.0])

    def test_bool_ndarray_dropped(self):
        report = coerce_numeric(np.array([True, False]))
        assert report.is_empty

    def test_complex_ndarray_dropped(self):
        report = coerce_numeric(np.array([1 + 2j, 3 + 0j]))
        assert report.is_empty
        assert report.n_raw == 2
        assert report.n_dropped == 2

    def test_generator(self):
        report = coerce_numeric(str(i) for i in range(3))
        np.testing.assert_array_equal(report.values, [0.0, 1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# check_quartile / check_flag
# ═══════════════════════════════════════════════════════════════════════


class TestCheckQuartile:

    @pytest.mark.parametrize("q", [1, 3])
    def test_valid(self, q):
        check_quartile(q)

    @pytest.mark.parametrize("q", [0, 2, 4, -1, 1.5, "1", True])
    def test_invalid(self, q):
        with pytest.raises(ValidationError, match="quartile"):
            check_quartile(q)


class TestCheckFlag:

    def test_bool_passes(self):
        check_flag(True, "detailed")
        check_flag(False, "detailed")

    def test_non_bool_rejected(self):
        with pytest.raises(ValidationError, match="detailed"):
            check_flag(1, "detailed")
