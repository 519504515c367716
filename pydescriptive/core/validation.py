"""
Input classification and coercion for PyDescriptive.

Raw observations arrive loosely typed: numbers, numeric-looking strings
read from text files, and assorted junk from untyped table columns. This
module classifies each element against a strict numeric-literal grammar
and produces a typed float64 vector before any statistic is computed.

Design principles:
    - Permissive on elements: anything non-numeric is dropped, not fatal
    - Strict on grammar: optional sign, digits, at most one decimal point
    - Booleans are never numbers, even though Python says they are
    - NaN and Inf are not observations and are dropped
    - Each function validates ONE thing
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from pydescriptive.core.exceptions import ValidationError


# Optional sign, then digits with an optional single decimal point, or a
# bare fractional part (".5"). No exponents, separators, or nan/inf words.
NUMERIC_LITERAL = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')


@dataclass(frozen=True)
class CoercionReport:
    """
    Outcome of coercing a raw value sequence.

    Attributes:
        values: 1D float64 array of the values that survived coercion
        n_raw: Number of raw elements inspected
        n_dropped: Number of elements discarded as non-numeric
    """
    values: NDArray[np.floating[Any]]
    n_raw: int
    n_dropped: int

    @property
    def is_empty(self) -> bool:
        return self.values.size == 0


def is_numeric_literal(text: str) -> bool:
    """
    Check whether a string lexically represents a number.

    Surrounding whitespace is ignored.

    Examples:
        >>> is_numeric_literal(" -3.25 ")
        True
        >>> is_numeric_literal("1e5")
        False
    """
    return NUMERIC_LITERAL.fullmatch(text.strip()) is not None


def coerce_value(value: Any) -> float | None:
    """
    Convert one raw element to a float, or None if it is not numeric.

    Args:
        value: Any raw element

    Returns:
        float value, or None when the element must be discarded
    """
    if isinstance(value, (bool, np.bool_)):
        return None

    if isinstance(value, bytes):
        try:
            value = value.decode('ascii')
        except UnicodeDecodeError:
            return None

    if isinstance(value, str):
        if not is_numeric_literal(value):
            return None
        result = float(value.strip())
    elif isinstance(value, numbers.Real):
        try:
            result = float(value)
        except OverflowError:
            return None
    else:
        return None

    # Overlong digit strings overflow to inf
    if not math.isfinite(result):
        return None
    return result


def _as_iterable(values: Any) -> Iterable[Any]:
    """Treat strings and scalars as one-element sequences."""
    if values is None:
        return ()
    if isinstance(values, (str, bytes)):
        return (values,)
    if isinstance(values, np.ndarray):
        return values.ravel()
    if isinstance(values, dict):
        return values.values()
    try:
        iter(values)
    except TypeError:
        return (values,)
    return values


def is_real_array(values: Any) -> bool:
    """True for an ndarray of integer or floating dtype (not bool, not complex)."""
    return isinstance(values, np.ndarray) and (
        np.issubdtype(values.dtype, np.integer)
        or np.issubdtype(values.dtype, np.floating)
    )


def coerce_numeric(values: Any) -> CoercionReport:
    """
    Coerce a loosely typed sequence into a float64 vector.

    Numeric ndarrays take a vectorized path; everything else is classified
    element by element with coerce_value().

    Args:
        values: Sequence (or scalar) of raw observations

    Returns:
        CoercionReport with the surviving values and drop counts
    """
    if is_real_array(values):
        flat = values.ravel().astype(np.float64)
        finite = flat[np.isfinite(flat)]
        return CoercionReport(
            values=finite,
            n_raw=int(flat.size),
            n_dropped=int(flat.size - finite.size),
        )

    kept: list[float] = []
    n_raw = 0
    for item in _as_iterable(values):
        n_raw += 1
        number = coerce_value(item)
        if number is not None:
            kept.append(number)

    return CoercionReport(
        values=np.asarray(kept, dtype=np.float64),
        n_raw=n_raw,
        n_dropped=n_raw - len(kept),
    )


def check_quartile(q: int) -> None:
    """
    Verify a quartile index is 1 or 3.

    Raises:
        ValidationError: For any other value
    """
    if isinstance(q, bool) or not isinstance(q, numbers.Integral) or q not in (1, 3):
        raise ValidationError(f"q: quartile must be 1 or 3, got {q!r}")


def check_flag(value: Any, name: str) -> None:
    """
    Verify a keyword flag is a real bool.

    Raises:
        ValidationError: If value is not True or False
    """
    if not isinstance(value, bool):
        raise ValidationError(
            f"{name}: expected bool, got {type(value).__name__}"
        )
