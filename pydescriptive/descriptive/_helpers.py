"""
Scalar descriptive statistics over a 1D numeric vector.

Each helper is a pure function: takes a sequence of floats, returns a
float. None of them coerce; pass the output of
pydescriptive.core.validation.coerce_numeric or a StatisticsDesign's
values.

Conventions:
    - Variance and standard deviation are population (divisor n)
    - Quartiles are nearest-rank: sorted[floor(n * q / 4)], no interpolation
    - Skewness and kurtosis are population standardized moments
      (no bias correction, kurtosis is NOT excess kurtosis)
    - Zero spread makes skewness and kurtosis NaN
    - Inputs near the float64 limits are scaled by a power of two before
      squaring; a sum or variance that is not representable comes back
      as inf rather than raising
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescriptive.core.exceptions import EmptyDataError
from pydescriptive.core.validation import check_quartile


_FLOAT_MAX = float(np.finfo(np.float64).max)


def _as_vector(x: ArrayLike) -> NDArray[np.floating[Any]]:
    arr = np.asarray(x, dtype=np.float64).ravel()
    if arr.size == 0:
        raise EmptyDataError("x: requires at least 1 value, got 0")
    return arr


def _scale_for(arr: NDArray[np.floating[Any]]) -> float:
    """
    Power-of-two factor that keeps squared deviations inside float64 range.

    Returns 1.0 when arr can be used as-is. Otherwise returns 2**k with
    max|arr| / 2**k in [1, 2). Division by a power of two is exact, so the
    scaled path rounds the same way as the direct one.
    """
    peak = float(np.max(np.abs(arr)))
    if peak == 0.0:
        return 1.0
    # |x - mean| <= 2 * peak, so sum((x - mean)^2) <= 4 * n * peak^2
    guard = math.sqrt(_FLOAT_MAX / (4.0 * arr.size))
    if 1.0 / guard < peak < guard:
        return 1.0
    return 2.0 ** (math.frexp(peak)[1] - 1)


def total(x: ArrayLike) -> float:
    """
    Exact (correctly rounded) sum.

    Returns +/-inf when the true sum lies outside the float64 range.
    """
    arr = _as_vector(x)
    scale = _scale_for(arr)
    return math.fsum(arr / scale) * scale


def mean(x: ArrayLike) -> float:
    """
    Arithmetic mean.

    A constant vector returns its value exactly, so that downstream
    deviations are exactly zero. Always finite for finite input, even when
    the sum itself is not representable.
    """
    arr = _as_vector(x)
    lo, hi = arr.min(), arr.max()
    if lo == hi:
        return float(lo)
    scale = _scale_for(arr)
    # Rounding of the quotient must not escape [lo, hi]
    return float(min(max(math.fsum(arr / scale) / arr.size * scale, lo), hi))


def median(x: ArrayLike) -> float:
    """
    Middle value of the sorted vector.

    Even n averages sorted[n/2 - 1] and sorted[n/2]; odd n takes
    sorted[n // 2].
    """
    s = np.sort(_as_vector(x))
    n = s.size
    mid = n // 2
    if n % 2 == 0:
        a, b = float(s[mid - 1]), float(s[mid])
        m = (a + b) / 2.0
        if math.isinf(m):
            m = a / 2.0 + b / 2.0
        return m
    return float(s[mid])


def mode(x: ArrayLike) -> float:
    """
    Most frequent value.

    Ties go to the smallest of the tied values.
    """
    values, counts = np.unique(_as_vector(x), return_counts=True)
    # np.unique sorts ascending and argmax returns the first maximum
    return float(values[np.argmax(counts)])


def quartile(x: ArrayLike, q: int) -> float:
    """
    Nearest-rank quartile.

    Parameters
    ----------
    x : array-like
        Observations.
    q : int
        1 for the first quartile, 3 for the third.

    Returns
    -------
    float
        sorted(x)[floor(n * q / 4)]. This selects an existing element and
        will not agree with interpolating definitions such as R type 7.
    """
    check_quartile(q)
    s = np.sort(_as_vector(x))
    return float(s[(s.size * int(q)) // 4])


def _scaled_deviations(
    arr: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], float, float]:
    """Return (x - mean) / scale, sum of its squares / n, and scale."""
    scale = _scale_for(arr)
    dev = arr / scale - mean(arr) / scale
    return dev, math.fsum(dev ** 2) / arr.size, scale


def variance(x: ArrayLike) -> float:
    """
    Population variance, sum((x - mean)^2) / n.

    Returns inf when the true variance lies outside the float64 range;
    standard_deviation stays finite in that case.
    """
    _, var_scaled, scale = _scaled_deviations(_as_vector(x))
    return var_scaled * scale * scale


def standard_deviation(x: ArrayLike) -> float:
    """Population standard deviation, sqrt(variance)."""
    _, var_scaled, scale = _scaled_deviations(_as_vector(x))
    return math.sqrt(var_scaled) * scale


def _standardized_moment(x: ArrayLike, order: int) -> float:
    arr = _as_vector(x)
    if arr.min() == arr.max():
        return math.nan
    dev, var_scaled, _ = _scaled_deviations(arr)
    # Scale cancels out of a standardized moment
    z = dev / math.sqrt(var_scaled)
    return math.fsum(z ** order) / arr.size


def skewness(x: ArrayLike) -> float:
    """
    Population skewness: mean(((x - mean) / sd)^3).

    Returns NaN when all values are identical.
    """
    return _standardized_moment(x, 3)


def kurtosis(x: ArrayLike) -> float:
    """
    Population kurtosis: mean(((x - mean) / sd)^4).

    No -3 correction: a normal sample is near 3, not 0. Returns NaN when
    all values are identical.
    """
    return _standardized_moment(x, 4)
