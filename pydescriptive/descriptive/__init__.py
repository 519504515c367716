"""
Descriptive statistics module.

Summarizes a sequence of loosely typed observations. Population
(divisor n) variance, nearest-rank quartiles, and population
standardized moments throughout.

Public API:
    describe(values)      - All statistics for an in-memory sequence
    describe_file(path)   - All statistics for a CSV/TSV, JSON or text file
    mean, median, mode, quartile, variance, standard_deviation,
    skewness, kurtosis    - Individual scalar helpers
"""

from pydescriptive.descriptive.design import StatisticsDesign
from pydescriptive.descriptive.solution import (
    DetailedParams,
    StatisticsParams,
    StatisticsSolution,
)
from pydescriptive.descriptive.solvers import describe, describe_file
from pydescriptive.descriptive._helpers import (
    mean,
    median,
    mode,
    quartile,
    variance,
    standard_deviation,
    skewness,
    kurtosis,
)

__all__ = [
    "describe",
    "describe_file",
    "mean",
    "median",
    "mode",
    "quartile",
    "variance",
    "standard_deviation",
    "skewness",
    "kurtosis",
    "StatisticsDesign",
    "StatisticsParams",
    "DetailedParams",
    "StatisticsSolution",
]
