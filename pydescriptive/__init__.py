"""
PyDescriptive: descriptive statistics for loosely typed data.

Summarizes a sequence of observations (numbers, or numeric-looking strings
read from CSV, JSON or plain-text files) into count, sum, mean, median,
mode, extrema, range, population variance and standard deviation, with
optional nearest-rank quartiles, skewness and kurtosis.

Submodules:
    descriptive: The statistics engine (describe, describe_file, helpers)
    core: Data sources, coercion, result envelope, exceptions
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pydescriptive import descriptive
from pydescriptive.descriptive import describe, describe_file

__all__ = [
    "__version__",
    "descriptive",
    "describe",
    "describe_file",
]
