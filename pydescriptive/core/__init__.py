"""
Core infrastructure for PyDescriptive.

This module provides shared abstractions and utilities used by the
descriptive statistics engine.

Key components:
    datasource: Raw value extraction from sequences, tables and files
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and warning categories
    validation: Numeric-literal grammar and coercion
    compute: Timing utilities
"""

from pydescriptive.core.datasource import DataSource
from pydescriptive.core.result import Result
from pydescriptive.core.exceptions import (
    PyDescriptiveError,
    ValidationError,
    InputResolutionError,
    EmptyDataError,
    ExportError,
    NoNumericDataWarning,
    ZeroVarianceWarning,
    ExportWarning,
    NumericalWarning,
)

__all__ = [
    # Data
    "DataSource",
    # Result
    "Result",
    # Exceptions
    "PyDescriptiveError",
    "ValidationError",
    "InputResolutionError",
    "EmptyDataError",
    "ExportError",
    # Warnings
    "NoNumericDataWarning",
    "ZeroVarianceWarning",
    "ExportWarning",
    "NumericalWarning",
]
