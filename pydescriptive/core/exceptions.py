"""
Exception hierarchy for PyDescriptive.

All exceptions inherit from PyDescriptiveError to allow catching any
library-specific error. Non-fatal conditions are reported through the
warning categories at the bottom of this module instead of exceptions.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDescriptiveError(Exception):
    """Base exception for all PyDescriptive errors."""
    pass


class ValidationError(PyDescriptiveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InputResolutionError(ValidationError):
    """
    The data source for a call could not be resolved.

    Raised when neither or both of values/path are supplied, when the
    path does not exist or cannot be parsed, or when a requested column
    is absent from a tabular file.

    Attributes:
        path: The file path involved, if any
        column: The requested column, if any
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        column: str | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.column = column


class EmptyDataError(ValidationError):
    """
    No numeric observations remain after coercion.

    Attributes:
        n_raw: Number of raw values supplied
        n_dropped: Number of raw values discarded as non-numeric
    """

    def __init__(
        self,
        message: str,
        n_raw: int = 0,
        n_dropped: int = 0,
    ):
        super().__init__(message)
        self.n_raw = n_raw
        self.n_dropped = n_dropped


class ExportError(PyDescriptiveError):
    """
    Writing a statistics report failed.

    Attributes:
        path: Destination that could not be written
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class NoNumericDataWarning(UserWarning):
    """Input contained no numeric values; no result was produced."""
    pass


class ZeroVarianceWarning(UserWarning):
    """All observations are identical; higher moments are undefined."""
    pass


class ExportWarning(UserWarning):
    """A report could not be written; the in-memory result is still valid."""
    pass


class NumericalWarning(UserWarning):
    """A statistic exceeds the float64 range and is reported as +/-inf."""
    pass
