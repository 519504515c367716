"""
Generic result container for all PyDescriptive computations.

The Result class provides a standardized envelope around a domain-specific
parameter payload. This enables shared tooling for timing, reproducibility,
and serialization while keeping the payload itself a plain frozen record.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (input counts, computed fields)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata recorded on every result unless overridden."""
    from pydescriptive import __version__
    return {
        'pydescriptive_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (the statistics record)
        info: Structured metadata (input counts, detailed flag)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=StatisticsParams(count=3, ...),
        ...     info={'n_raw': 4, 'n_dropped': 1, 'detailed': False},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
