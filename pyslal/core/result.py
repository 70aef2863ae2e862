"""
Generic result container for iterative pyslal computations.

The Result class provides a standardized envelope for computations that
carry more than a single value: convergence state, timing and non-fatal
warnings alongside the domain-specific payload (e.g. the eigenpair).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, tolerance)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for pyslal computations.

    Type Parameters:
        P: The computation-specific parameter payload type

    Attributes:
        params: Computation-specific payload (eigenpair, factors, ...)
        info: Structured metadata (method, convergence, iterations)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EigenParams(vector=v, value=2.0, n_iter=31, converged=True),
        ...     info={'method': 'power_iteration', 'tol': 1e-10},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_power_iteration'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
