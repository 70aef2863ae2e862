"""
Eigen solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

from pyslal.core.result import Result
from pyslal.vertex.vertex import Vertex

if TYPE_CHECKING:
    from pyslal.eigen.design import EigenDesign


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for the dominant eigenpair.

    Immutable data computed by backends.
    """
    vector: Vertex
    value: float
    n_iter: int
    converged: bool


@dataclass
class EigenSolution:
    """
    User-facing eigen results.

    Wraps the backend Result. Unpacks as (vector, value):

        vector, value = eigen(m)
    """
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    @property
    def vector(self) -> Vertex:
        """Unit-length column vertex approximating the dominant eigenvector."""
        return self._result.params.vector

    @property
    def value(self) -> float:
        """Rayleigh quotient estimate of the dominant eigenvalue."""
        return self._result.params.value

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def n_iter(self) -> int:
        return self._result.params.n_iter

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __iter__(self) -> Iterator[Any]:
        return iter((self.vector, self.value))

    def summary(self) -> str:
        lines = [
            "Dominant Eigenpair (power iteration)",
            "=" * 40,
            f"Matrix size: {self._design.n} x {self._design.n}",
            f"Eigenvalue: {self.value:.10g}",
            f"Converged: {self.converged} ({self.n_iter} iterations)",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EigenSolution(n={self._design.n}, value={self.value:.6g}, "
            f"converged={self.converged}, n_iter={self.n_iter})"
        )
