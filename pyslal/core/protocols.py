"""
Core protocols for pyslal.

These define structural interfaces that collaborators must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
callers can inject their own implementations without subclassing.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, TYPE_CHECKING, runtime_checkable
from numpy.typing import NDArray

if TYPE_CHECKING:
    from pyslal.core.kinds import ElementKind
    from pyslal.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class RandomSource(Protocol):
    """
    Injected capability producing uniformly distributed elements.

    Random construction (Vertex.rand, Matrix.rand) and the eigen
    approximator's starting vector draw through this interface, so tests
    and callers control reproducibility by choosing the source.
    """

    def uniform(self, kind: 'ElementKind', count: int) -> NDArray[Any]:
        """
        Draw count uniformly distributed elements of the given kind.

        Args:
            kind: Element kind of the values to produce
            count: Number of values

        Returns:
            1D array of length count in the kind's storage

        Note:
            Zero and near-zero values are allowed here; rejection of small
            magnitudes is applied by the caller.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a design and produce a parameter
    payload wrapped in a Result.

    Backends are stateless: all configuration is passed via the design
    or as keyword arguments to solve().

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_power_iteration'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
