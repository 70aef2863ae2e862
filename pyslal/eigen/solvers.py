"""
Solver dispatch for the eigen approximator.
"""

from __future__ import annotations

import warnings

from pyslal.core.compute.tolerances import EIGEN_MAX_ITERATIONS, EIGEN_TOLERANCE
from pyslal.core.exceptions import ValidationError
from pyslal.core.protocols import RandomSource
from pyslal.eigen.backends.cpu import CPUPowerIterationBackend
from pyslal.eigen.design import EigenDesign
from pyslal.eigen.solution import EigenSolution
from pyslal.linear.random import resolve_source
from pyslal.matrix.matrix import Matrix


def _ensure_design(data: Matrix | EigenDesign) -> EigenDesign:
    """Convert a Matrix to EigenDesign if needed."""
    if isinstance(data, EigenDesign):
        return data
    if not isinstance(data, Matrix):
        raise ValidationError(
            f"eigen: expected a Matrix or EigenDesign, got {type(data).__name__}"
        )
    return EigenDesign.from_matrix(data)


def _get_backend() -> CPUPowerIterationBackend:
    return CPUPowerIterationBackend()


def eigen(
    data: Matrix | EigenDesign,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
    tol: float | None = None,
    max_iter: int | None = None,
) -> EigenSolution:
    """
    Approximate the dominant eigenpair by power iteration.

    Args:
        data: Square matrix of any kind, or a prepared EigenDesign
        seed: Seed for the default random source of the starting vector
        source: Random source for the starting vector (overrides seed)
        tol: Convergence tolerance on the eigenvalue estimate
            (EIGEN_TOLERANCE if None)
        max_iter: Maximum iterations (EIGEN_MAX_ITERATIONS if None)

    Returns:
        EigenSolution; unpacks as (vector, value)

    Raises:
        EmptyMatrixError: If the matrix is empty
        NotSquareMatrixError: If the matrix is not square
        ValidationError: If tol or max_iter is out of range

    Warns:
        RuntimeWarning: If the iteration did not converge

    Examples:
        >>> vector, value = eigen(Matrix([[2.0, 0.0], [0.0, 1.0]]), seed=0)
        >>> round(value, 8)
        2.0
    """
    tol = EIGEN_TOLERANCE if tol is None else tol
    max_iter = EIGEN_MAX_ITERATIONS if max_iter is None else max_iter
    if not tol > 0:
        raise ValidationError(f"tol: must be positive, got {tol}")
    if max_iter < 1:
        raise ValidationError(f"max_iter: must be at least 1, got {max_iter}")

    design = _ensure_design(data)
    be = _get_backend()

    result = be.solve(
        design,
        source=resolve_source(source, seed),
        tol=tol,
        max_iter=max_iter,
    )

    if not result.params.converged:
        warnings.warn(
            f"power iteration did not converge after {result.params.n_iter} "
            f"iterations (tol={tol:g})",
            RuntimeWarning,
            stacklevel=2,
        )

    return EigenSolution(_result=result, _design=design)
