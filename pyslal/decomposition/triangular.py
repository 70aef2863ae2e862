"""
Doolittle triangularization.

Factors a square matrix A = L U with L unit lower triangular and U upper
triangular, in float64, without pivoting. Computed values at or below
TRIANGULAR_ZERO_THRESHOLD are collapsed to exact zeros so that structural
zeros survive floating-point noise. A vanishing pivot means no triangular
form exists for the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyslal.core.compute.precision import collapse_near_zero, promote
from pyslal.core.compute.tolerances import TRIANGULAR_ZERO_THRESHOLD
from pyslal.core.exceptions import TriangularFormUnavailableError
from pyslal.core.kinds import FLOAT_KIND
from pyslal.core.validation import check_nonempty, check_square
from pyslal.matrix.matrix import Matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LUResult:
    """
    Result of Doolittle decomposition.

    Attributes:
        lower: Unit lower triangular factor L
        upper: Upper triangular factor U, with A = L * U
    """
    lower: Matrix
    upper: Matrix

    def __iter__(self):
        return iter((self.lower, self.upper))


def _doolittle_arrays(
    a: NDArray[np.floating[Any]],
    threshold: float,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    n = a.shape[0]
    lower = np.eye(n)
    upper = np.zeros((n, n))

    for j in range(n):
        # Row j of L left of the diagonal; each entry needs the ones before it
        for i in range(j):
            value = (a[j, i] - lower[j, :i] @ upper[:i, i]) / upper[i, i]
            lower[j, i] = collapse_near_zero(value, threshold)

        pivot = a[j, j] - lower[j, :j] @ upper[:j, j]
        if abs(pivot) <= threshold:
            logger.debug("doolittle: pivot %d vanished (%g)", j, pivot)
            raise TriangularFormUnavailableError(
                f"no triangular form exists: pivot {j} has magnitude "
                f"{abs(pivot):.3g} <= {threshold:g} and no row exchange is applied",
                pivot_index=j,
                pivot=float(pivot),
            )
        upper[j, j] = pivot

        # Row j of U right of the diagonal only depends on finished rows
        rest = a[j, j + 1:] - lower[j, :j] @ upper[:j, j + 1:]
        rest[np.abs(rest) <= threshold] = 0.0
        upper[j, j + 1:] = rest

    return lower, upper


def doolittle(
    m: Matrix,
    *,
    threshold: float = TRIANGULAR_ZERO_THRESHOLD,
) -> LUResult:
    """
    Doolittle LU decomposition without pivoting.

    Args:
        m: Square, non-empty matrix of any kind (promoted to F64)
        threshold: Magnitude at or below which computed values are zero

    Returns:
        LUResult with F64 factors; L has a unit diagonal

    Raises:
        EmptyMatrixError: If m is empty
        NotSquareMatrixError: If m is not square
        TriangularFormUnavailableError: If a pivot vanishes

    Examples:
        >>> lower, upper = doolittle(Matrix([[4.0, 3.0], [6.0, 3.0]]))
        >>> upper.to_list()
        [[4.0, 3.0], [0.0, -1.5]]
    """
    check_square(m, 'doolittle')
    check_nonempty(m, 'doolittle')
    a = promote(m, name='doolittle').to_numpy()
    n = m.width

    lower, upper = _doolittle_arrays(a, threshold)
    return LUResult(
        lower=Matrix._wrap(lower.reshape(-1), n, n, FLOAT_KIND),
        upper=Matrix._wrap(upper.reshape(-1), n, n, FLOAT_KIND),
    )


def upper_triangular(m: Matrix) -> Matrix:
    """Upper triangular factor U of the Doolittle decomposition."""
    return doolittle(m).upper


def lower_triangular(m: Matrix) -> Matrix:
    """
    Lower triangular form of m: the transpose of upper_triangular(m).

    Its diagonal product equals that of upper_triangular(m).
    """
    return upper_triangular(m).T
