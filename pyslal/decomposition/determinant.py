"""
Determinant, cofactor, adjugate and inverse.

Small matrices (n <= 3) use closed forms. Larger determinants come from
the diagonal of the Doolittle upper factor, and larger cofactor matrices
from one minor determinant per output slot, fanned out over a joblib
thread pool. Every result is float64.
"""

from __future__ import annotations

import numpy as np

from pyslal.core.compute.parallel import parallel_map
from pyslal.core.compute.precision import promote
from pyslal.core.exceptions import DeterminantZeroError, ValidationError
from pyslal.core.kinds import FLOAT_KIND
from pyslal.core.validation import check_nonempty, check_square
from pyslal.decomposition.triangular import upper_triangular
from pyslal.matrix.matrix import Matrix


def _closed_form_det(a: np.ndarray) -> float:
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])
    return float(
        a[0, 0] * (a[1, 1] * a[2, 2] - a[1, 2] * a[2, 1])
        - a[0, 1] * (a[1, 0] * a[2, 2] - a[1, 2] * a[2, 0])
        + a[0, 2] * (a[1, 0] * a[2, 1] - a[1, 1] * a[2, 0])
    )


def det(m: Matrix) -> float:
    """
    Determinant of a square matrix.

    Triangular matrices (by stored zeros) return the product of their
    diagonal. Otherwise 1x1, 2x2 and 3x3 use closed forms and larger
    matrices the product of the Doolittle upper factor's diagonal.

    Raises:
        EmptyMatrixError: If m is empty
        NotSquareMatrixError: If m is not square
        TriangularFormUnavailableError: If n >= 4 and Doolittle fails

    Examples:
        >>> det(Matrix([[1, 2], [3, 4]]))
        -2.0
    """
    check_square(m, 'det')
    check_nonempty(m, 'det')
    f = promote(m, name='det')

    if f.is_upper_triangular() or f.is_lower_triangular():
        return float(np.prod(np.diag(f.grid)))
    if f.width <= 3:
        return _closed_form_det(f.grid)
    return float(np.prod(np.diag(upper_triangular(f).grid)))


def minor(m: Matrix, row: int, column: int) -> Matrix:
    """
    Submatrix of m with one row and one column removed.

    Raises:
        ValidationError: If row or column is out of range
    """
    if not 0 <= row < m.height:
        raise ValidationError(f"row: index {row} out of range for height {m.height}")
    if not 0 <= column < m.width:
        raise ValidationError(f"column: index {column} out of range for width {m.width}")
    grid = np.delete(np.delete(m.grid, row, axis=0), column, axis=1)
    return Matrix._wrap(grid.reshape(-1), m.width - 1, m.height - 1, m.kind)


def _cofactor_entry(m: Matrix, row: int, column: int) -> float:
    sign = -1.0 if (row + column) % 2 else 1.0
    return sign * det(minor(m, row, column))


def cofactor(m: Matrix, *, n_jobs: int | None = None) -> Matrix:
    """
    Cofactor matrix C[j][i] = (-1)**(j+i) * det(minor(m, j, i)).

    A 1x1 matrix has the cofactor matrix [[1.0]].

    Args:
        m: Square, non-empty matrix
        n_jobs: Workers for the per-entry minors of matrices larger than
            3x3 (joblib convention, all cores if None)

    Raises:
        EmptyMatrixError: If m is empty
        NotSquareMatrixError: If m is not square
        TriangularFormUnavailableError: If some minor has no triangular form
    """
    check_square(m, 'cofactor')
    check_nonempty(m, 'cofactor')
    f = promote(m, name='cofactor')
    a = f.grid
    n = f.width

    if n == 1:
        c = np.ones((1, 1))
    elif n == 2:
        c = np.array([[a[1, 1], -a[1, 0]], [-a[0, 1], a[0, 0]]])
    elif n == 3:
        # Cyclic indices fold the checkerboard sign into the 2x2 minors
        idx = np.arange(3)
        r1, r2 = (idx + 1) % 3, (idx + 2) % 3
        c = (
            a[np.ix_(r1, r1)] * a[np.ix_(r2, r2)]
            - a[np.ix_(r1, r2)] * a[np.ix_(r2, r1)]
        )
    else:
        slots = [(f, j, i) for j in range(n) for i in range(n)]
        c = np.array(parallel_map(_cofactor_entry, slots, n_jobs=n_jobs))

    return Matrix._wrap(np.asarray(c, dtype=np.float64).reshape(-1), n, n, FLOAT_KIND)


def adjugate(m: Matrix, *, n_jobs: int | None = None) -> Matrix:
    """Adjugate (classical adjoint): transpose of the cofactor matrix."""
    return cofactor(m, n_jobs=n_jobs).T


def inverse(m: Matrix, *, n_jobs: int | None = None) -> Matrix:
    """
    Inverse via the adjugate: adjugate(m) / det(m).

    Args:
        m: Square, non-empty matrix
        n_jobs: Workers for the cofactor minors (see cofactor)

    Returns:
        F64 matrix of the same size

    Raises:
        DeterminantZeroError: If det(m) is exactly 0.0
        EmptyMatrixError: If m is empty
        NotSquareMatrixError: If m is not square
        TriangularFormUnavailableError: If the determinant or a cofactor
            minor has no triangular form
    """
    d = det(m)
    if d == 0.0:
        raise DeterminantZeroError(
            "matrix is singular: determinant is 0.0, no inverse exists",
            matrix_name='matrix',
            determinant=d,
        )
    adj = adjugate(m, n_jobs=n_jobs)
    return Matrix._wrap(adj.data / d, m.width, m.height, FLOAT_KIND)
