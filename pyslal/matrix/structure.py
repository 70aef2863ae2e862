"""
Structural predicates and constructors for square matrices.

These inspect stored zeros only; nothing here runs a decomposition.
Every predicate is False for a non-square matrix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike

from pyslal.core.kinds import ElementKind
from pyslal.core.validation import check_1d, check_array

if TYPE_CHECKING:
    from pyslal.matrix.matrix import Matrix


def is_upper_triangular(m: 'Matrix') -> bool:
    """True if every entry below the diagonal is zero."""
    if not m.is_square:
        return False
    grid = m.grid
    return not np.any(grid[np.tril_indices(m.height, k=-1)] != 0)


def is_lower_triangular(m: 'Matrix') -> bool:
    """True if every entry above the diagonal is zero."""
    if not m.is_square:
        return False
    grid = m.grid
    return not np.any(grid[np.triu_indices(m.height, k=1)] != 0)


def is_diagonal(m: 'Matrix') -> bool:
    """True if every off-diagonal entry is zero."""
    return is_upper_triangular(m) and is_lower_triangular(m)


def diagonal(values: ArrayLike, kind: ElementKind | None = None) -> 'Matrix':
    """
    Square matrix with values on the diagonal and zeros elsewhere.

    Args:
        values: Diagonal entries (length n gives an n x n matrix)
        kind: Element kind, inferred from values if None
    """
    from pyslal.matrix.matrix import Matrix

    array, resolved = check_array(values, 'values', kind)
    check_1d(array, 'values')
    n = array.size
    grid = np.empty((n, n), dtype=resolved.dtype)
    grid[...] = resolved.zero()
    grid[np.diag_indices(n)] = array
    return Matrix._wrap(grid.reshape(-1), n, n, resolved)


def identity(n: int, kind: ElementKind = ElementKind.F64) -> 'Matrix':
    """n x n identity matrix."""
    one = kind.one()
    values = np.empty(n, dtype=kind.dtype)
    values[...] = one
    return diagonal(values, kind)
