"""
Matrix module.

Public API:
    Matrix                 - row-major numeric grid
    is_upper_triangular(m) - structural predicates (no decomposition)
    is_lower_triangular(m)
    is_diagonal(m)
    diagonal(values)       - diagonal matrix constructor
    identity(n)
"""

from pyslal.matrix.matrix import Matrix
from pyslal.matrix.structure import (
    diagonal,
    identity,
    is_diagonal,
    is_lower_triangular,
    is_upper_triangular,
)

__all__ = [
    "Matrix",
    "diagonal",
    "identity",
    "is_diagonal",
    "is_lower_triangular",
    "is_upper_triangular",
]
