"""
Decomposition engines.

Public API:
    doolittle(m)         - LU factorization without pivoting (LUResult)
    upper_triangular(m)  - U factor
    lower_triangular(m)  - lower triangular form (transpose of U of m.T)
    det(m)               - determinant
    minor(m, row, col)   - submatrix without one row and column
    cofactor(m)          - cofactor matrix (parallel for n >= 4)
    adjugate(m)          - transpose of the cofactor matrix
    inverse(m)           - adjugate(m) / det(m)
"""

from pyslal.decomposition.triangular import (
    LUResult,
    doolittle,
    lower_triangular,
    upper_triangular,
)
from pyslal.decomposition.determinant import (
    adjugate,
    cofactor,
    det,
    inverse,
    minor,
)

__all__ = [
    "LUResult",
    "doolittle",
    "lower_triangular",
    "upper_triangular",
    "adjugate",
    "cofactor",
    "det",
    "inverse",
    "minor",
]
