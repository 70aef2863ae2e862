"""
Eigen module.

Approximates the dominant eigenpair (largest-magnitude eigenvalue and its
eigenvector) of a square matrix by power iteration.

Public API:
    eigen(m)        - dominant eigenpair (EigenSolution)
    EigenDesign     - validated, F64-promoted input
    EigenParams     - backend payload
    EigenSolution   - user-facing wrapper; unpacks as (vector, value)
"""

from pyslal.eigen.design import EigenDesign
from pyslal.eigen.solution import EigenParams, EigenSolution
from pyslal.eigen.solvers import eigen

__all__ = [
    "eigen",
    "EigenDesign",
    "EigenParams",
    "EigenSolution",
]
