"""
pyslal: a small linear-algebra engine for Python.

Numeric vertices (vectors with a row/column orientation) and row-major
matrices over a family of integer and float element kinds, with
transpose-aware products, Doolittle triangularization, determinant,
cofactor/adjugate inverse, L2 normalization and dominant-eigenpair
approximation.

Submodules:
    vertex: Vertex and Orientation
    matrix: Matrix and structural predicates
    linear: Products, normalization, random construction
    decomposition: Triangularization, determinant, cofactor, inverse
    eigen: Power-iteration eigen approximator
"""

__version__ = "0.1.0"

from pyslal.core.kinds import ElementKind
from pyslal.vertex import Orientation, Vertex
from pyslal.matrix import Matrix
from pyslal import linear
from pyslal import decomposition
from pyslal import eigen

__all__ = [
    "__version__",
    "ElementKind",
    "Orientation",
    "Vertex",
    "Matrix",
    "linear",
    "decomposition",
    "eigen",
]
