"""
L2 normalization.

Matrices are normalized per column; vertices have a single Euclidean
magnitude regardless of orientation. Results are always float (F64).
"""

from __future__ import annotations

import numpy as np

from pyslal.core.compute.precision import promote, safe_divide
from pyslal.core.exceptions import NumericalError
from pyslal.core.kinds import FLOAT_KIND
from pyslal.matrix.matrix import Matrix
from pyslal.vertex.vertex import Vertex


def magnitude(vertex: Vertex) -> float:
    """Euclidean magnitude sqrt(sum(x**2)) of a vertex."""
    data = promote(vertex, name='magnitude').data
    return float(np.sqrt(np.sum(data * data)))


def norm(operand: Matrix | Vertex) -> Matrix | float:
    """
    L2 normalization.

    Matrix: every entry divided by the L2 norm of its column. A column of
    zeros has no direction and stays all zeros.

    Vertex: the Euclidean magnitude (same as magnitude()).
    """
    if isinstance(operand, Vertex):
        return magnitude(operand)

    grid = promote(operand, name='norm').grid
    norms = np.sqrt(np.sum(grid * grid, axis=0))
    normalized = safe_divide(grid, norms[np.newaxis, :])
    return Matrix._wrap(
        normalized.reshape(-1).copy(), operand.width, operand.height, FLOAT_KIND
    )


def normalized(vertex: Vertex) -> Vertex:
    """
    Unit-length float copy of a vertex, keeping its orientation.

    Raises:
        NumericalError: If the vertex has zero magnitude
    """
    data = promote(vertex, name='normalized').data
    length = float(np.sqrt(np.sum(data * data)))
    if length == 0.0:
        raise NumericalError("cannot normalize a vertex of zero magnitude")
    return Vertex._wrap(data / length, FLOAT_KIND, vertex.orientation)
