"""
Linear operations on vertices and matrices.

Public API:
    dot(left, right)      - checked product (orientation protocol)
    multiply(left, right) - operator form of dot
    cross(left, right)    - generalized cross product
    inner(x)              - sum of squares / Gram matrix
    scale(scalar, x)      - scalar product
    norm(x)               - per-column L2 normalization / vertex magnitude
    magnitude(v)          - Euclidean magnitude
    normalized(v)         - unit-length vertex
    NumpyRandomSource     - default uniform random source
"""

from pyslal.linear.products import cross, dot, inner, is_scalar, multiply, scale
from pyslal.linear.normalize import magnitude, norm, normalized
from pyslal.linear.random import NumpyRandomSource, random_values, resolve_source

__all__ = [
    "cross",
    "dot",
    "inner",
    "is_scalar",
    "multiply",
    "scale",
    "magnitude",
    "norm",
    "normalized",
    "NumpyRandomSource",
    "random_values",
    "resolve_source",
]
