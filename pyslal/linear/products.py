"""
Product / orientation protocol.

Decides, from the orientation and shape of two operands, whether a product
is defined and what shape and orientation the result has:

    Vertex x Vertex   lengths match and orientations differ
                      row . column  -> scalar (1 x 1 Matrix from the operator)
                      column . row  -> outer product Matrix (len, len)
    Vertex x Matrix   row vertex, len == height   -> row vertex of length width
    Matrix x Vertex   column vertex, len == width -> column vertex of length height
    Matrix x Matrix   left.width == right.height  -> (right.width, left.height)
    scalar x Matrix   always defined, commutative

dot() is the checked entry point; the * and @ operators route through the
same validation and raise the same typed errors. Every product is a single
vectorized NumPy expression over disjoint output slots.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pyslal.core.exceptions import (
    OrientationError,
    ShapeMismatchError,
    UnmatchingOperandLengthError,
    ValidationError,
)
from pyslal.core.kinds import ElementKind
from pyslal.core.validation import check_same_kind
from pyslal.matrix.matrix import Matrix
from pyslal.vertex.vertex import Orientation, Vertex


def is_scalar(obj: object) -> bool:
    """True for real Python/NumPy numbers (booleans excluded)."""
    return (
        isinstance(obj, (int, float, np.integer, np.floating))
        and not isinstance(obj, (bool, np.bool_))
    )


def scale(scalar: Any, operand: Vertex | Matrix) -> Vertex | Matrix:
    """
    Multiply every element by a scalar of the operand's kind.

    The scalar is coerced into operand.kind, so 2.5 * Matrix([[1, 2]])
    raises; cast with astype(ElementKind.F64) first to scale integer
    containers by a fractional factor.

    Raises:
        ElementKindError: If the scalar cannot be represented in the kind
    """
    kind = operand.kind
    factor = kind.coerce_scalar(scalar)
    data = kind.conform(operand.data * factor)
    if isinstance(operand, Vertex):
        return Vertex._wrap(data, kind, operand.orientation)
    return Matrix._wrap(data, operand.width, operand.height, kind)


def _sum_of_products(kind: ElementKind, a: np.ndarray, b: np.ndarray) -> Any:
    if a.size == 0:
        return kind.zero()
    return kind.conform_scalar(np.dot(a, b))


def _check_vertex_pair(left: Vertex, right: Vertex, operation: str) -> None:
    if len(left) != len(right):
        raise UnmatchingOperandLengthError(
            f"{operation}: vertex lengths must match, got {len(left)} and {len(right)}",
            left_shape=len(left),
            right_shape=len(right),
        )
    check_same_kind(left.kind, right.kind, operation)
    if left.orientation is right.orientation:
        state = left.orientation.value
        raise OrientationError(
            f"{operation}: cannot multiply vertices that are both {state}",
            left=state,
            right=state,
        )


def _outer(column: Vertex, row: Vertex) -> Matrix:
    kind = column.kind
    n = len(column)
    data = kind.conform(np.outer(column.data, row.data).reshape(-1))
    return Matrix._wrap(data, n, n, kind)


def _vertex_matrix(vertex: Vertex, matrix: Matrix, operation: str) -> Vertex:
    if vertex.orientation is not Orientation.ROW:
        raise OrientationError(
            f"{operation}: vertex must be a row vertex when multiplied with a "
            f"matrix on its right, got a column vertex",
            left=vertex.orientation.value,
        )
    if len(vertex) != matrix.height:
        raise ShapeMismatchError(
            f"{operation}: vertex length {len(vertex)} must match matrix "
            f"height {matrix.height}",
            vertex_length=len(vertex),
            matrix_size=matrix.size,
        )
    check_same_kind(vertex.kind, matrix.kind, operation)
    kind = vertex.kind
    data = kind.conform(np.asarray(vertex.data @ matrix.grid).reshape(-1))
    return Vertex._wrap(data, kind, Orientation.ROW)


def _matrix_vertex(matrix: Matrix, vertex: Vertex, operation: str) -> Vertex:
    if vertex.orientation is not Orientation.COLUMN:
        raise OrientationError(
            f"{operation}: vertex must be a column vertex when multiplied with a "
            f"matrix on its left, got a row vertex",
            right=vertex.orientation.value,
        )
    if len(vertex) != matrix.width:
        raise ShapeMismatchError(
            f"{operation}: vertex length {len(vertex)} must match matrix "
            f"width {matrix.width}",
            vertex_length=len(vertex),
            matrix_size=matrix.size,
        )
    check_same_kind(matrix.kind, vertex.kind, operation)
    kind = matrix.kind
    data = kind.conform(np.asarray(matrix.grid @ vertex.data).reshape(-1))
    return Vertex._wrap(data, kind, Orientation.COLUMN)


def _matrix_matrix(left: Matrix, right: Matrix, operation: str) -> Matrix:
    if left.width != right.height:
        raise UnmatchingOperandLengthError(
            f"{operation}: width of left matrix {left.size} must match height "
            f"of right matrix {right.size}",
            left_shape=left.size,
            right_shape=right.size,
        )
    check_same_kind(left.kind, right.kind, operation)
    kind = left.kind
    data = kind.conform(np.asarray(left.grid @ right.grid).reshape(-1))
    return Matrix._wrap(data, right.width, left.height, kind)


def _product(left: Any, right: Any, operation: str, scalar_as_matrix: bool) -> Any:
    if is_scalar(left) and isinstance(right, (Vertex, Matrix)):
        return scale(left, right)
    if is_scalar(right) and isinstance(left, (Vertex, Matrix)):
        return scale(right, left)

    if isinstance(left, Vertex) and isinstance(right, Vertex):
        _check_vertex_pair(left, right, operation)
        if left.orientation is Orientation.COLUMN:
            return _outer(left, right)
        value = _sum_of_products(left.kind, left.data, right.data)
        if scalar_as_matrix:
            data = np.empty(1, dtype=left.kind.dtype)
            data[0] = value
            return Matrix._wrap(data, 1, 1, left.kind)
        return value
    if isinstance(left, Vertex) and isinstance(right, Matrix):
        return _vertex_matrix(left, right, operation)
    if isinstance(left, Matrix) and isinstance(right, Vertex):
        return _matrix_vertex(left, right, operation)
    if isinstance(left, Matrix) and isinstance(right, Matrix):
        return _matrix_matrix(left, right, operation)

    raise ValidationError(
        f"{operation}: unsupported operand types "
        f"{type(left).__name__} and {type(right).__name__}"
    )


def dot(left: Any, right: Any) -> Any:
    """
    Checked product of two operands.

    Args:
        left: Vertex, Matrix or scalar
        right: Vertex, Matrix or scalar

    Returns:
        Scalar for row . column vertices, outer-product Matrix for
        column . row vertices, Vertex for vertex/matrix products, Matrix
        for matrix products and scalar products of a Matrix.

    Raises:
        UnmatchingOperandLengthError: Vertex lengths or matrix sizes mismatch
        OrientationError: Vertex orientation invalid for the product
        ShapeMismatchError: Vertex length doesn't match the matrix dimension
        ElementKindError: Operands of different kinds

    Examples:
        >>> v = Vertex([1, 2, 3])
        >>> dot(v, Vertex([1, 4, 9]).T)
        36
    """
    return _product(left, right, 'dot', scalar_as_matrix=False)


def multiply(left: Any, right: Any) -> Any:
    """
    Operator form of dot(): identical validation, but a row . column
    vertex product is returned as a 1 x 1 Matrix.
    """
    return _product(left, right, 'multiplication', scalar_as_matrix=True)


def cross(left: Vertex, right: Vertex) -> Vertex:
    """
    Generalized cross product of a row vertex and a column vertex.

    r[i] = l[(i+1) % n] * r[(i+2) % n] - l[(i+2) % n] * r[(i+1) % n]

    This is the usual cross product for n == 3; other lengths get the same
    cyclic formula, which has no geometric meaning.

    Raises:
        UnmatchingOperandLengthError: Lengths differ
        OrientationError: left is not a row or right is not a column vertex
    """
    if len(left) != len(right):
        raise UnmatchingOperandLengthError(
            f"cross: vertex lengths must match, got {len(left)} and {len(right)}",
            left_shape=len(left),
            right_shape=len(right),
        )
    if left.orientation is not Orientation.ROW or right.orientation is not Orientation.COLUMN:
        raise OrientationError(
            f"cross: expected a row vertex and a column vertex, got "
            f"{left.orientation.value} and {right.orientation.value}",
            left=left.orientation.value,
            right=right.orientation.value,
        )
    check_same_kind(left.kind, right.kind, 'cross')

    kind = left.kind
    n = len(left)
    if n == 0:
        return Vertex._wrap(left.to_numpy(), kind, Orientation.ROW)
    idx = np.arange(n)
    a, b = left.data, right.data
    first, second = (idx + 1) % n, (idx + 2) % n
    data = kind.conform(a[first] * b[second] - a[second] * b[first])
    return Vertex._wrap(data, kind, Orientation.ROW)


def inner(operand: Vertex | Matrix) -> Any:
    """
    Inner product of an operand with itself.

    Vertex: sum of squared elements (a scalar of the vertex's kind).
    Matrix: Gram matrix m.T * m of size (width, width).
    """
    if isinstance(operand, Vertex):
        return _sum_of_products(operand.kind, operand.data, operand.data)
    kind = operand.kind
    grid = operand.grid
    data = kind.conform(np.asarray(grid.T @ grid).reshape(-1))
    return Matrix._wrap(data, operand.width, operand.width, kind)
