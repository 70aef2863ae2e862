"""
Input validation utilities for pyslal.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent kind coercion (conversions go through ElementKind.coerce)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslal.core.exceptions import (
    DimensionError,
    ElementKindError,
    EmptyMatrixError,
    NotSquareMatrixError,
    ValidationError,
)
from pyslal.core.kinds import ElementKind

if TYPE_CHECKING:
    from pyslal.matrix import Matrix


def check_array(
    values: ArrayLike,
    name: str,
    kind: ElementKind | None = None,
) -> tuple[NDArray[Any], ElementKind]:
    """
    Validate and convert input to an array of a supported element kind.

    Accepts any array-like. If kind is None the kind is inferred from the
    data; otherwise the data is coerced into the requested kind.

    Args:
        values: Input to validate
        name: Parameter name for error messages
        kind: Requested element kind, or None to infer

    Returns:
        (array, kind) with the array in the kind's storage

    Raises:
        ValidationError: If input cannot be converted to an array
        ElementKindError: If input is not numeric or doesn't fit the kind
    """
    if isinstance(values, np.ndarray):
        array = values
    else:
        try:
            array = np.asarray(values)
        except (ValueError, TypeError) as e:
            raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    try:
        resolved = kind if kind is not None else ElementKind.infer(array)
        return resolved.coerce(array), resolved
    except ElementKindError as e:
        raise ElementKindError(f"{name}: {e}") from e


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if array.dtype == object or not np.issubdtype(array.dtype, np.floating):
        return
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_rectangular(rows: list[Any], name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Raises:
        DimensionError: If any row differs in length from the first
    """
    if not rows:
        return
    lengths = [len(row) for row in rows]
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: rows have unequal length {lengths}"
        )


def check_same_kind(left: ElementKind, right: ElementKind, operation: str) -> None:
    """
    Verify two operands share an element kind.

    Raises:
        ElementKindError: If the kinds differ
    """
    if left is not right:
        raise ElementKindError(
            f"{operation}: operands have different element kinds "
            f"({left} and {right}); convert one with astype()"
        )


def check_square(matrix: 'Matrix', operation: str) -> None:
    """
    Verify matrix is square.

    Raises:
        NotSquareMatrixError: If width != height
    """
    width, height = matrix.size
    if width != height:
        raise NotSquareMatrixError(
            f"{operation}: matrix must be square, got width={width}, height={height}",
            width=width,
            height=height,
        )


def check_nonempty(matrix: 'Matrix', operation: str) -> None:
    """
    Verify matrix has at least one element.

    Raises:
        EmptyMatrixError: If the matrix is 0 x 0
    """
    if matrix.is_empty:
        raise EmptyMatrixError(f"{operation}: undefined for an empty matrix")
