"""
Numerical precision constants and utilities.

Provides explicit float promotion and safe numerical helpers
shared by the decomposition, normalization and eigen engines.
"""

from __future__ import annotations

import warnings
from typing import Any, TypeVar
import numpy as np
from numpy.typing import NDArray

from pyslal.core.kinds import ElementKind, FLOAT_KIND


# Integers beyond this magnitude are not exactly representable in float64
F64_EXACT_INTEGER_LIMIT: int = 2 ** 53

C = TypeVar('C')  # Vertex or Matrix


def loses_precision(values: NDArray[Any], kind: ElementKind) -> bool:
    """
    Check whether converting values of a kind to float64 is inexact.

    Only integer kinds of 64 bits and wider can lose precision, and only
    for values whose magnitude exceeds 2**53.
    """
    if not kind.is_lossy_as_float or values.size == 0:
        return False
    lo, hi = int(values.min()), int(values.max())
    return max(abs(lo), abs(hi)) > F64_EXACT_INTEGER_LIMIT


def promote(container: C, *, name: str = 'operand') -> C:
    """
    Explicitly promote a Vertex or Matrix to the float kind.

    Every determinant, cofactor, inverse, triangularization, normalization
    and eigen computation goes through this function, so the precision
    loss of wide integer kinds is visible in one place.

    Args:
        container: Vertex or Matrix of any kind
        name: Description used in the warning message

    Returns:
        Container of kind F64 (the same object if already F64)

    Warns:
        RuntimeWarning: If some values cannot be represented exactly
    """
    if container.kind is FLOAT_KIND:
        return container
    if loses_precision(container.to_numpy(), container.kind):
        warnings.warn(
            f"{name}: promotion of {container.kind} values to {FLOAT_KIND} "
            f"loses precision (magnitude exceeds 2**53)",
            RuntimeWarning,
            stacklevel=3,
        )
    return container.astype(FLOAT_KIND)


def safe_divide(
    numerator: NDArray[np.floating[Any]],
    denominator: NDArray[np.floating[Any]],
    fill_value: float = 0.0
) -> NDArray[np.floating[Any]]:
    """
    Division with protection against divide-by-zero.

    Args:
        numerator: Numerator array
        denominator: Denominator array
        fill_value: Value to use where denominator is zero

    Returns:
        Result of division with fill_value where denominator is zero
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        result = numerator / denominator
        result = np.where(np.isfinite(result), result, fill_value)
    return result


def collapse_near_zero(value: float, threshold: float) -> float:
    """Return 0.0 if |value| <= threshold, else value."""
    return 0.0 if abs(value) <= threshold else value
