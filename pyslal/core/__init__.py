"""
Core infrastructure for pyslal.

This module provides shared abstractions and utilities used by the
Vertex/Matrix types and by every engine (products, decomposition, eigen).

Key components:
    kinds: Element kind abstraction
    protocols: RandomSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, thresholds, float promotion, parallel fan-out
"""

from pyslal.core.kinds import ElementKind, FLOAT_KIND
from pyslal.core.protocols import RandomSource, Backend
from pyslal.core.result import Result
from pyslal.core.exceptions import (
    PySlalError,
    ValidationError,
    DimensionError,
    NotSquareMatrixError,
    UnmatchingOperandLengthError,
    ShapeMismatchError,
    EmptyMatrixError,
    OrientationError,
    ElementKindError,
    NumericalError,
    ElementOverflowError,
    TriangularFormUnavailableError,
    SingularMatrixError,
    DeterminantZeroError,
)

__all__ = [
    # Kinds
    "ElementKind",
    "FLOAT_KIND",
    # Protocols
    "RandomSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PySlalError",
    "ValidationError",
    "DimensionError",
    "NotSquareMatrixError",
    "UnmatchingOperandLengthError",
    "ShapeMismatchError",
    "EmptyMatrixError",
    "OrientationError",
    "ElementKindError",
    "NumericalError",
    "ElementOverflowError",
    "TriangularFormUnavailableError",
    "SingularMatrixError",
    "DeterminantZeroError",
]
