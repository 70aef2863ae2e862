"""
EigenDesign: validated input for the eigen approximator.

Wraps a square, non-empty matrix promoted to float64. Follows the pyslal
Design pattern: construct once, immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyslal.core.compute.precision import loses_precision
from pyslal.core.kinds import ElementKind, FLOAT_KIND
from pyslal.core.validation import check_finite, check_nonempty, check_square
from pyslal.matrix.matrix import Matrix


@dataclass(frozen=True)
class EigenDesign:
    """
    Design for dominant eigenpair approximation.

    Construction:
        EigenDesign.from_matrix(m)
    """
    _matrix: Matrix
    _source_kind: ElementKind
    _lossy_promotion: bool

    @classmethod
    def from_matrix(cls, m: Matrix) -> EigenDesign:
        """
        Build EigenDesign from a matrix of any kind.

        Raises:
            EmptyMatrixError: If m is empty
            NotSquareMatrixError: If m is not square
            ValidationError: If m contains NaN or Inf
        """
        check_square(m, 'eigen')
        check_nonempty(m, 'eigen')
        check_finite(m.data, 'matrix')
        lossy = loses_precision(m.data, m.kind)
        promoted = m if m.kind is FLOAT_KIND else m.astype(FLOAT_KIND)
        return cls(_matrix=promoted, _source_kind=m.kind, _lossy_promotion=lossy)

    @property
    def matrix(self) -> Matrix:
        """The F64 matrix."""
        return self._matrix

    @property
    def grid(self) -> NDArray[np.floating[Any]]:
        return self._matrix.grid

    @property
    def n(self) -> int:
        return self._matrix.width

    @property
    def source_kind(self) -> ElementKind:
        """Element kind of the matrix before promotion."""
        return self._source_kind

    @property
    def lossy_promotion(self) -> bool:
        """True if promoting to F64 rounded some integer values."""
        return self._lossy_promotion
