"""
Matrix: two-dimensional numeric grid stored row-major.

Elements live in a flat array of length width * height together with the
(width, height) size. m[j] is row j, m[j][i] (or m[j, i]) the element at
row j, column i. Transposition permutes the storage in place.
"""

from __future__ import annotations

from typing import Any, Iterable, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslal.core.exceptions import (
    ElementKindError,
    UnmatchingOperandLengthError,
    ValidationError,
)
from pyslal.core.kinds import ElementKind, FLOAT_KIND
from pyslal.core.protocols import RandomSource
from pyslal.core.validation import (
    check_2d,
    check_array,
    check_rectangular,
    check_same_kind,
)
from pyslal.matrix import structure

if TYPE_CHECKING:
    from pyslal.decomposition.triangular import LUResult
    from pyslal.eigen.solution import EigenSolution


class Matrix:
    """
    Numeric matrix of a single element kind.

    Construction:
        Matrix([[1, 2], [3, 4]])                 # kind i64
        Matrix([[1, 2], [3, 4]], kind=ElementKind.F32)
        Matrix.from_numpy(np.eye(3))
        Matrix.diagonal([1, 2, 3])
        Matrix.rand((3, 2), seed=0)              # width 3, height 2
        Matrix([])                               # empty 0 x 0

    Invariant: len(m) == m.width * m.height.
    """

    __slots__ = ('_data', '_width', '_height', '_kind')
    __hash__ = None  # type: ignore[assignment]
    # Keep NumPy scalars from broadcasting over a Matrix: defer to __rmul__
    __array_ufunc__ = None

    def __init__(
        self,
        rows: Iterable[Iterable[Any]] = (),
        *,
        kind: ElementKind | None = None,
    ):
        rows = [list(row) for row in rows]
        check_rectangular(rows, 'rows')
        height = len(rows)
        width = len(rows[0]) if rows else 0

        if height == 0 or width == 0:
            array, resolved = check_array(np.zeros(0), 'rows', kind or FLOAT_KIND)
        else:
            array, resolved = check_array(rows, 'rows', kind)
            check_2d(array, 'rows')

        self._data = array.reshape(-1)
        self._width = width
        self._height = height
        self._kind = resolved

    @classmethod
    def _wrap(
        cls,
        data: NDArray[Any],
        width: int,
        height: int,
        kind: ElementKind,
    ) -> Matrix:
        """Build from a flat array already in the kind's storage (no validation)."""
        matrix = cls.__new__(cls)
        matrix._data = data
        matrix._width = width
        matrix._height = height
        matrix._kind = kind
        return matrix

    @classmethod
    def from_numpy(cls, array: ArrayLike, kind: ElementKind | None = None) -> Matrix:
        """
        Build from a 2D array of shape (height, width).

        Raises:
            DimensionError: If the array is not 2D
            ElementKindError: If the data is not numeric or doesn't fit kind
        """
        values, resolved = check_array(array, 'array', kind)
        check_2d(values, 'array')
        height, width = values.shape
        return cls._wrap(values.reshape(-1).copy(), width, height, resolved)

    @classmethod
    def diagonal(cls, values: ArrayLike, kind: ElementKind | None = None) -> Matrix:
        """Square matrix with values on the diagonal and zeros elsewhere."""
        return structure.diagonal(values, kind)

    @classmethod
    def identity(cls, n: int, kind: ElementKind = FLOAT_KIND) -> Matrix:
        return structure.identity(n, kind)

    @classmethod
    def rand(
        cls,
        size: tuple[int, int],
        *,
        kind: ElementKind = FLOAT_KIND,
        source: RandomSource | None = None,
        seed: int | None = None,
    ) -> Matrix:
        """
        Matrix of random non-zero elements.

        Args:
            size: (width, height)
            kind: Element kind of the result
            source: Uniform random source; NumpyRandomSource(seed) if None
            seed: Seed for the default source (ignored if source is given)

        Raises:
            ValidationError: If width or height is negative
        """
        from pyslal.linear.random import random_values, resolve_source

        width, height = size
        if width < 0 or height < 0:
            raise ValidationError(
                f"size: width and height must be non-negative, got {size}"
            )
        values = random_values(kind, width * height, source=resolve_source(source, seed))
        return cls._wrap(values, width, height, kind)

    @classmethod
    def rand_transposed(
        cls,
        size: tuple[int, int],
        *,
        kind: ElementKind = FLOAT_KIND,
        source: RandomSource | None = None,
        seed: int | None = None,
    ) -> Matrix:
        """Transpose of a rand(size) matrix, i.e. of size (height, width)."""
        matrix = cls.rand(size, kind=kind, source=source, seed=seed)
        matrix.t()
        return matrix

    # --- Shape and access ---

    @property
    def kind(self) -> ElementKind:
        return self._kind

    @property
    def size(self) -> tuple[int, int]:
        """(width, height)."""
        return (self._width, self._height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_square(self) -> bool:
        return self._width == self._height

    @property
    def is_empty(self) -> bool:
        return self._data.size == 0

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the flat row-major storage."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def grid(self) -> NDArray[Any]:
        """Read-only (height, width) view of the storage."""
        return self.data.reshape(self._height, self._width)

    def __len__(self) -> int:
        return self._data.size

    def __getitem__(self, index: int | tuple[int, int]) -> Any:
        if isinstance(index, tuple):
            row, column = index
            return self.grid[row, column]
        return self.grid[index]

    def rows(self) -> list[NDArray[Any]]:
        """Rows as read-only views."""
        grid = self.grid
        return [grid[j] for j in range(self._height)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return (
            f"Matrix({self.to_list()!r}, kind={self._kind}, "
            f"size=({self._width}, {self._height}))"
        )

    def to_list(self) -> list[list[Any]]:
        return self.grid.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements with shape (height, width)."""
        return self.grid.copy()

    # --- Transposition and conversion ---

    def t(self) -> None:
        """Transpose in place: swap width and height and permute storage."""
        self._data = self._data.reshape(self._height, self._width).T.reshape(-1).copy()
        self._width, self._height = self._height, self._width

    @property
    def T(self) -> Matrix:
        """Transposed copy."""
        data = self._data.reshape(self._height, self._width).T.reshape(-1).copy()
        return Matrix._wrap(data, self._height, self._width, self._kind)

    def astype(self, kind: ElementKind) -> Matrix:
        """
        Explicit cast to another element kind.

        Raises:
            ElementKindError: If some value cannot be represented in kind
        """
        return Matrix._wrap(kind.coerce(self._data), self._width, self._height, kind)

    # --- Structure ---

    def is_upper_triangular(self) -> bool:
        return structure.is_upper_triangular(self)

    def is_lower_triangular(self) -> bool:
        return structure.is_lower_triangular(self)

    def is_diagonal(self) -> bool:
        return structure.is_diagonal(self)

    # --- Elementwise arithmetic ---

    def _check_elementwise(self, other: Matrix, operation: str) -> None:
        if self.size != other.size:
            raise UnmatchingOperandLengthError(
                f"{operation}: matrix sizes must match, got {self.size} and {other.size}",
                left_shape=self.size,
                right_shape=other.size,
            )
        check_same_kind(self._kind, other._kind, operation)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_elementwise(other, 'matrix addition')
        return Matrix._wrap(
            self._kind.conform(self._data + other._data),
            self._width, self._height, self._kind,
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_elementwise(other, 'matrix subtraction')
        return Matrix._wrap(
            self._kind.conform(self._data - other._data),
            self._width, self._height, self._kind,
        )

    def __neg__(self) -> Matrix:
        if not self._kind.is_signed:
            raise ElementKindError(f"cannot negate a matrix of unsigned kind {self._kind}")
        return Matrix._wrap(
            self._kind.conform(-self._data), self._width, self._height, self._kind
        )

    # --- Products ---

    def __mul__(self, other: object) -> Any:
        from pyslal.linear.products import multiply, scale, is_scalar
        from pyslal.vertex.vertex import Vertex

        if is_scalar(other):
            return scale(other, self)
        if isinstance(other, (Matrix, Vertex)):
            return multiply(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> Any:
        """scalar * m; the scalar must be representable in m.kind (see scale)."""
        from pyslal.linear.products import scale, is_scalar

        if is_scalar(other):
            return scale(other, self)
        return NotImplemented

    def __matmul__(self, other: object) -> Any:
        from pyslal.linear.products import dot
        from pyslal.vertex.vertex import Vertex

        if isinstance(other, (Matrix, Vertex)):
            return dot(self, other)
        return NotImplemented

    def dot(self, other: Any) -> Any:
        """Checked product; see pyslal.linear.products.dot."""
        from pyslal.linear.products import dot

        return dot(self, other)

    def inner(self) -> Matrix:
        """Gram matrix m.T * m, in the matrix's kind."""
        from pyslal.linear.products import inner

        return inner(self)

    # --- Engines ---

    def det(self) -> float:
        from pyslal.decomposition.determinant import det

        return det(self)

    def cofactor(self, *, n_jobs: int | None = None) -> Matrix:
        from pyslal.decomposition.determinant import cofactor

        return cofactor(self, n_jobs=n_jobs)

    def adjugate(self, *, n_jobs: int | None = None) -> Matrix:
        from pyslal.decomposition.determinant import adjugate

        return adjugate(self, n_jobs=n_jobs)

    def inverse(self, *, n_jobs: int | None = None) -> Matrix:
        from pyslal.decomposition.determinant import inverse

        return inverse(self, n_jobs=n_jobs)

    def lu(self) -> 'LUResult':
        from pyslal.decomposition.triangular import doolittle

        return doolittle(self)

    def upper_triangular(self) -> Matrix:
        from pyslal.decomposition.triangular import upper_triangular

        return upper_triangular(self)

    def lower_triangular(self) -> Matrix:
        from pyslal.decomposition.triangular import lower_triangular

        return lower_triangular(self)

    def norm(self) -> Matrix:
        """Column-normalized float copy; see pyslal.linear.normalize.norm."""
        from pyslal.linear.normalize import norm

        return norm(self)

    def eigen(self, **kwargs: Any) -> 'EigenSolution':
        """Dominant eigenpair; keyword arguments as for pyslal.eigen.eigen."""
        from pyslal.eigen.solvers import eigen

        return eigen(self, **kwargs)
