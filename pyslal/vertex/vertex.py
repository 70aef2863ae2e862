"""
Vertex: one-dimensional numeric sequence with a row/column orientation.

Orientation is a two-state tag (ROW | COLUMN) whose only transitions are
the explicit transpose operations t() and T. It never affects storage,
only which products, dot and cross products are defined.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslal.core.exceptions import ElementKindError, UnmatchingOperandLengthError
from pyslal.core.kinds import ElementKind, FLOAT_KIND
from pyslal.core.protocols import RandomSource
from pyslal.core.validation import check_1d, check_array, check_same_kind


class Orientation(Enum):
    """Whether a vertex acts as a row (1 x n) or column (n x 1) operand."""
    ROW = 'row'
    COLUMN = 'column'

    def toggled(self) -> Orientation:
        return Orientation.COLUMN if self is Orientation.ROW else Orientation.ROW


class Vertex:
    """
    Numeric vector with an orientation.

    Construction:
        Vertex([1, 2, 3])                                 # row, kind i64
        Vertex([1.0, 2.0], orientation=Orientation.COLUMN)
        Vertex([1, 2, 3], kind=ElementKind.U8)
        Vertex.rand(4, seed=0)

    The length is fixed after creation. Elements are stored in the kind's
    NumPy storage; binary operations require both operands to share a kind.
    """

    __slots__ = ('_data', '_kind', '_orientation')
    __hash__ = None  # type: ignore[assignment]
    # Keep NumPy scalars from broadcasting over a Vertex: defer to __rmul__
    __array_ufunc__ = None

    def __init__(
        self,
        values: ArrayLike = (),
        *,
        kind: ElementKind | None = None,
        orientation: Orientation = Orientation.ROW,
    ):
        array, resolved = check_array(values, 'values', kind)
        check_1d(array, 'values')
        self._data = array
        self._kind = resolved
        self._orientation = orientation

    @classmethod
    def _wrap(
        cls,
        data: NDArray[Any],
        kind: ElementKind,
        orientation: Orientation = Orientation.ROW,
    ) -> Vertex:
        """Build from data already in the kind's storage (no validation)."""
        vertex = cls.__new__(cls)
        vertex._data = data
        vertex._kind = kind
        vertex._orientation = orientation
        return vertex

    @classmethod
    def rand(
        cls,
        length: int,
        *,
        kind: ElementKind = FLOAT_KIND,
        source: RandomSource | None = None,
        seed: int | None = None,
    ) -> Vertex:
        """
        Row vertex of random non-zero elements.

        Args:
            length: Number of elements
            kind: Element kind of the result
            source: Uniform random source; NumpyRandomSource(seed) if None
            seed: Seed for the default source (ignored if source is given)
        """
        from pyslal.linear.random import random_values, resolve_source

        values = random_values(kind, length, source=resolve_source(source, seed))
        return cls._wrap(values, kind, Orientation.ROW)

    @classmethod
    def rand_transposed(
        cls,
        length: int,
        *,
        kind: ElementKind = FLOAT_KIND,
        source: RandomSource | None = None,
        seed: int | None = None,
    ) -> Vertex:
        """Column vertex of random non-zero elements (see rand)."""
        vertex = cls.rand(length, kind=kind, source=source, seed=seed)
        vertex.t()
        return vertex

    # --- Shape and state ---

    @property
    def kind(self) -> ElementKind:
        return self._kind

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def is_transposed(self) -> bool:
        """True for a column vertex."""
        return self._orientation is Orientation.COLUMN

    @property
    def is_empty(self) -> bool:
        return self._data.size == 0

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the elements."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self._data.size

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return (
            self._orientation is other._orientation
            and len(self) == len(other)
            and bool(np.array_equal(self._data, other._data))
        )

    def __repr__(self) -> str:
        return (
            f"Vertex({self._data.tolist()!r}, kind={self._kind}, "
            f"orientation={self._orientation.value})"
        )

    # --- Transposition and conversion ---

    def t(self) -> None:
        """Toggle orientation in place."""
        self._orientation = self._orientation.toggled()

    @property
    def T(self) -> Vertex:
        """Copy with the opposite orientation."""
        return Vertex._wrap(self._data.copy(), self._kind, self._orientation.toggled())

    def to_list(self) -> list[Any]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[Any]:
        return self._data.copy()

    def astype(self, kind: ElementKind) -> Vertex:
        """
        Explicit cast to another element kind, keeping the orientation.

        Raises:
            ElementKindError: If some value cannot be represented in kind
        """
        return Vertex._wrap(kind.coerce(self._data), kind, self._orientation)

    # --- Elementwise arithmetic ---

    def _check_elementwise(self, other: Vertex, operation: str) -> None:
        if len(self) != len(other):
            raise UnmatchingOperandLengthError(
                f"{operation}: vertex lengths must match, got {len(self)} and {len(other)}",
                left_shape=len(self),
                right_shape=len(other),
            )
        check_same_kind(self._kind, other._kind, operation)

    def __add__(self, other: object) -> Vertex:
        if not isinstance(other, Vertex):
            return NotImplemented
        self._check_elementwise(other, 'vertex addition')
        return Vertex._wrap(
            self._kind.conform(self._data + other._data), self._kind, self._orientation
        )

    def __sub__(self, other: object) -> Vertex:
        if not isinstance(other, Vertex):
            return NotImplemented
        self._check_elementwise(other, 'vertex subtraction')
        return Vertex._wrap(
            self._kind.conform(self._data - other._data), self._kind, self._orientation
        )

    def __neg__(self) -> Vertex:
        if not self._kind.is_signed:
            raise ElementKindError(f"cannot negate a vertex of unsigned kind {self._kind}")
        return Vertex._wrap(self._kind.conform(-self._data), self._kind, self._orientation)

    # --- Products ---

    def __mul__(self, other: object) -> Any:
        from pyslal.linear.products import multiply, scale, is_scalar

        if is_scalar(other):
            return scale(other, self)
        if isinstance(other, Vertex) or _is_matrix(other):
            return multiply(self, other)
        return NotImplemented

    def __rmul__(self, other: object) -> Any:
        from pyslal.linear.products import scale, is_scalar

        if is_scalar(other):
            return scale(other, self)
        return NotImplemented

    def __matmul__(self, other: object) -> Any:
        from pyslal.linear.products import dot

        if isinstance(other, Vertex) or _is_matrix(other):
            return dot(self, other)
        return NotImplemented

    def dot(self, other: Any) -> Any:
        """Checked product; see pyslal.linear.products.dot."""
        from pyslal.linear.products import dot

        return dot(self, other)

    def cross(self, other: Vertex) -> Vertex:
        """Generalized cross product; see pyslal.linear.products.cross."""
        from pyslal.linear.products import cross

        return cross(self, other)

    def inner(self) -> Any:
        """Sum of squared elements, in the vertex's kind."""
        from pyslal.linear.products import inner

        return inner(self)

    def magnitude(self) -> float:
        """Euclidean magnitude, independent of orientation."""
        from pyslal.linear.normalize import magnitude

        return magnitude(self)

    def norm(self) -> float:
        """Same as magnitude()."""
        return self.magnitude()


def _is_matrix(obj: object) -> bool:
    from pyslal.matrix.matrix import Matrix

    return isinstance(obj, Matrix)
