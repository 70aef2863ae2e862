"""
Element kinds supported by Vertex and Matrix.

A kind fixes the storage and arithmetic of every element of a container.
Fixed-width kinds are stored as the matching NumPy dtype and follow NumPy's
arithmetic (integer results wrap around). The 128-bit kinds have no NumPy
dtype; they are stored as object arrays of Python ints and range-checked
after every operation instead.

Conversions between kinds are always explicit (Vertex.astype,
Matrix.astype, core.compute.precision.promote). Binary operations require
both operands to share a kind.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyslal.core.exceptions import ElementKindError, ElementOverflowError


class ElementKind(Enum):
    """Numeric element kind: signed/unsigned integers and two float widths."""
    I8 = 'i8'
    U8 = 'u8'
    I16 = 'i16'
    U16 = 'u16'
    I32 = 'i32'
    U32 = 'u32'
    I64 = 'i64'
    U64 = 'u64'
    I128 = 'i128'
    U128 = 'u128'
    F32 = 'f32'
    F64 = 'f64'

    def __str__(self) -> str:
        return self.value

    @property
    def bits(self) -> int:
        """Width of the kind in bits."""
        return int(self.value[1:])

    @property
    def is_float(self) -> bool:
        return self.value[0] == 'f'

    @property
    def is_integer(self) -> bool:
        return not self.is_float

    @property
    def is_signed(self) -> bool:
        return self.value[0] != 'u'

    @property
    def is_object_backed(self) -> bool:
        """True for kinds stored as Python ints (no native NumPy dtype)."""
        return self.bits == 128

    @property
    def is_lossy_as_float(self) -> bool:
        """True if some values of this kind cannot be represented exactly in f64."""
        return self.is_integer and self.bits >= 64

    @property
    def dtype(self) -> np.dtype:
        """NumPy storage dtype (object for the 128-bit kinds)."""
        return _STORAGE[self]

    @property
    def min_value(self) -> int | float:
        if self.is_float:
            return float(np.finfo(self.dtype).min)
        if self.is_signed:
            return -(2 ** (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int | float:
        if self.is_float:
            return float(np.finfo(self.dtype).max)
        if self.is_signed:
            return 2 ** (self.bits - 1) - 1
        return 2 ** self.bits - 1

    def zero(self) -> Any:
        """Additive identity in this kind's storage."""
        return self.coerce_scalar(0)

    def one(self) -> Any:
        """Multiplicative identity in this kind's storage."""
        return self.coerce_scalar(1)

    @classmethod
    def from_dtype(cls, dtype: np.dtype | type) -> ElementKind:
        """
        Map a NumPy dtype to its element kind.

        Raises:
            ElementKindError: If the dtype is not a supported numeric kind
        """
        dtype = np.dtype(dtype)
        for kind, storage in _STORAGE.items():
            if storage == dtype and not kind.is_object_backed:
                return kind
        raise ElementKindError(
            f"unsupported dtype {dtype}, expected one of "
            f"{', '.join(str(k) for k in cls)}"
        )

    @classmethod
    def infer(cls, values: NDArray[Any]) -> ElementKind:
        """
        Infer the kind of an array built from user input.

        NumPy's own inference decides between I64 and F64; integers too
        large for int64 arrive as an object array and select I128 or U128.

        Raises:
            ElementKindError: If the data is boolean, complex, textual, mixed,
                or integral but outside the 128-bit range
        """
        if values.dtype == object:
            items = list(values.flat)
            if not all(_is_int(x) for x in items):
                raise ElementKindError(
                    "converted to object dtype, indicating mixed types or "
                    "non-numeric data"
                )
            if not items:
                return cls.I64
            lo, hi = int(min(items)), int(max(items))
            if lo >= cls.I128.min_value and hi <= cls.I128.max_value:
                return cls.I128
            if lo >= 0 and hi <= cls.U128.max_value:
                return cls.U128
            raise ElementKindError(
                f"integer values in [{lo}, {hi}] exceed every supported kind"
            )
        if values.dtype.kind == 'b':
            raise ElementKindError("boolean data is not a numeric element kind")
        return cls.from_dtype(values.dtype)

    def coerce(self, values: ArrayLike) -> NDArray[Any]:
        """
        Convert values into this kind's storage.

        Integer kinds reject non-integral or non-finite floats and values
        outside [min_value, max_value]. Float kinds accept any real input.

        Raises:
            ElementKindError: If the values cannot be represented in this kind
        """
        array = np.asarray(values)
        if array.dtype == object and not all(_is_real(x) for x in array.flat):
            raise ElementKindError(
                "converted to object dtype, indicating mixed types or non-numeric data"
            )
        if array.dtype != object and not np.issubdtype(array.dtype, np.number):
            raise ElementKindError(
                f"non-numeric dtype {array.dtype}, expected numeric data"
            )
        if array.dtype.kind in 'bc':
            raise ElementKindError(f"dtype {array.dtype} is not a real numeric kind")

        if self.is_integer and array.size > 0:
            if array.dtype.kind == 'f':
                if not np.all(np.isfinite(array)):
                    raise ElementKindError(
                        f"cannot represent non-finite values as {self}"
                    )
                if not np.all(np.mod(array, 1) == 0):
                    raise ElementKindError(
                        f"cannot represent non-integral values as {self}; "
                        f"cast explicitly or use a float kind"
                    )
            elif array.dtype == object and not all(_is_int(x) for x in array.flat):
                raise ElementKindError(
                    f"cannot represent non-integer objects as {self}"
                )
            lo, hi = _bounds(array)
            if lo < self.min_value or hi > self.max_value:
                raise ElementKindError(
                    f"values in [{lo}, {hi}] are outside the range of {self} "
                    f"[{self.min_value}, {self.max_value}]"
                )

        if self.is_object_backed:
            flat = [int(x) for x in array.ravel()]
            result = np.empty(len(flat), dtype=object)
            result[:] = flat
            return result.reshape(array.shape)
        if array.dtype == object:
            cast = float if self.is_float else int
            array = np.array([cast(x) for x in array.ravel()]).reshape(array.shape)
        return array.astype(self.dtype)

    def coerce_scalar(self, value: Any) -> Any:
        """Convert a single scalar operand into this kind's storage."""
        if isinstance(value, (bool, np.bool_)):
            raise ElementKindError("boolean scalar is not a numeric element")
        if not isinstance(value, (int, float, np.integer, np.floating)):
            raise ElementKindError(
                f"scalar of type {type(value).__name__} is not a real number"
            )
        return self.coerce(np.array([value]))[0]

    def conform(self, values: NDArray[Any]) -> NDArray[Any]:
        """
        Re-establish this kind after arithmetic.

        Fixed-width kinds are cast back to their dtype (wrapping as NumPy
        does); 128-bit kinds are range-checked.

        Raises:
            ElementOverflowError: If a 128-bit result leaves the kind range
        """
        if self.is_object_backed:
            if values.size > 0:
                lo, hi = _bounds(values)
                if lo < self.min_value or hi > self.max_value:
                    raise ElementOverflowError(
                        f"{self} arithmetic overflowed: result range [{lo}, {hi}]",
                        kind=str(self),
                    )
            return values.astype(object)
        return values.astype(self.dtype, copy=False)

    def conform_scalar(self, value: Any) -> Any:
        return self.conform(np.array([value], dtype=self.dtype))[0]


def _is_int(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, (bool, np.bool_))


def _is_real(x: Any) -> bool:
    return _is_int(x) or isinstance(x, (float, np.floating))


def _bounds(array: NDArray[Any]) -> tuple[int | float, int | float]:
    """Minimum and maximum as Python numbers (exact for object arrays)."""
    lo, hi = array.min(), array.max()
    if isinstance(lo, (int, np.integer)):
        return int(lo), int(hi)
    return float(lo), float(hi)


_STORAGE: dict[ElementKind, np.dtype] = {
    ElementKind.I8: np.dtype(np.int8),
    ElementKind.U8: np.dtype(np.uint8),
    ElementKind.I16: np.dtype(np.int16),
    ElementKind.U16: np.dtype(np.uint16),
    ElementKind.I32: np.dtype(np.int32),
    ElementKind.U32: np.dtype(np.uint32),
    ElementKind.I64: np.dtype(np.int64),
    ElementKind.U64: np.dtype(np.uint64),
    ElementKind.I128: np.dtype(object),
    ElementKind.U128: np.dtype(object),
    ElementKind.F32: np.dtype(np.float32),
    ElementKind.F64: np.dtype(np.float64),
}

# Promotion target of every decomposition-based algorithm
FLOAT_KIND = ElementKind.F64

__all__ = [
    'ElementKind',
    'FLOAT_KIND',
]
