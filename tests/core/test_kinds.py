"""
Tests for ElementKind.

Validates:
    - Kind metadata (bits, signedness, storage dtype, range)
    - Inference from NumPy arrays
    - Coercion and scalar coercion rules
    - conform(): wraparound for fixed-width kinds, range checks for 128-bit
"""

import numpy as np
import pytest

from pyslal.core.exceptions import ElementKindError, ElementOverflowError
from pyslal.core.kinds import ElementKind, FLOAT_KIND


# ═══════════════════════════════════════════════════════════════════════
# Metadata
# ═══════════════════════════════════════════════════════════════════════


class TestMetadata:

    def test_twelve_kinds(self):
        assert len(ElementKind) == 12

    @pytest.mark.parametrize("kind, bits", [
        (ElementKind.I8, 8),
        (ElementKind.U16, 16),
        (ElementKind.F32, 32),
        (ElementKind.I128, 128),
    ])
    def test_bits(self, kind, bits):
        assert kind.bits == bits

    def test_flags(self):
        assert ElementKind.F64.is_float
        assert ElementKind.U8.is_integer
        assert not ElementKind.U8.is_signed
        assert ElementKind.I32.is_signed
        assert ElementKind.F32.is_signed

    def test_object_backed(self):
        assert ElementKind.I128.is_object_backed
        assert ElementKind.U128.dtype == np.dtype(object)
        assert not ElementKind.I64.is_object_backed

    def test_lossy_as_float(self):
        assert ElementKind.I64.is_lossy_as_float
        assert ElementKind.U128.is_lossy_as_float
        assert not ElementKind.I32.is_lossy_as_float
        assert not ElementKind.F64.is_lossy_as_float

    def test_integer_ranges(self):
        assert ElementKind.I8.min_value == -128
        assert ElementKind.I8.max_value == 127
        assert ElementKind.U8.min_value == 0
        assert ElementKind.U128.max_value == 2 ** 128 - 1
        assert ElementKind.I128.min_value == -(2 ** 127)

    def test_str(self):
        assert str(ElementKind.F64) == 'f64'

    def test_float_kind(self):
        assert FLOAT_KIND is ElementKind.F64

    def test_zero_and_one(self):
        assert ElementKind.F32.zero() == 0.0
        assert ElementKind.I128.one() == 1
        assert isinstance(ElementKind.I128.one(), int)


# ═══════════════════════════════════════════════════════════════════════
# Inference
# ═══════════════════════════════════════════════════════════════════════


class TestInference:

    @pytest.mark.parametrize("dtype, kind", [
        (np.int8, ElementKind.I8),
        (np.uint32, ElementKind.U32),
        (np.int64, ElementKind.I64),
        (np.float32, ElementKind.F32),
        (np.float64, ElementKind.F64),
    ])
    def test_from_dtype(self, dtype, kind):
        assert ElementKind.from_dtype(dtype) is kind

    def test_complex_unsupported(self):
        with pytest.raises(ElementKindError, match="unsupported dtype"):
            ElementKind.from_dtype(np.complex128)

    def test_bool_rejected(self):
        with pytest.raises(ElementKindError, match="boolean"):
            ElementKind.infer(np.array([True]))

    def test_mixed_objects_rejected(self):
        with pytest.raises(ElementKindError, match="object dtype"):
            ElementKind.infer(np.array([1, "a", None], dtype=object))

    def test_object_ints(self):
        values = np.array([2 ** 100, 3], dtype=object)
        assert ElementKind.infer(values) is ElementKind.I128


# ═══════════════════════════════════════════════════════════════════════
# Coercion
# ═══════════════════════════════════════════════════════════════════════


class TestCoerce:

    def test_integral_floats_accepted(self):
        result = ElementKind.I16.coerce(np.array([1.0, -2.0]))
        assert result.dtype == np.int16
        np.testing.assert_array_equal(result, [1, -2])

    def test_nan_rejected_for_int(self):
        with pytest.raises(ElementKindError, match="non-finite"):
            ElementKind.I32.coerce(np.array([np.nan]))

    def test_float_kind_accepts_ints(self):
        result = ElementKind.F32.coerce(np.array([1, 2]))
        assert result.dtype == np.float32

    def test_128_bit_storage_is_python_int(self):
        result = ElementKind.U128.coerce(np.array([1, 2], dtype=np.uint8))
        assert result.dtype == object
        assert all(type(x) is int for x in result)

    def test_128_bit_range(self):
        with pytest.raises(ElementKindError):
            ElementKind.U128.coerce(np.array([2 ** 128], dtype=object))

    def test_scalar(self):
        assert ElementKind.I32.coerce_scalar(2.0) == 2
        assert ElementKind.F64.coerce_scalar(np.int8(3)) == 3.0

    def test_scalar_bool_rejected(self):
        with pytest.raises(ElementKindError):
            ElementKind.F64.coerce_scalar(True)

    def test_scalar_string_rejected(self):
        with pytest.raises(ElementKindError, match="not a real number"):
            ElementKind.F64.coerce_scalar("2")


# ═══════════════════════════════════════════════════════════════════════
# conform()
# ═══════════════════════════════════════════════════════════════════════


class TestConform:

    def test_fixed_width_wraps(self):
        values = np.array([127], dtype=np.int8) + np.array([1], dtype=np.int8)
        assert ElementKind.I8.conform(values)[0] == -128

    def test_fixed_width_casts_back(self):
        result = ElementKind.I32.conform(np.array([1, 2], dtype=np.int64))
        assert result.dtype == np.int32

    def test_128_bit_in_range(self):
        values = np.array([2 ** 126, -5], dtype=object)
        np.testing.assert_array_equal(ElementKind.I128.conform(values), values)

    def test_128_bit_overflow(self):
        values = np.array([2 ** 127], dtype=object)
        with pytest.raises(ElementOverflowError) as exc_info:
            ElementKind.I128.conform(values)
        assert exc_info.value.kind == 'i128'

    def test_conform_scalar(self):
        assert ElementKind.U128.conform_scalar(5) == 5
        with pytest.raises(ElementOverflowError):
            ElementKind.U128.conform_scalar(-1)
