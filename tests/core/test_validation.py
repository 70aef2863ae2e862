"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, kind inference and coercion
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_rectangular: ragged row detection
    - check_same_kind: binary operand kinds
    - check_square / check_nonempty: matrix preconditions
"""

import numpy as np
import pytest

from pyslal.core.exceptions import (
    DimensionError,
    ElementKindError,
    EmptyMatrixError,
    NotSquareMatrixError,
    ValidationError,
)
from pyslal.core.kinds import ElementKind
from pyslal.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_ndim,
    check_nonempty,
    check_rectangular,
    check_same_kind,
    check_square,
)
from pyslal.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array infers or coerces the element kind."""

    def test_int_list_infers_i64(self):
        array, kind = check_array([1, 2, 3], "values")
        assert kind is ElementKind.I64
        assert array.dtype == np.int64

    def test_float_list_infers_f64(self):
        array, kind = check_array([1.0, 2.5], "values")
        assert kind is ElementKind.F64
        np.testing.assert_array_equal(array, [1.0, 2.5])

    def test_numpy_dtype_preserved(self):
        _, kind = check_array(np.array([1, 2], dtype=np.uint16), "values")
        assert kind is ElementKind.U16

    def test_requested_kind(self):
        array, kind = check_array([1, 2], "values", ElementKind.I8)
        assert kind is ElementKind.I8
        assert array.dtype == np.int8

    def test_huge_ints_select_128_bit(self):
        _, kind = check_array([2 ** 70, -1], "values")
        assert kind is ElementKind.I128

    def test_beyond_i128_selects_u128(self):
        _, kind = check_array([2 ** 127 + 5], "values")
        assert kind is ElementKind.U128

    def test_non_integral_float_rejected_for_int_kind(self):
        with pytest.raises(ElementKindError, match="values:.*non-integral"):
            check_array([1.5], "values", ElementKind.I32)

    def test_out_of_range_rejected(self):
        with pytest.raises(ElementKindError, match="outside the range"):
            check_array([300], "values", ElementKind.U8)

    def test_negative_rejected_for_unsigned(self):
        with pytest.raises(ElementKindError):
            check_array([-1], "values", ElementKind.U32)

    def test_strings_rejected(self):
        with pytest.raises(ElementKindError, match="values"):
            check_array(["a", "b"], "values")

    def test_booleans_rejected(self):
        with pytest.raises(ElementKindError):
            check_array([True, False], "values")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_fails(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_fails(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "x")

    def test_integers_skipped(self):
        check_finite(np.array([1, 2], dtype=np.int64), "x")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:

    def test_check_ndim(self):
        check_ndim(np.zeros((2, 2, 2)), 3, "x")
        with pytest.raises(DimensionError, match="expected 2D"):
            check_ndim(np.zeros(3), 2, "x")

    def test_check_1d(self):
        check_1d(np.zeros(3), "x")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 1)), "x")

    def test_check_2d(self):
        check_2d(np.zeros((3, 1)), "x")
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "x")

    def test_rectangular(self):
        check_rectangular([[1, 2], [3, 4]], "rows")
        check_rectangular([], "rows")

    def test_ragged_rows(self):
        with pytest.raises(DimensionError, match="unequal length"):
            check_rectangular([[1, 2], [3]], "rows")


# ═══════════════════════════════════════════════════════════════════════
# Operand preconditions
# ═══════════════════════════════════════════════════════════════════════


class TestOperandChecks:

    def test_same_kind(self):
        check_same_kind(ElementKind.F64, ElementKind.F64, "op")
        with pytest.raises(ElementKindError, match="different element kinds"):
            check_same_kind(ElementKind.F64, ElementKind.I64, "op")

    def test_square(self):
        check_square(Matrix([[1, 2], [3, 4]]), "det")

    def test_not_square_attributes(self):
        with pytest.raises(NotSquareMatrixError) as exc_info:
            check_square(Matrix([[1, 2, 3], [4, 5, 6]]), "det")
        assert exc_info.value.width == 3
        assert exc_info.value.height == 2

    def test_nonempty(self):
        check_nonempty(Matrix([[1]]), "det")
        with pytest.raises(EmptyMatrixError, match="det"):
            check_nonempty(Matrix([]), "det")
