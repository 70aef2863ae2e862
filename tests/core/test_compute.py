"""
Tests for shared compute infrastructure.

Validates:
    - Timer: sections accumulate, misuse raises
    - Tolerance tiers and algorithm thresholds
    - Float promotion warnings, safe division, near-zero collapse
    - parallel_map ordering and exception propagation
"""

import time

import numpy as np
import pytest

from pyslal.core.compute import Timer, parallel_map, promote, safe_divide
from pyslal.core.compute.precision import (
    F64_EXACT_INTEGER_LIMIT,
    collapse_near_zero,
    loses_precision,
)
from pyslal.core.compute.tolerances import (
    EIGEN_MAX_ITERATIONS,
    EIGEN_TOLERANCE,
    FP32,
    FP64,
    FP64_ILL_CONDITIONED,
    TRIANGULAR_ZERO_THRESHOLD,
    select_tolerance,
)
from pyslal.core.kinds import ElementKind
from pyslal.matrix import Matrix
from pyslal.vertex import Vertex


# ═══════════════════════════════════════════════════════════════════════
# Timing
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('work'):
            time.sleep(0.001)
        with timer.section('work'):
            time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert result['work'] >= 0.002
        assert result['total_seconds'] >= result['work']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestTolerances:

    def test_algorithm_thresholds(self):
        assert TRIANGULAR_ZERO_THRESHOLD == 1e-10
        assert EIGEN_TOLERANCE == 1e-10
        assert EIGEN_MAX_ITERATIONS == 100

    def test_select_tolerance(self):
        assert select_tolerance(ElementKind.F64) is FP64
        assert select_tolerance(ElementKind.F32) is FP32
        assert select_tolerance(ElementKind.I64, is_ill_conditioned=True) is FP64_ILL_CONDITIONED

    def test_tiers_ordered(self):
        assert FP64.rtol < FP64_ILL_CONDITIONED.rtol
        assert FP64.rtol < FP32.rtol


# ═══════════════════════════════════════════════════════════════════════
# Precision
# ═══════════════════════════════════════════════════════════════════════


class TestPromote:

    def test_float_passthrough(self):
        v = Vertex([1.0, 2.0])
        assert promote(v) is v

    def test_int_promoted(self):
        m = promote(Matrix([[1, 2], [3, 4]]))
        assert m.kind is ElementKind.F64
        assert m.to_list() == [[1.0, 2.0], [3.0, 4.0]]

    def test_small_i64_silent(self, recwarn):
        promote(Vertex([2 ** 40], kind=ElementKind.I64))
        assert len(recwarn) == 0

    def test_large_i64_warns(self):
        v = Vertex([F64_EXACT_INTEGER_LIMIT + 1], kind=ElementKind.I64)
        with pytest.warns(RuntimeWarning, match="loses precision"):
            promote(v, name='magnitude')

    def test_loses_precision(self):
        values = np.array([2 ** 60], dtype=object)
        assert loses_precision(values, ElementKind.I128)
        assert not loses_precision(np.array([2 ** 30], dtype=np.int32), ElementKind.I32)


class TestSafeHelpers:

    def test_safe_divide_zero_denominator(self):
        result = safe_divide(np.array([1.0, 2.0]), np.array([0.0, 4.0]))
        np.testing.assert_array_equal(result, [0.0, 0.5])

    def test_safe_divide_fill_value(self):
        result = safe_divide(np.array([0.0]), np.array([0.0]), fill_value=-1.0)
        np.testing.assert_array_equal(result, [-1.0])

    def test_collapse_near_zero(self):
        assert collapse_near_zero(1e-11, 1e-10) == 0.0
        assert collapse_near_zero(-1e-10, 1e-10) == 0.0
        assert collapse_near_zero(1e-9, 1e-10) == 1e-9


# ═══════════════════════════════════════════════════════════════════════
# Parallel fan-out
# ═══════════════════════════════════════════════════════════════════════


def _fail_on_three(x):
    if x == 3:
        raise ValueError("three")
    return x


class TestParallelMap:

    def test_preserves_order(self):
        assert parallel_map(lambda x: x * x, range(10), n_jobs=4) == [x * x for x in range(10)]

    def test_unpacks_tuples(self):
        assert parallel_map(pow, [(2, 3), (3, 2)], n_jobs=2) == [8, 9]

    def test_exception_propagates(self):
        with pytest.raises(ValueError, match="three"):
            parallel_map(_fail_on_three, range(6), n_jobs=2)

    def test_empty(self):
        assert parallel_map(abs, [], n_jobs=2) == []
