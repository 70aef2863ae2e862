"""
Tests for determinant, cofactor, adjugate and inverse.

Validates:
    - Triangular fast path, closed forms (n <= 3), Doolittle path (n >= 4)
    - Cofactor closed forms and the parallel per-entry path agree with NumPy
    - Failures inside parallel minors propagate unchanged
    - Inverse via adjugate, DeterminantZeroError on det == 0
"""

import numpy as np
import pytest

from pyslal.core.compute.tolerances import FP64, FP64_ILL_CONDITIONED
from pyslal.core.exceptions import (
    DeterminantZeroError,
    EmptyMatrixError,
    NotSquareMatrixError,
    SingularMatrixError,
    TriangularFormUnavailableError,
    ValidationError,
)
from pyslal.core.kinds import ElementKind
from pyslal.decomposition import adjugate, cofactor, det, inverse, minor
from pyslal.matrix import Matrix


def numpy_cofactor(a):
    return np.linalg.det(a) * np.linalg.inv(a).T


# A 4x4 permutation with a zero leading pivot that is not triangular
SWAPPED_4X4 = [
    [0.0, 1.0, 0.0, 0.0],
    [1.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, 1.0, 0.0],
    [0.0, 0.0, 0.0, 1.0],
]


# ═══════════════════════════════════════════════════════════════════════
# det
# ═══════════════════════════════════════════════════════════════════════


class TestDet:

    def test_2x2(self):
        assert det(Matrix([[1, 2], [3, 4]])) == -2.0

    def test_1x1(self):
        assert det(Matrix([[5]])) == 5.0

    def test_lower_triangular_fast_path(self):
        assert det(Matrix([[1, 0, 0], [2, 3, 0], [4, 5, 6]])) == 18.0

    def test_diagonal_4x4(self):
        assert det(Matrix.diagonal([1, 2, 3, 4])) == 24.0

    def test_triangular_with_zero_pivot(self):
        # Structurally triangular input never reaches Doolittle
        m = Matrix([[0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 2.0, 3.0],
                    [0.0, 0.0, 1.0, 2.0], [0.0, 0.0, 0.0, 1.0]])
        assert det(m) == 0.0

    def test_3x3_closed_form(self, rng):
        a = rng.standard_normal((3, 3))
        np.testing.assert_allclose(det(Matrix.from_numpy(a)), np.linalg.det(a),
                                   rtol=FP64.rtol)

    def test_4x4_doolittle(self, rng):
        a = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
        np.testing.assert_allclose(det(Matrix.from_numpy(a)), np.linalg.det(a),
                                   rtol=FP64.rtol)

    def test_known_4x4(self):
        m = Matrix([[2, 0, 1, 3], [1, 1, 0, 2], [0, 3, 1, 1], [1, 0, 2, 1]])
        np.testing.assert_allclose(det(m), np.linalg.det(m.to_numpy().astype(float)))

    def test_zero_leading_pivot_4x4(self):
        with pytest.raises(TriangularFormUnavailableError):
            det(Matrix(SWAPPED_4X4))

    def test_not_square(self):
        with pytest.raises(NotSquareMatrixError) as exc_info:
            det(Matrix([[1, 2, 3], [4, 5, 6]]))
        assert (exc_info.value.width, exc_info.value.height) == (3, 2)

    def test_empty(self):
        with pytest.raises(EmptyMatrixError):
            det(Matrix([]))

    def test_zero_width_is_not_square(self):
        with pytest.raises(NotSquareMatrixError) as exc_info:
            det(Matrix([[]]))
        assert (exc_info.value.width, exc_info.value.height) == (0, 1)

    def test_returns_float(self):
        assert isinstance(det(Matrix([[1, 2], [3, 4]], kind=ElementKind.I8)), float)


# ═══════════════════════════════════════════════════════════════════════
# minor / cofactor / adjugate
# ═══════════════════════════════════════════════════════════════════════


class TestMinor:

    def test_removes_row_and_column(self):
        m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert minor(m, 1, 1).to_list() == [[1, 3], [7, 9]]
        assert minor(m, 0, 2).to_list() == [[4, 5], [7, 8]]

    def test_keeps_kind(self):
        assert minor(Matrix([[1, 2], [3, 4]], kind=ElementKind.U16), 0, 0).kind is ElementKind.U16

    def test_out_of_range(self):
        with pytest.raises(ValidationError):
            minor(Matrix([[1, 2], [3, 4]]), 2, 0)


class TestCofactor:

    def test_1x1(self):
        assert cofactor(Matrix([[7.0]])).to_list() == [[1.0]]

    def test_3x3_closed_form(self, rng):
        a = rng.standard_normal((3, 3))
        np.testing.assert_allclose(cofactor(Matrix.from_numpy(a)).to_numpy(),
                                   numpy_cofactor(a), atol=1e-10)

    def test_3x3_integer(self):
        m = Matrix([[1, 2, 3], [0, 4, 5], [1, 0, 6]])
        expected = [[24.0, 5.0, -4.0], [-12.0, 3.0, 2.0], [-2.0, -5.0, 4.0]]
        assert cofactor(m).to_list() == expected

    @pytest.mark.parametrize("n", [4, 5])
    def test_parallel_path(self, rng, n):
        a = rng.standard_normal((n, n)) + n * np.eye(n)
        np.testing.assert_allclose(cofactor(Matrix.from_numpy(a)).to_numpy(),
                                   numpy_cofactor(a), atol=1e-9)

    def test_n_jobs_do_not_change_result(self, rng):
        m = Matrix.from_numpy(rng.standard_normal((4, 4)) + 4.0 * np.eye(4))
        assert cofactor(m, n_jobs=1) == cofactor(m, n_jobs=2)

    def test_minor_failure_propagates(self):
        a = np.eye(5)
        a[:2, :2] = [[0.0, 1.0], [1.0, 0.0]]
        with pytest.raises(TriangularFormUnavailableError):
            cofactor(Matrix.from_numpy(a), n_jobs=2)

    def test_not_square(self):
        with pytest.raises(NotSquareMatrixError) as exc_info:
            cofactor(Matrix([[1, 2, 3], [4, 5, 6]]))
        assert (exc_info.value.width, exc_info.value.height) == (3, 2)

    @pytest.mark.parametrize("rows", [[[1.0, 2.0]], [[1.0], [2.0]], [[]]])
    def test_not_square_shapes(self, rows):
        with pytest.raises(NotSquareMatrixError):
            cofactor(Matrix(rows))

    def test_empty(self):
        with pytest.raises(EmptyMatrixError):
            cofactor(Matrix([]))

    def test_adjugate_is_transpose(self, rng):
        m = Matrix.from_numpy(rng.standard_normal((4, 4)) + 4.0 * np.eye(4))
        assert adjugate(m) == cofactor(m).T


# ═══════════════════════════════════════════════════════════════════════
# inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_1x1(self):
        assert inverse(Matrix([[4.0]])).to_list() == [[0.25]]

    def test_2x2(self):
        inv = inverse(Matrix([[1, 2], [3, 4]]))
        assert inv.kind is ElementKind.F64
        np.testing.assert_allclose(inv.to_numpy(), [[-2.0, 1.0], [1.5, -0.5]])

    def test_4x4_round_trip(self, rng):
        a = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
        m = Matrix.from_numpy(a)
        product = (m * inverse(m)).to_numpy()
        tol = FP64_ILL_CONDITIONED
        np.testing.assert_allclose(product, np.eye(4), rtol=tol.rtol, atol=tol.atol)

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
        np.testing.assert_allclose(inverse(Matrix.from_numpy(a)).to_numpy(),
                                   np.linalg.inv(a), atol=1e-9)

    def test_singular(self):
        with pytest.raises(DeterminantZeroError) as exc_info:
            inverse(Matrix([[1, 2], [2, 4]]))
        assert exc_info.value.determinant == 0.0

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            inverse(Matrix([[0.0, 0.0, 0.0]] * 3))

    def test_not_square(self):
        with pytest.raises(NotSquareMatrixError):
            inverse(Matrix([[1.0, 2.0]]))

    def test_triangular_form_failure_propagates(self):
        with pytest.raises(TriangularFormUnavailableError):
            inverse(Matrix(SWAPPED_4X4))
