"""
Exception hierarchy for pyslal.

All exceptions inherit from PySlalError to allow catching any
library-specific error. Operation-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySlalError(Exception):
    """Base exception for all pyslal errors."""
    pass


class ValidationError(PySlalError):
    """
    Input validation failed.

    Raised when user-provided operands fail a precondition check.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when vertex lengths or matrix sizes don't match what an
    operation requires, or when rows of a matrix have unequal length.
    """
    pass


class NotSquareMatrixError(DimensionError):
    """
    Matrix is not square.

    Raised by triangularization, determinant, cofactor, inverse and eigen
    when width != height.

    Attributes:
        width: Number of columns of the rejected matrix
        height: Number of rows of the rejected matrix
    """

    def __init__(
        self,
        message: str,
        width: int | None = None,
        height: int | None = None
    ):
        super().__init__(message)
        self.width = width
        self.height = height


class UnmatchingOperandLengthError(DimensionError):
    """
    Two operands of the same type have incompatible sizes.

    Raised for vertex/vertex length mismatches and matrix/matrix size
    mismatches (elementwise operations and products).

    Attributes:
        left_shape: Length or (width, height) of the left operand
        right_shape: Length or (width, height) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: int | tuple[int, int] | None = None,
        right_shape: int | tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class ShapeMismatchError(DimensionError):
    """
    Vertex length does not match the matrix dimension it is multiplied with.

    Attributes:
        vertex_length: Length of the vertex operand
        matrix_size: (width, height) of the matrix operand
    """

    def __init__(
        self,
        message: str,
        vertex_length: int | None = None,
        matrix_size: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.vertex_length = vertex_length
        self.matrix_size = matrix_size


class EmptyMatrixError(ValidationError):
    """
    Operation is undefined for an empty (0 x 0) matrix.
    """
    pass


class OrientationError(ValidationError):
    """
    Vertex orientation is invalid for the requested operation.

    Raised when two vertices of the same orientation are multiplied, or
    when a column vertex is used where a row vertex is required (and the
    other way around).

    Attributes:
        left: Orientation name of the left operand, if it is a vertex
        right: Orientation name of the right operand, if it is a vertex
    """

    def __init__(
        self,
        message: str,
        left: str | None = None,
        right: str | None = None
    ):
        super().__init__(message)
        self.left = left
        self.right = right


class ElementKindError(ValidationError):
    """
    Element kind is unsupported, mixed, or values don't fit the kind.

    Raised for non-numeric input, operands of different kinds, and values
    outside the representable range of the requested kind.
    """
    pass


class NumericalError(PySlalError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ElementOverflowError(NumericalError):
    """
    Arithmetic result does not fit the element kind.

    Only raised for the 128-bit kinds, whose values are range-checked after
    every operation.

    Attributes:
        kind: Name of the element kind that overflowed
    """

    def __init__(self, message: str, kind: str | None = None):
        super().__init__(message)
        self.kind = kind


class TriangularFormUnavailableError(NumericalError):
    """
    Doolittle decomposition hit a vanishing pivot.

    No row exchange is attempted, so matrices whose leading principal
    minors vanish have no triangular form here even when they are
    invertible.

    Attributes:
        pivot_index: Diagonal position of the failing pivot
        pivot: Value of the failing pivot
    """

    def __init__(
        self,
        message: str,
        pivot_index: int | None = None,
        pivot: float | None = None
    ):
        super().__init__(message)
        self.pivot_index = pivot_index
        self.pivot = pivot


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility but the matrix
    is singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant that was computed, if any
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class DeterminantZeroError(SingularMatrixError):
    """
    Inverse requested on a matrix whose determinant is exactly 0.0.
    """
    pass
