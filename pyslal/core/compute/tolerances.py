"""
Numeric thresholds and tolerance tiers.

Defines the fixed thresholds the algorithms rely on, and the precision
expectations for comparing float results of each float kind:
- F64: tight tolerances for double precision results
- F32: relaxed for single-precision arithmetic

Used by the decomposition and eigen engines, and by the test suite.
"""

from dataclasses import dataclass

from pyslal.core.kinds import ElementKind


# Computed triangular entries at or below this magnitude are treated as 0.0,
# and a pivot at or below it means no triangular form exists.
TRIANGULAR_ZERO_THRESHOLD = 1e-10

# Power iteration stops once the eigenvalue estimate changes by less than this
EIGEN_TOLERANCE = 1e-10

# Upper bound on power iteration steps
EIGEN_MAX_ITERATIONS = 100

# Random signed/float draws are resampled until their magnitude exceeds this
RANDOM_MAGNITUDE_FLOOR = 1e-6

# Worker count for parallel cofactor minors (joblib convention: -1 = all cores)
DEFAULT_N_JOBS = -1


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, well-conditioned',
)

FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='double precision, inverse/adjugate round trips',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision',
)


def select_tolerance(
    kind: ElementKind,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for results of a given kind."""
    if kind is ElementKind.F32:
        return FP32
    if is_ill_conditioned:
        return FP64_ILL_CONDITIONED
    return FP64
