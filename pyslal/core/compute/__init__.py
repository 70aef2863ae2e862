"""
Shared compute infrastructure for pyslal.

This module provides timing utilities, numeric thresholds, explicit float
promotion and parallel fan-out shared by all engines.

IMPORTANT: This is NOT where algorithms live. Those go in
decomposition/, linear/ and eigen/. This module contains shared NUMERIC
infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Algorithm thresholds and comparison tiers
    precision: Float promotion and safe numerical operations
    parallel: joblib fan-out over independent output slots
"""

from pyslal.core.compute.timing import Timer
from pyslal.core.compute.precision import promote, safe_divide
from pyslal.core.compute.parallel import parallel_map

__all__ = [
    # Timing
    "Timer",
    # Precision
    "promote",
    "safe_divide",
    # Parallel
    "parallel_map",
]
