"""
Eigen backends.

Available backends:
    CPUPowerIterationBackend: power iteration on NumPy arrays
"""

from pyslal.eigen.backends.cpu import CPUPowerIterationBackend

__all__ = [
    "CPUPowerIterationBackend",
]
