"""
Random construction of vertices and matrices.

Values come from an injected RandomSource. Draws that are zero (integer
kinds) or whose magnitude is at most RANDOM_MAGNITUDE_FLOOR (float kinds)
are resampled, so random containers never hold (near-)zero elements.
"""

from __future__ import annotations

import logging
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyslal.core.compute.tolerances import RANDOM_MAGNITUDE_FLOOR
from pyslal.core.exceptions import NumericalError, ValidationError
from pyslal.core.kinds import ElementKind
from pyslal.core.protocols import RandomSource

logger = logging.getLogger(__name__)

# Resampling rounds after which the source is treated as broken
MAX_RESAMPLE_ROUNDS = 1000


class NumpyRandomSource:
    """
    RandomSource backed by numpy.random.Generator.

    Floats are uniform on [-1, 1). Integers are uniform over the full range
    of the kind; the 128-bit kinds combine two 64-bit draws.

    Args:
        seed: Seed or existing Generator. None draws fresh OS entropy.
    """

    def __init__(self, seed: int | np.random.Generator | None = None):
        self._rng = np.random.default_rng(seed)

    def uniform(self, kind: ElementKind, count: int) -> NDArray[Any]:
        if kind.is_float:
            return self._rng.uniform(-1.0, 1.0, size=count).astype(kind.dtype)
        if kind.is_object_backed:
            hi = self._rng.integers(0, 2 ** 64, size=count, dtype=np.uint64)
            lo = self._rng.integers(0, 2 ** 64, size=count, dtype=np.uint64)
            offset = -kind.min_value
            values = np.empty(count, dtype=object)
            values[:] = [(int(h) << 64 | int(l)) - offset for h, l in zip(hi, lo)]
            return values
        return self._rng.integers(
            kind.min_value, kind.max_value, size=count,
            dtype=kind.dtype, endpoint=True,
        )


def resolve_source(
    source: RandomSource | None,
    seed: int | None = None,
) -> RandomSource:
    """
    Return source, or a NumpyRandomSource seeded with seed if source is None.

    Raises:
        ValidationError: If source doesn't provide uniform(kind, count)
    """
    if source is None:
        return NumpyRandomSource(seed)
    if not isinstance(source, RandomSource):
        raise ValidationError(
            f"source: expected an object with uniform(kind, count), "
            f"got {type(source).__name__}"
        )
    return source


def _rejected(kind: ElementKind, values: NDArray[Any]) -> NDArray[np.bool_]:
    if kind.is_integer:
        return values == 0
    return np.abs(values) <= RANDOM_MAGNITUDE_FLOOR


def random_values(
    kind: ElementKind,
    count: int,
    *,
    source: RandomSource,
) -> NDArray[Any]:
    """
    Draw count non-zero values of a kind, resampling rejected draws.

    Returns:
        1D array of length count in the kind's storage

    Raises:
        ValidationError: If count is negative
        NumericalError: If the source keeps producing rejected values
    """
    if count < 0:
        raise ValidationError(f"count: must be non-negative, got {count}")

    values = kind.coerce(source.uniform(kind, count))
    if values.shape != (count,):
        raise ValidationError(
            f"source: expected {count} values, got shape {values.shape}"
        )
    values = values.copy()

    mask = _rejected(kind, values)
    rounds = 0
    while np.any(mask):
        rounds += 1
        if rounds > MAX_RESAMPLE_ROUNDS:
            raise NumericalError(
                f"random source produced only rejected {kind} values after "
                f"{MAX_RESAMPLE_ROUNDS} resampling rounds"
            )
        n_rejected = int(np.count_nonzero(mask))
        logger.debug("resampling %d rejected %s draws", n_rejected, kind)
        values[mask] = kind.coerce(source.uniform(kind, n_rejected))
        mask = _rejected(kind, values)

    return values
