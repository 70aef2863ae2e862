"""
Data-parallel fan-out over independent output slots.

Each task computes exactly one output slot and shares no mutable state
with the others, so no locking is needed. Tasks run on threads.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from joblib import Parallel, delayed

from pyslal.core.compute.tolerances import DEFAULT_N_JOBS

T = TypeVar('T')


def parallel_map(
    func: Callable[..., T],
    items: Iterable[Any],
    *,
    n_jobs: int | None = None,
) -> list[T]:
    """
    Apply func to every item on a joblib thread pool.

    Results are returned in input order. The first exception raised by any
    task propagates unchanged to the caller.

    Args:
        func: Function of one argument (tuples are unpacked)
        items: Work items, one per output slot
        n_jobs: Worker count (joblib convention), DEFAULT_N_JOBS if None

    Returns:
        List of results in the order of items
    """
    n_jobs = DEFAULT_N_JOBS if n_jobs is None else n_jobs
    return Parallel(n_jobs=n_jobs, prefer="threads")(
        delayed(func)(*item) if isinstance(item, tuple) else delayed(func)(item)
        for item in items
    )
