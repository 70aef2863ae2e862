"""
CPU power-iteration backend for the dominant eigenpair.

Algorithm:
    1. Start from a random column vertex, L2-normalized.
    2. For iteration 1..max_iter:
        w = A v
        v_new = w / |w|
        lambda_new = (v' A v) / (v' v), using the pre-update v
        Stop when |lambda_new - lambda| < tol, returning v and lambda_new
        Otherwise v <- v_new, lambda <- lambda_new
    3. A v == 0 means v lies in the null space: eigenvalue 0, converged.

Non-convergence is reported through Result.warnings, not an exception.
"""

import logging
from typing import Any

from pyslal.core.compute.timing import Timer
from pyslal.core.kinds import FLOAT_KIND
from pyslal.core.protocols import RandomSource
from pyslal.core.result import Result
from pyslal.eigen.design import EigenDesign
from pyslal.eigen.solution import EigenParams
from pyslal.linear.normalize import magnitude, normalized
from pyslal.linear.products import dot
from pyslal.linear.random import random_values
from pyslal.vertex.vertex import Orientation, Vertex

logger = logging.getLogger(__name__)


class CPUPowerIterationBackend:
    """
    CPU backend using power iteration.

    Implements the Backend protocol for EigenDesign -> EigenParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_power_iteration'

    def solve(
        self,
        design: EigenDesign,
        *,
        source: RandomSource,
        tol: float,
        max_iter: int,
    ) -> Result[EigenParams]:
        """
        Approximate the dominant eigenpair.

        Args:
            design: Validated eigen design
            source: Random source for the starting vector
            tol: Stop once the eigenvalue estimate changes by less than this
            max_iter: Maximum number of iterations

        Returns:
            Result containing EigenParams
        """
        timer = Timer()
        timer.start()

        matrix = design.matrix
        warnings_list: list[str] = []

        if design.lossy_promotion:
            warnings_list.append(
                f"promotion of {design.source_kind} values to {FLOAT_KIND} "
                f"lost precision (magnitude exceeds 2**53)"
            )

        with timer.section('initialize'):
            start = random_values(FLOAT_KIND, design.n, source=source)
            v = normalized(Vertex._wrap(start, FLOAT_KIND, Orientation.COLUMN))

        value: float | None = None
        converged = False
        n_iter = 0

        with timer.section('iterations'):
            for iteration in range(1, max_iter + 1):
                n_iter = iteration
                w = dot(matrix, v)

                if magnitude(w) == 0.0:
                    value = 0.0
                    converged = True
                    break

                v_new = normalized(w)
                value_new = float(dot(v.T, w) / dot(v.T, v))
                logger.debug("power iteration %d: eigenvalue %.12g", iteration, value_new)

                if value is not None and abs(value_new - value) < tol:
                    value = value_new
                    converged = True
                    break

                v, value = v_new, value_new

        if not converged:
            warnings_list.append(
                f"power iteration did not converge in {max_iter} iterations "
                f"(eigenvalue={value:.6g})"
            )

        timer.stop()

        params = EigenParams(
            vector=v,
            value=float(value),
            n_iter=n_iter,
            converged=converged,
        )

        info: dict[str, Any] = {
            'method': 'power_iteration',
            'tol': tol,
            'max_iter': max_iter,
            'source_kind': str(design.source_kind),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
