"""
LAP Solver Module

Reference interface for the LAP library's lapjv algorithm. lapjv has no
notion of a forbidden pair, so forbidden cells get a penalty larger than any
feasible total and a solution that still uses one is reported infeasible.
"""

import numpy as np
import lap
from typing import Optional, Tuple

from .errors import AssignmentFailedError, FailureReason
from .padding import to_cost_array


def forbidden_penalty(values: np.ndarray, forbidden: np.ndarray) -> float:
    """A cost no feasible assignment can reach through allowed cells alone."""
    allowed = values[~forbidden]
    if allowed.size == 0:
        return 1.0
    return float(2.0 * np.abs(allowed).sum() + 1.0)


class LAPSolver:
    """Wrapper for LAP library's lapjv algorithm."""

    def __init__(self):
        self.name = "LAP"

    def solve(self, C: np.ndarray, mask: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray, float]:
        """
        Solve LAP using lapjv (rectangular inputs via extend_cost).

        Args:
            C: Cost matrix
            mask: Optional boolean mask of forbidden pairings

        Returns:
            rows, cols, cost: Row assignments, column assignments, total cost
        """
        values, forbidden = to_cost_array(C, mask)
        costs = np.where(forbidden, forbidden_penalty(values, forbidden), values)
        costs = np.ascontiguousarray(costs, dtype=np.float64)

        extend = costs.shape[0] != costs.shape[1]
        _, x, _ = lap.lapjv(costs, extend_cost=extend)

        x = np.asarray(x, dtype=np.int64)
        rows = np.flatnonzero(x >= 0).astype(np.int64)
        cols = x[rows]
        if forbidden[rows, cols].any():
            raise AssignmentFailedError(
                FailureReason.NO_FEASIBLE_ADJUSTMENT,
                "lapjv could only complete the matching through forbidden cells",
            )

        # Compute cost from assignment for consistency
        cost = float(values[rows, cols].sum())
        return rows, cols, cost

    def __call__(self, C: np.ndarray, mask: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray, float]:
        """Allow using solver as callable."""
        return self.solve(C, mask)
