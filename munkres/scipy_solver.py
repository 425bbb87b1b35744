"""
SciPy Solver Module

Reference interface for SciPy's linear_sum_assignment, with forbidden cells
passed through as ``inf``.
"""

import numpy as np
import scipy.optimize
from typing import Optional, Tuple

from .errors import AssignmentFailedError, FailureReason
from .padding import to_cost_array


class SciPySolver:
    """Wrapper for SciPy's linear_sum_assignment algorithm."""

    def __init__(self, maximize: bool = False):
        self.name = "SciPyMax" if maximize else "SciPy"
        self.maximize = maximize

    def solve(self, C: np.ndarray, mask: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray, float]:
        """
        Solve LAP using SciPy's linear_sum_assignment.

        Args:
            C: Cost matrix (rectangular allowed)
            mask: Optional boolean mask of forbidden pairings

        Returns:
            rows, cols, cost: Row assignments, column assignments, total cost

        Raises:
            AssignmentFailedError: when no complete matching avoids the forbidden cells
        """
        values, forbidden = to_cost_array(C, mask)
        fill = -np.inf if self.maximize else np.inf
        costs = np.where(forbidden, fill, values)
        try:
            rows, cols = scipy.optimize.linear_sum_assignment(costs, maximize=self.maximize)
        except ValueError as e:
            raise AssignmentFailedError(FailureReason.NO_FEASIBLE_ADJUSTMENT, str(e)) from e
        cost = values[rows, cols].sum()
        return rows.astype(np.int64), cols.astype(np.int64), float(cost)

    def __call__(self, C: np.ndarray, mask: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray, float]:
        """Allow using solver as callable."""
        return self.solve(C, mask)
