"""
Dual Labels Module

Optional instrumentation: row/column dual labels kept in step with the
engine's reductions and adjustments, plus feasibility and complementary
slackness checks on them. The engine never reads the labels back.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np


@dataclass
class DualLabels:
    row: np.ndarray
    col: np.ndarray

    @property
    def objective(self) -> float:
        """Dual objective sum(u) + sum(v)."""
        return float(self.row.sum() + self.col.sum())

    def reduced_costs(self, C: np.ndarray) -> np.ndarray:
        """Form C' = C - u 1^T - 1 v^T."""
        return C - self.row[:, None] - self.col[None, :]


class DualTracker:
    """
    Mirrors every working-matrix update as a label update so that, for each
    non-forbidden cell, ``working == base - u_i - v_j`` holds throughout a run.
    """

    def __init__(self, base: np.ndarray, forbidden: np.ndarray):
        n = base.shape[0]
        self.base = np.array(base, dtype=np.float64)
        self.forbidden = np.array(forbidden, dtype=bool)
        self.labels = DualLabels(row=np.zeros(n), col=np.zeros(n))

    def on_row_reduce(self, row_minima: np.ndarray) -> None:
        self.labels.row += row_minima

    def on_adjust(self, delta: float, row_covered: np.ndarray, col_covered: np.ndarray) -> None:
        self.labels.row[row_covered] -= delta
        self.labels.col[~col_covered] += delta


def check_dual_feasible(C: np.ndarray, forbidden: np.ndarray, labels: DualLabels,
                        tol: float = 1e-8) -> bool:
    """Assert r_ij = C_ij - u_i - v_j >= -tol on every allowed cell."""
    red = labels.reduced_costs(np.where(forbidden, 0.0, C))
    allowed = red[~forbidden]
    if allowed.size == 0:
        return True
    mn = float(allowed.min())
    if mn < -tol:
        raise AssertionError(f"Dual infeasible: min reduced cost {mn:.3e} < -tol")
    return True


def check_dual_and_match(C: np.ndarray, forbidden: np.ndarray, labels: DualLabels,
                         pairs: Iterable[Tuple[int, int]], tol: float = 1e-8) -> bool:
    """
    Strict check for a finished run:
      - dual feasibility on allowed cells
      - tightness on matched cells (complementary slackness)
    """
    check_dual_feasible(C, forbidden, labels, tol=tol)
    red = labels.reduced_costs(np.where(forbidden, 0.0, C))
    for r, c in pairs:
        if abs(red[r, c]) > max(tol, 1e-6):
            raise AssertionError(
                f"Complementary slackness violated on matched cell ({r}, {c}): {red[r, c]:.3e}"
            )
    return True


__all__ = [
    "DualLabels",
    "DualTracker",
    "check_dual_feasible",
    "check_dual_and_match",
]
