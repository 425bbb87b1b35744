"""
Verification Module

Cross-checks the Munkres engine against the SciPy and LAP reference solvers.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from .config import MunkresConfig
from .errors import AssignmentFailedError
from .lap_solver import LAPSolver
from .scipy_solver import SciPySolver
from .solver import MunkresSolver

logger = logging.getLogger(__name__)


@dataclass
class VerificationReport:
    costs: Dict[str, float] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)
    tolerance: float = 1e-9

    @property
    def consistent(self) -> bool:
        """All solvers failed, or all succeeded with costs within tolerance."""
        if self.failures and self.costs:
            return False
        if not self.costs:
            return True
        values = list(self.costs.values())
        return max(values) - min(values) < self.tolerance


def verify_solver_correctness(C: np.ndarray, forbidden: Optional[np.ndarray] = None,
                              tolerance: float = 1e-9,
                              config: Optional[MunkresConfig] = None) -> VerificationReport:
    """
    Verify that Munkres, SciPy and LAP agree on the optimal cost.

    Args:
        C: Cost matrix
        forbidden: Optional boolean mask of forbidden pairings
        tolerance: Numerical tolerance for cost comparison
        config: Munkres configuration (e.g. a larger ``max_dimension``)

    Returns:
        VerificationReport with each solver's cost or failure message
    """
    report = VerificationReport(tolerance=tolerance)
    for solver in (MunkresSolver(config), SciPySolver(), LAPSolver()):
        try:
            _, _, cost = solver.solve(C, forbidden)
        except AssignmentFailedError as e:
            report.failures[solver.name] = str(e)
            continue
        report.costs[solver.name] = cost

    if not report.consistent:
        logger.warning("Solvers disagree: costs=%s failures=%s", report.costs, report.failures)
    return report


__all__ = ["VerificationReport", "verify_solver_correctness"]
