"""
Munkres Solver Module

Public entry points: ``solve`` (typed success/failure result), ``solve_maximum``
(maximisation by negation) and ``MunkresSolver``, the callable wrapper that
shares the ``(rows, cols, cost)`` interface of the reference solvers.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from .config import MunkresConfig
from .cover_state import Cell
from .duals import DualLabels, DualTracker
from .errors import AssignmentFailedError, FailureReason
from .extraction import ResultExtractor, assignments_to_arrays
from .padding import CostInput, pad_matrix, to_cost_array
from .step_engine import Step, StepEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveSuccess:
    assignments: List[Cell]
    total_cost: float
    iterations: int
    duals: Optional[DualLabels] = None

    success = True

    @property
    def rows(self) -> np.ndarray:
        return assignments_to_arrays(self.assignments)[0]

    @property
    def cols(self) -> np.ndarray:
        return assignments_to_arrays(self.assignments)[1]


@dataclass(frozen=True)
class SolveFailure:
    reason: FailureReason
    message: str
    iterations: int

    success = False


SolveResult = Union[SolveSuccess, SolveFailure]


def solve(costs: CostInput, forbidden: Optional[np.ndarray] = None, *,
          rows: Optional[int] = None, cols: Optional[int] = None,
          config: Optional[MunkresConfig] = None) -> SolveResult:
    """
    Minimum-cost assignment for a rectangular cost matrix.

    Args:
        costs: R x C costs; ``+inf`` or :data:`munkres.DISALLOWED` cells are forbidden
        forbidden: Optional boolean mask of further forbidden pairings
        rows, cols: Solve only the leading ``rows x cols`` block
        config: Tolerance, dimension bound, iteration cap, dual tracking

    Returns:
        SolveSuccess with row-major ``(row, col)`` pairs and their original cost,
        or SolveFailure with the reason the run stopped.

    Raises:
        InvalidCostMatrixError: malformed input, rejected before the run starts
    """
    config = config or MunkresConfig()
    values, mask = to_cost_array(costs, forbidden)
    problem = pad_matrix(values, mask, rows=rows, cols=cols, max_dimension=config.max_dimension)

    tracker = None
    if config.track_duals:
        tracker = DualTracker(problem.working, problem.working_forbidden)

    engine = StepEngine(problem, config, tracker=tracker)
    final = engine.run()
    if final is Step.FAILED:
        return SolveFailure(
            reason=engine.failure,
            message=engine.failure_message,
            iterations=engine.iterations,
        )

    assignments, cost = ResultExtractor(problem).extract(engine.state)
    logger.debug("solved %dx%d in %d steps: cost=%.6f pairs=%s",
                 problem.rows, problem.cols, engine.iterations, cost, assignments)
    return SolveSuccess(
        assignments=assignments,
        total_cost=cost,
        iterations=engine.iterations,
        duals=tracker.labels if tracker is not None else None,
    )


def negate_costs(costs: CostInput, forbidden: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(-values, mask)`` with forbidden cells kept as ``+inf``."""
    values, mask = to_cost_array(costs, forbidden)
    return np.where(mask, np.inf, -values), mask


def solve_maximum(costs: CostInput, forbidden: Optional[np.ndarray] = None, *,
                  rows: Optional[int] = None, cols: Optional[int] = None,
                  config: Optional[MunkresConfig] = None) -> SolveResult:
    """
    Maximum-profit assignment: negate every allowed cost, minimise, and report
    the total on the caller's scale.
    """
    negated, mask = negate_costs(costs, forbidden)
    result = solve(negated, mask, rows=rows, cols=cols, config=config)
    if not result.success:
        return result
    return SolveSuccess(
        assignments=result.assignments,
        total_cost=-result.total_cost,
        iterations=result.iterations,
        duals=result.duals,
    )


class MunkresSolver:
    """Wrapper for the covering-based Munkres engine."""

    def __init__(self, config: Optional[MunkresConfig] = None, maximize: bool = False):
        self.name = "MunkresMax" if maximize else "Munkres"
        self.config = config
        self.maximize = maximize

    def solve(self, C: np.ndarray, mask: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray, float]:
        """
        Solve the LAP for cost matrix ``C``.

        Args:
            C: Cost matrix (rectangular allowed)
            mask: Optional boolean mask of forbidden pairings

        Returns:
            rows, cols, cost: Row indices, column indices, total cost

        Raises:
            AssignmentFailedError: when the engine reports a failure
        """
        runner = solve_maximum if self.maximize else solve
        result = runner(C, mask, config=self.config)
        if not result.success:
            raise AssignmentFailedError(result.reason, result.message)
        return result.rows, result.cols, float(result.total_cost)

    def __call__(self, C: np.ndarray, mask: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray, float]:
        """Allow using solver as callable."""
        return self.solve(C, mask)


__all__ = [
    "SolveSuccess",
    "SolveFailure",
    "SolveResult",
    "solve",
    "negate_costs",
    "solve_maximum",
    "MunkresSolver",
]
