"""
Step Engine Module

The covering-based Munkres state machine. Each state is a handler method that
mutates the working matrix and cover state and returns the next state; ``run``
dispatches until DONE or FAILED.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .config import MunkresConfig
from .cover_state import CoverState, Mark
from .duals import DualTracker
from .errors import FailureReason
from .formatting import format_covers, format_matrix
from .padding import PaddedProblem

logger = logging.getLogger(__name__)


class Step(Enum):
    ROW_REDUCE = "row_reduce"
    STAR_ZEROS = "star_zeros"
    COVER_COLUMNS = "cover_columns"
    FIND_ZERO = "find_zero"
    AUGMENT = "augment"
    ADJUST = "adjust"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STEPS = (Step.DONE, Step.FAILED)


class StepEngine:
    """
    Drives one padded problem to an optimal assignment or a typed failure.

    Args:
        problem: Square problem from :func:`munkres.padding.pad_matrix`
        config: Tolerance and iteration cap
        tracker: Optional dual-label observer, updated on reduction and adjustment
    """

    def __init__(self, problem: PaddedProblem, config: Optional[MunkresConfig] = None,
                 tracker: Optional[DualTracker] = None):
        self.config = config or MunkresConfig()
        self.n = problem.n
        self.working = problem.working.copy()
        self.forbidden = problem.working_forbidden
        self.state = CoverState(self.n)
        self.tracker = tracker
        self.tolerance = float(self.config.tolerance)
        self.iterations = 0
        self.failure: Optional[FailureReason] = None
        self.failure_message = ""
        self._handlers: Dict[Step, Callable[[], Step]] = {
            Step.ROW_REDUCE: self._row_reduce,
            Step.STAR_ZEROS: self._star_zeros,
            Step.COVER_COLUMNS: self._cover_columns,
            Step.FIND_ZERO: self._find_zero,
            Step.AUGMENT: self._augment,
            Step.ADJUST: self._adjust,
        }

    def run(self) -> Step:
        """Run the state machine to a terminal step and return it."""
        cap = self.config.iteration_cap(self.n)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s", format_matrix(self.working, self.forbidden, title="Cost matrix:"))

        step = Step.ROW_REDUCE
        while step not in TERMINAL_STEPS:
            if self.iterations >= cap:
                return self._fail(
                    FailureReason.ITERATION_LIMIT,
                    f"No result after {self.iterations} steps (cap {cap})",
                )
            self.iterations += 1
            next_step = self._handlers[step]()
            logger.debug("step %d: %s -> %s", self.iterations, step.value, next_step.value)
            step = next_step
        return step

    def _fail(self, reason: FailureReason, message: str) -> Step:
        self.failure = reason
        self.failure_message = message
        logger.warning("Munkres run failed (%s): %s", reason.value, message)
        return Step.FAILED

    # -- zero search helpers -------------------------------------------------

    def _zeros(self) -> np.ndarray:
        return (np.abs(self.working) < self.tolerance) & ~self.forbidden

    def _uncovered(self) -> np.ndarray:
        return ~self.state.row_covered[:, None] & ~self.state.col_covered[None, :]

    def _find_uncovered_zero(self) -> Optional[Tuple[int, int]]:
        hits = np.flatnonzero(self._zeros() & self._uncovered())
        if hits.size == 0:
            return None
        row, col = divmod(int(hits[0]), self.n)
        return row, col

    # -- states --------------------------------------------------------------

    def _row_reduce(self) -> Step:
        allowed = np.where(self.forbidden, np.inf, self.working)
        minima = allowed.min(axis=1)
        unsolvable = np.flatnonzero(np.isinf(minima))
        if unsolvable.size:
            return self._fail(
                FailureReason.ROW_UNSOLVABLE,
                f"Row {int(unsolvable[0])} is entirely forbidden",
            )
        self.working = np.where(self.forbidden, self.working, self.working - minima[:, None])
        if self.tracker is not None:
            self.tracker.on_row_reduce(minima)
        return Step.STAR_ZEROS

    def _star_zeros(self) -> Step:
        zeros = self._zeros()
        for i in range(self.n):
            free = np.flatnonzero(zeros[i] & ~self.state.col_covered)
            if free.size:
                j = int(free[0])
                self.state.marks[i, j] = Mark.TENTATIVE
                self.state.cover(i, j)
        self.state.clear_covers()
        return Step.COVER_COLUMNS

    def _cover_columns(self) -> Step:
        covered = self.state.cover_tentative_columns()
        logger.debug("%s", format_covers(self.state.row_covered, self.state.col_covered))
        if covered >= self.n:
            return Step.DONE
        return Step.FIND_ZERO

    def _find_zero(self) -> Step:
        while True:
            cell = self._find_uncovered_zero()
            if cell is None:
                return Step.ADJUST
            row, col = cell
            self.state.marks[row, col] = Mark.CANDIDATE
            tentative_col = self.state.tentative_in_row(row)
            if tentative_col < 0:
                self.state.origin = cell
                return Step.AUGMENT
            self.state.row_covered[row] = True
            self.state.col_covered[tentative_col] = False

    def _augment(self) -> Step:
        path = self.state.build_path()
        logger.debug("augmenting path: %s", path)
        self.state.flip_path()
        self.state.clear_covers()
        self.state.erase_candidates()
        return Step.COVER_COLUMNS

    def _adjust(self) -> Step:
        eligible = self._uncovered() & ~self.forbidden
        if not eligible.any():
            return self._fail(
                FailureReason.NO_FEASIBLE_ADJUSTMENT,
                "No allowed cell left outside the covered lines",
            )
        delta = float(self.working[eligible].min())

        shift = np.zeros((self.n, self.n), dtype=np.float64)
        shift[self.state.row_covered, :] += delta
        shift[:, ~self.state.col_covered] -= delta
        self.working = np.where(self.forbidden, self.working, self.working + shift)

        if self.tracker is not None:
            self.tracker.on_adjust(delta, self.state.row_covered, self.state.col_covered)
            logger.debug("row labels: %s | column labels: %s",
                         np.array2string(self.tracker.labels.row, precision=4),
                         np.array2string(self.tracker.labels.col, precision=4))
        return Step.FIND_ZERO


__all__ = ["Step", "TERMINAL_STEPS", "StepEngine"]
