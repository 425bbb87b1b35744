"""
Result Extraction Module

Reads the final tentative marks back into caller coordinates. Synthetic
padding and forbidden cells never make it into the result, and costs are
summed from the unreduced matrix.
"""

from typing import List, Tuple

import numpy as np

from .cover_state import Cell, CoverState
from .padding import PaddedProblem


def extract_assignments(state: CoverState, problem: PaddedProblem) -> List[Cell]:
    """Tentative cells inside the caller's rectangle on allowed original cells, row-major."""
    return [
        (r, c)
        for r, c in state.tentative_cells()
        if r < problem.rows and c < problem.cols and not problem.original_forbidden[r, c]
    ]


def total_cost(original: np.ndarray, assignments: List[Cell]) -> float:
    """Sum of ``original`` at the given pairs (0.0 for none)."""
    if not assignments:
        return 0.0
    rows, cols = assignments_to_arrays(assignments)
    return float(original[rows, cols].sum())


def assignments_to_arrays(assignments: List[Cell]) -> Tuple[np.ndarray, np.ndarray]:
    """Split pairs into ``(rows, cols)`` index arrays."""
    if not assignments:
        empty = np.zeros(0, dtype=np.int64)
        return empty, empty.copy()
    pairs = np.asarray(assignments, dtype=np.int64)
    return pairs[:, 0], pairs[:, 1]


class ResultExtractor:
    """Binds a padded problem so several readers can share the extraction rules."""

    def __init__(self, problem: PaddedProblem):
        self.problem = problem

    def extract(self, state: CoverState) -> Tuple[List[Cell], float]:
        assignments = extract_assignments(state, self.problem)
        return assignments, total_cost(self.problem.original, assignments)


__all__ = [
    "extract_assignments",
    "total_cost",
    "assignments_to_arrays",
    "ResultExtractor",
]
