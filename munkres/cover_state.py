"""Marks, covers and the augmenting path of one Munkres run."""

from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np


class Mark(IntEnum):
    UNMARKED = 0
    TENTATIVE = 1   # provisional assignment ("starred" zero)
    CANDIDATE = 2   # uncovered zero found while looking for a path ("primed")


Cell = Tuple[int, int]


class CoverState:
    """
    Mutable per-solve bookkeeping sized to N.

    All lookups scan in index order and return the first hit, which keeps the
    returned assignment deterministic.
    """

    def __init__(self, n: int):
        self.n = n
        self.marks = np.full((n, n), Mark.UNMARKED, dtype=np.int8)
        self.row_covered = np.zeros(n, dtype=bool)
        self.col_covered = np.zeros(n, dtype=bool)
        self.origin: Optional[Cell] = None
        self.path: List[Cell] = []

    def clear_covers(self) -> None:
        self.row_covered[:] = False
        self.col_covered[:] = False

    def erase_candidates(self) -> None:
        self.marks[self.marks == Mark.CANDIDATE] = Mark.UNMARKED

    def cover(self, row: int, col: int) -> None:
        self.row_covered[row] = True
        self.col_covered[col] = True

    def _first(self, hits: np.ndarray) -> int:
        idx = np.flatnonzero(hits)
        return int(idx[0]) if idx.size else -1

    def tentative_in_row(self, row: int) -> int:
        """Column of the tentative mark in ``row``, or -1."""
        return self._first(self.marks[row] == Mark.TENTATIVE)

    def tentative_in_col(self, col: int) -> int:
        """Row of the tentative mark in ``col``, or -1."""
        return self._first(self.marks[:, col] == Mark.TENTATIVE)

    def candidate_in_row(self, row: int) -> int:
        """Column of the candidate mark in ``row``, or -1."""
        return self._first(self.marks[row] == Mark.CANDIDATE)

    def cover_tentative_columns(self) -> int:
        """Cover every column holding a tentative mark; return the covered count."""
        self.col_covered |= (self.marks == Mark.TENTATIVE).any(axis=0)
        return int(self.col_covered.sum())

    def tentative_cells(self) -> List[Cell]:
        """Tentative marks in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.marks == Mark.TENTATIVE)]

    def build_path(self) -> List[Cell]:
        """
        Alternating path from the recorded origin: candidate, tentative in the
        same column, candidate in that row, and so on until a column has no
        tentative mark.
        """
        if self.origin is None:
            raise RuntimeError("Augmenting path requested without an origin")

        path = [self.origin]
        while True:
            row = self.tentative_in_col(path[-1][1])
            if row < 0:
                break
            path.append((row, path[-1][1]))
            col = self.candidate_in_row(row)
            if col < 0:
                # Every covered row got its candidate before being covered.
                raise RuntimeError(f"Row {row} holds a tentative mark but no candidate")
            path.append((row, col))
        self.path = path
        return path

    def flip_path(self) -> None:
        """Tentative marks on the path become unmarked, candidates become tentative."""
        for r, c in self.path:
            if self.marks[r, c] == Mark.TENTATIVE:
                self.marks[r, c] = Mark.UNMARKED
            else:
                self.marks[r, c] = Mark.TENTATIVE
        self.path = []
        self.origin = None


__all__ = ["Mark", "Cell", "CoverState"]
