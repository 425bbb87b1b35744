"""Hand-written assignment instances with known optimal totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from munkres import DISALLOWED

D = DISALLOWED


@dataclass(frozen=True)
class ReferenceCase:
    name: str
    matrix: Sequence[Sequence[object]]
    expected_min: float
    expected_max: float
    expected_pairs: Optional[Tuple[Tuple[int, int], ...]] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.matrix), len(self.matrix[0])


_NEGATIVE_WIDE = [
    [0.8768] + [-1.0] * 21,
    [-1.0, 0.8997] + [-1.0] * 20,
    [-1.0, -1.0, 0.8312] + [-1.0] * 19,
    [-1.0] * 22,
    [-1.0, -1.0, -1.0, 0.8771, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, 0.3786, 0.3098, -1.0, 0.2441]
    + [-1.0] * 8,
    [-1.0, -1.0, -1.0, -1.0, -1.0, -1.0, 0.8956, 0.5149, -1.0, -1.0, -1.0, -1.0, 0.3389]
    + [-1.0] * 9,
    [-1.0, -1.0, -1.0, -1.0, 0.8140] + [-1.0] * 17,
]


REFERENCE_CASES: List[ReferenceCase] = [
    ReferenceCase(
        name="square",
        matrix=[[400, 150, 400],
                [400, 450, 600],
                [300, 225, 300]],
        expected_min=850.0,
        expected_max=1225.0,
        expected_pairs=((0, 1), (1, 0), (2, 2)),
    ),
    ReferenceCase(
        name="rectangular",
        matrix=[[400, 150, 400, 1],
                [400, 450, 600, 2],
                [300, 225, 300, 3]],
        expected_min=452.0,
        expected_max=1225.0,
    ),
    ReferenceCase(
        name="square_small",
        matrix=[[10, 10, 8],
                [9, 8, 1],
                [9, 7, 4]],
        expected_min=18.0,
        expected_max=25.0,
    ),
    ReferenceCase(
        name="square_float",
        matrix=[[10.1, 10.2, 8.3],
                [9.4, 8.5, 1.6],
                [9.7, 7.8, 4.9]],
        expected_min=19.5,
        expected_max=26.5,
    ),
    ReferenceCase(
        name="rectangular_small",
        matrix=[[10, 10, 8, 11],
                [9, 8, 1, 1],
                [9, 7, 4, 10]],
        expected_min=15.0,
        expected_max=29.0,
    ),
    ReferenceCase(
        name="rectangular_float",
        matrix=[[10.01, 10.02, 8.03, 11.04],
                [9.05, 8.06, 1.07, 1.08],
                [9.09, 7.10, 4.11, 10.12]],
        expected_min=15.2,
        expected_max=29.19,
    ),
    ReferenceCase(
        name="forbidden",
        matrix=[[4, 5, 6, D],
                [1, 9, 12, 11],
                [D, 5, 4, D],
                [12, 12, 12, 10]],
        expected_min=20.0,
        expected_max=34.0,
    ),
    ReferenceCase(
        name="forbidden_float",
        matrix=[[4.001, 5.002, 6.003, D],
                [1.004, 9.005, 12.006, 11.007],
                [D, 5.008, 4.009, D],
                [12.01, 12.011, 12.012, 10.013]],
        expected_min=20.028,
        expected_max=34.028,
    ),
    ReferenceCase(
        name="forced_diagonal",
        matrix=[[1, D, D, D],
                [D, 2, D, D],
                [D, D, 3, D],
                [D, D, D, 4]],
        expected_min=10.0,
        expected_max=10.0,
        expected_pairs=((0, 0), (1, 1), (2, 2), (3, 3)),
    ),
    ReferenceCase(
        name="forced_diagonal_float",
        matrix=[[1.1, D, D, D],
                [D, 2.2, D, D],
                [D, D, 3.3, D],
                [D, D, D, 4.4]],
        expected_min=11.0,
        expected_max=11.0,
        expected_pairs=((0, 0), (1, 1), (2, 2), (3, 3)),
    ),
    ReferenceCase(
        name="negative_wide",
        matrix=_NEGATIVE_WIDE,
        expected_min=-7.0,
        expected_max=4.1944,
    ),
    ReferenceCase(
        name="negative_tall",
        matrix=[row[:2] for row in _NEGATIVE_WIDE[:3]] + [[-1.0, -1.0]] * 4,
        expected_min=-2.0,
        expected_max=1.7765,
    ),
]


def get_case(name: str) -> ReferenceCase:
    for case in REFERENCE_CASES:
        if case.name == name:
            return case
    raise KeyError(f"Unknown reference case '{name}'. Known cases: {[c.name for c in REFERENCE_CASES]}")


__all__ = ["ReferenceCase", "REFERENCE_CASES", "get_case"]
