"""
Matrix Padding Module

Turns a caller's R x C cost matrix into the N x N problem the engine works on
(N = max(R, C)). Forbidden pairings travel as a boolean mask next to the
values, so no float is ever reserved to mean "not allowed".
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .config import DEFAULT_MAX_DIMENSION
from .errors import InvalidCostMatrixError


class _Disallowed:
    """Singleton marking a forbidden cell inside nested-list input."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DISALLOWED"

    def __reduce__(self):
        return (_Disallowed, ())


DISALLOWED = _Disallowed()

CostInput = Union[np.ndarray, Sequence[Sequence[object]]]


@dataclass
class PaddedProblem:
    """Square problem handed to the engine.

    ``working`` and ``working_forbidden`` drive the algorithm; synthetic padding
    is a plain zero there. ``original`` and ``original_forbidden`` drive
    extraction; padding is forbidden there so it never reaches the result.
    """

    working: np.ndarray
    working_forbidden: np.ndarray
    original: np.ndarray
    original_forbidden: np.ndarray
    rows: int
    cols: int

    @property
    def n(self) -> int:
        return self.working.shape[0]

    @property
    def padding(self) -> np.ndarray:
        """Mask of the synthetic cells outside the caller's rectangle."""
        mask = np.ones((self.n, self.n), dtype=bool)
        mask[: self.rows, : self.cols] = False
        return mask


def _from_nested(costs: Sequence[Sequence[object]]) -> Tuple[np.ndarray, np.ndarray]:
    try:
        rows = [list(row) for row in costs]
    except TypeError as exc:
        raise InvalidCostMatrixError("Cost matrix must be a 2-D sequence") from exc
    if not rows:
        raise InvalidCostMatrixError("Cost matrix has no rows")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise InvalidCostMatrixError("Cost matrix rows have different lengths")

    values = np.zeros((len(rows), width), dtype=np.float64)
    mask = np.zeros((len(rows), width), dtype=bool)
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell is DISALLOWED:
                mask[i, j] = True
                values[i, j] = np.inf
                continue
            try:
                values[i, j] = float(cell)
            except (TypeError, ValueError) as exc:
                raise InvalidCostMatrixError(f"Cell ({i}, {j}) is not a number: {cell!r}") from exc
    return values, mask


def to_cost_array(costs: CostInput, forbidden: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Normalise caller input into ``(values, forbidden_mask)``.

    A cell is forbidden if the caller's mask says so, if it holds
    :data:`DISALLOWED`, or if its value is ``+inf``.

    Raises:
        InvalidCostMatrixError: non 2-D input, NaN or ``-inf`` costs, or a mask
            whose shape does not match.
    """
    if isinstance(costs, np.ndarray) and costs.dtype != object:
        if costs.ndim != 2:
            raise InvalidCostMatrixError(f"Cost matrix must be 2-D, got {costs.ndim}-D")
        try:
            values = np.array(costs, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidCostMatrixError("Cost matrix must hold real numbers") from exc
        mask = np.zeros(values.shape, dtype=bool)
    else:
        values, mask = _from_nested(costs)

    if np.isnan(values).any():
        raise InvalidCostMatrixError("Cost matrix contains NaN")
    if np.isneginf(values).any():
        raise InvalidCostMatrixError("Cost matrix contains -inf")
    mask |= np.isposinf(values)

    if forbidden is not None:
        forbidden = np.asarray(forbidden, dtype=bool)
        if forbidden.shape != values.shape:
            raise InvalidCostMatrixError(
                f"Forbidden mask shape {forbidden.shape} does not match cost matrix {values.shape}"
            )
        mask |= forbidden

    return values, mask


def check_dimensions(rows: int, cols: int, max_dimension: int = DEFAULT_MAX_DIMENSION) -> None:
    if rows <= 0 or cols <= 0:
        raise InvalidCostMatrixError(f"Cost matrix must be at least 1x1, got {rows}x{cols}")
    if rows > max_dimension or cols > max_dimension:
        raise InvalidCostMatrixError(
            f"Cost matrix {rows}x{cols} exceeds the supported maximum dimension {max_dimension}"
        )


def pad_matrix(values: np.ndarray, forbidden: np.ndarray,
               rows: Optional[int] = None, cols: Optional[int] = None,
               max_dimension: int = DEFAULT_MAX_DIMENSION) -> PaddedProblem:
    """
    Build the square problem for the leading ``rows x cols`` block of ``values``.

    Args:
        values: Cost values, already validated by :func:`to_cost_array`
        forbidden: Boolean mask of disallowed pairings
        rows, cols: Caller's true dimensions (default: the full shape)
        max_dimension: Upper bound on ``rows`` and ``cols``

    Returns:
        PaddedProblem with padding set to 0 in the working matrix and
        forbidden in the original matrix.
    """
    total_rows, total_cols = values.shape
    rows = total_rows if rows is None else int(rows)
    cols = total_cols if cols is None else int(cols)
    check_dimensions(rows, cols, max_dimension)
    if rows > total_rows or cols > total_cols:
        raise InvalidCostMatrixError(
            f"Requested {rows}x{cols} block from a {total_rows}x{total_cols} matrix"
        )

    n = max(rows, cols)
    block = values[:rows, :cols]
    block_forbidden = forbidden[:rows, :cols]

    working = np.zeros((n, n), dtype=np.float64)
    working_forbidden = np.zeros((n, n), dtype=bool)
    original = np.full((n, n), np.inf, dtype=np.float64)
    original_forbidden = np.ones((n, n), dtype=bool)

    working[:rows, :cols] = np.where(block_forbidden, np.inf, block)
    working_forbidden[:rows, :cols] = block_forbidden
    original[:rows, :cols] = np.where(block_forbidden, np.inf, block)
    original_forbidden[:rows, :cols] = block_forbidden

    return PaddedProblem(
        working=working,
        working_forbidden=working_forbidden,
        original=original,
        original_forbidden=original_forbidden,
        rows=rows,
        cols=cols,
    )


__all__ = [
    "DISALLOWED",
    "PaddedProblem",
    "to_cost_array",
    "check_dimensions",
    "pad_matrix",
]
