"""Text rendering of cost matrices for logs and the reference-case report."""

from typing import Optional

import numpy as np


def format_matrix(matrix: np.ndarray, forbidden: Optional[np.ndarray] = None,
                  precision: int = 4, title: Optional[str] = None) -> str:
    """Render ``matrix`` row by row, writing ``D`` for forbidden cells."""
    matrix = np.asarray(matrix)
    if forbidden is None:
        forbidden = np.zeros(matrix.shape, dtype=bool)
    lines = [title] if title else []
    for i in range(matrix.shape[0]):
        cells = [
            "D" if forbidden[i, j] else f"{matrix[i, j]:.{precision}f}"
            for j in range(matrix.shape[1])
        ]
        lines.append("[" + ", ".join(cells) + "]")
    return "\n".join(lines)


def format_covers(row_covered: np.ndarray, col_covered: np.ndarray) -> str:
    rows = " ".join(str(int(x)) for x in row_covered)
    cols = " ".join(str(int(x)) for x in col_covered)
    return f"row covers: {rows} | column covers: {cols}"


__all__ = ["format_matrix", "format_covers"]
