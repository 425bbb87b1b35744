"""Processing helpers for real-world assignment instances (OR-Library)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List

import numpy as np


@dataclass
class RealInstance:
    name: str
    cost: np.ndarray
    source: str


def parse_or_library_assign(path: str | Path) -> List[np.ndarray]:
    """Parse OR-Library ``assign*.txt`` files into dense cost matrices.

    The format is the problem size ``n`` followed by ``n * n`` costs in
    row-major order; several matrices may be concatenated after one header.
    """

    path = Path(path)
    raw = path.read_text().split()
    if not raw:
        raise ValueError(f"File '{path}' is empty")

    n = int(raw[0])
    values = list(map(float, raw[1:]))
    block = n * n
    if block == 0 or len(values) % block != 0:
        raise ValueError(f"Unexpected OR-Library layout in '{path}'")

    return [
        np.array(values[offset : offset + block], dtype=np.float64).reshape(n, n)
        for offset in range(0, len(values), block)
    ]


def iter_real_instances(or_library_paths: Iterable[str | Path] | None = None) -> Iterator[RealInstance]:
    """Yield real-world cost matrices from the given OR-Library files."""

    for path in or_library_paths or ():
        for idx, matrix in enumerate(parse_or_library_assign(path)):
            yield RealInstance(
                name=f"{Path(path).stem}_{idx}",
                cost=matrix,
                source="or_library",
            )


def normalize_cost_matrix(cost: np.ndarray) -> np.ndarray:
    """Normalize matrix to [0,1] range (without touching infinities)."""

    finite_mask = np.isfinite(cost)
    if not finite_mask.any():
        return cost.astype(np.float64)
    finite_values = cost[finite_mask]
    mn = float(finite_values.min())
    mx = float(finite_values.max())
    if mx == mn:
        return np.where(finite_mask, 0.0, cost).astype(np.float64)
    scaled = (cost - mn) / (mx - mn)
    return np.where(finite_mask, scaled, cost).astype(np.float64)


__all__ = [
    "RealInstance",
    "parse_or_library_assign",
    "iter_real_instances",
    "normalize_cost_matrix",
]
