"""
Problem Generators Module

Cost matrix generators for exercising and benchmarking assignment solvers.
Every generator accepts a rectangular shape and a numpy Generator so that a
single seed reproduces a whole benchmark run.
"""

import numpy as np
from typing import Callable, Dict, Optional, Tuple


ArrayGenerator = Callable[[int, int, np.random.Generator], np.ndarray]


def generate_uniform_costs(rows: int, cols: Optional[int] = None,
                           rng: Optional[np.random.Generator] = None,
                           low: float = 0.0, high: float = 1.0) -> np.ndarray:
    """
    Generate uniform[low, high) costs.

    Args:
        rows: Number of rows
        cols: Number of columns (default: square)
        rng: Random generator for reproducibility

    Returns:
        rows x cols cost matrix
    """
    cols = rows if cols is None else cols
    rng = rng or np.random.default_rng(42)
    return rng.uniform(low, high, (rows, cols)).astype(np.float64)


def generate_integer_costs(rows: int, cols: Optional[int] = None,
                           rng: Optional[np.random.Generator] = None,
                           high: int = 100) -> np.ndarray:
    """Integer-valued costs in [0, high), which produce many ties."""
    cols = rows if cols is None else cols
    rng = rng or np.random.default_rng(42)
    return rng.integers(0, high, size=(rows, cols)).astype(np.float64)


def generate_near_diagonal_costs(rows: int, cols: Optional[int] = None,
                                 rng: Optional[np.random.Generator] = None,
                                 noise_level: float = 0.1) -> np.ndarray:
    """
    Near-diagonal + noise costs for tracking/association scenarios.

    Cells close to the diagonal are cheap; noise keeps the optimum non-trivial.
    """
    cols = rows if cols is None else cols
    rng = rng or np.random.default_rng(42)
    n = max(rows, cols)
    i, j = np.indices((rows, cols))
    C = 0.1 + 0.9 * (np.abs(i - j) / n)
    C = C + rng.normal(0, noise_level, (rows, cols))
    return np.maximum(C, 0.001).astype(np.float64)


def generate_metric_costs(rows: int, cols: Optional[int] = None,
                          rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Euclidean distances between two random point clouds in [0, 100)^2."""
    cols = rows if cols is None else cols
    rng = rng or np.random.default_rng(42)
    left = rng.uniform(0, 100, (rows, 2))
    right = rng.uniform(0, 100, (cols, 2))
    return np.linalg.norm(left[:, None, :] - right[None, :, :], axis=-1).astype(np.float64)


def generate_tie_heavy_costs(rows: int, cols: Optional[int] = None,
                             rng: Optional[np.random.Generator] = None,
                             bins: int = 5, jitter: float = 1e-9) -> np.ndarray:
    """Few distinct cost levels plus jitter below the zero tolerance."""
    cols = rows if cols is None else cols
    rng = rng or np.random.default_rng(42)
    base = rng.integers(0, max(1, bins), size=(rows, cols)) / max(1, float(bins))
    noise = jitter * rng.uniform(0.0, 1.0, size=(rows, cols))
    return (base + noise).astype(np.float64)


def generate_worst_case_costs(n: int) -> np.ndarray:
    """Anti-diagonal structure: the cheapest cells all sit on the anti-diagonal."""
    i, j = np.indices((n, n))
    return (np.abs(i - (n - 1 - j)) + 1).astype(np.float64)


def generate_identity_like_costs(n: int, diagonal_cost: float = 0.0,
                                 off_diagonal_cost: float = 1.0) -> np.ndarray:
    """Optimal assignment is the identity."""
    C = np.full((n, n), off_diagonal_cost, dtype=np.float64)
    np.fill_diagonal(C, diagonal_cost)
    return C


def generate_forbidden_mask(rows: int, cols: Optional[int] = None,
                            rng: Optional[np.random.Generator] = None,
                            forbidden_ratio: float = 0.3,
                            feasible: bool = True) -> np.ndarray:
    """
    Random boolean mask of forbidden cells.

    With ``feasible`` set, one random complete matching of size min(rows, cols)
    is always kept allowed so the instance stays solvable.
    """
    cols = rows if cols is None else cols
    rng = rng or np.random.default_rng(42)
    mask = rng.random((rows, cols)) < forbidden_ratio
    if feasible:
        k = min(rows, cols)
        keep_rows = rng.permutation(rows)[:k]
        keep_cols = rng.permutation(cols)[:k]
        mask[keep_rows, keep_cols] = False
    return mask


GENERATOR_FAMILIES: Dict[str, ArrayGenerator] = {
    "uniform": lambda r, c, rng: generate_uniform_costs(r, c, rng),
    "integer": lambda r, c, rng: generate_integer_costs(r, c, rng),
    "near_diagonal": lambda r, c, rng: generate_near_diagonal_costs(r, c, rng),
    "metric": lambda r, c, rng: generate_metric_costs(r, c, rng),
    "tie": lambda r, c, rng: generate_tie_heavy_costs(r, c, rng),
}


def generate_instance(family: str, rows: int, cols: Optional[int] = None,
                      rng: Optional[np.random.Generator] = None,
                      forbidden_ratio: float = 0.0) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(costs, forbidden_mask)`` for a registered family."""
    if family not in GENERATOR_FAMILIES:
        raise KeyError(f"Unknown family '{family}'. Known families: {sorted(GENERATOR_FAMILIES)}")
    cols = rows if cols is None else cols
    rng = rng or np.random.default_rng(0)
    costs = GENERATOR_FAMILIES[family](rows, cols, rng)
    if forbidden_ratio > 0.0:
        mask = generate_forbidden_mask(rows, cols, rng, forbidden_ratio=forbidden_ratio)
    else:
        mask = np.zeros((rows, cols), dtype=bool)
    return costs, mask


__all__ = [
    "GENERATOR_FAMILIES",
    "generate_uniform_costs",
    "generate_integer_costs",
    "generate_near_diagonal_costs",
    "generate_metric_costs",
    "generate_tie_heavy_costs",
    "generate_worst_case_costs",
    "generate_identity_like_costs",
    "generate_forbidden_mask",
    "generate_instance",
]
