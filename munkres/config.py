"""Solver and benchmark configuration, loadable from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml


DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_DIMENSION = 100


@dataclass
class MunkresConfig:
    """Knobs of a single solve.

    Attributes:
        tolerance: Absolute tolerance for treating a working-matrix cell as zero.
        max_dimension: Largest accepted row or column count.
        max_iterations: State-transition cap; ``None`` derives it from N.
        track_duals: Keep row/column dual labels alongside the run.
    """

    tolerance: float = DEFAULT_TOLERANCE
    max_dimension: int = DEFAULT_MAX_DIMENSION
    max_iterations: Optional[int] = None
    track_duals: bool = False

    def __post_init__(self):
        if not self.tolerance > 0.0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if int(self.max_dimension) < 1:
            raise ValueError(f"max_dimension must be >= 1, got {self.max_dimension}")
        if self.max_iterations is not None and int(self.max_iterations) < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")

    def iteration_cap(self, n: int) -> int:
        """Return the transition cap for an N x N problem."""
        if self.max_iterations is not None:
            return int(self.max_iterations)
        return 16 * n * n + 64


@dataclass
class BenchmarkConfig:
    sizes: List[int] = field(default_factory=lambda: [8, 16, 32, 64])
    families: List[str] = field(default_factory=lambda: ["uniform", "near_diagonal", "metric"])
    rectangular_ratio: float = 1.0
    forbidden_ratio: float = 0.0
    num_warmups: int = 2
    num_repeats: int = 5
    seed: int = 0
    log_dir: str = "logs"
    experiment_name: Optional[str] = None


def _build(cls, section: Optional[Dict[str, Any]], name: str):
    section = section or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a mapping, got {type(section).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown keys in '{name}' section: {unknown}")
    return cls(**section)


def load_config(path: str | Path) -> Tuple[MunkresConfig, BenchmarkConfig]:
    """Read a YAML file with optional ``solver`` and ``benchmark`` sections."""

    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file '{path}' must contain a mapping at top level")

    unknown = sorted(set(raw) - {"solver", "benchmark"})
    if unknown:
        raise ValueError(f"Unknown top-level sections in '{path}': {unknown}")

    solver = _build(MunkresConfig, raw.get("solver"), "solver")
    bench = _build(BenchmarkConfig, raw.get("benchmark"), "benchmark")
    return solver, bench


__all__ = [
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_DIMENSION",
    "MunkresConfig",
    "BenchmarkConfig",
    "load_config",
]
