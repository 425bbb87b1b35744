#!/usr/bin/env python3
"""
Munkres Benchmark
=================

Time the Munkres engine against SciPy and LAP on generated instances:
- Instances per family/size from the YAML config
- Warmups + repeated timed runs per solver (median reported)
- Cost agreement check against SciPy
- Every run recorded through BenchmarkLogger

Usage:
    python scripts/benchmark.py --config configs/benchmark.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

import numpy as np
from tqdm import tqdm

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from munkres import (
    AssignmentFailedError,
    BenchmarkConfig,
    BenchmarkLogger,
    LAPSolver,
    MunkresConfig,
    MunkresSolver,
    SciPySolver,
    generate_instance,
    load_config,
    time_solver_rigorous,
)

logger = logging.getLogger("benchmark")


def benchmark_instance(C: np.ndarray, mask: np.ndarray, solvers, num_warmups: int,
                       num_repeats: int) -> Dict[str, Dict[str, object]]:
    """Time every solver on one instance and record its cost."""
    results: Dict[str, Dict[str, object]] = {}
    for solver in solvers:
        timing = time_solver_rigorous(lambda: solver.solve(C, mask), num_warmups, num_repeats)
        if not timing["success"]:
            results[solver.name] = {"status": "failed", "time": 0.0, "cost": None, "error": timing["error"]}
            continue
        try:
            _, _, cost = solver.solve(C, mask)
        except AssignmentFailedError as e:
            results[solver.name] = {"status": "failed", "time": 0.0, "cost": None, "error": str(e)}
            continue
        results[solver.name] = {"status": "success", "time": timing["median"], "cost": cost}
    return results


def run_benchmark(solver_config: MunkresConfig, bench: BenchmarkConfig,
                  log_dir: Optional[str] = None) -> BenchmarkLogger:
    rng = np.random.default_rng(bench.seed)
    solvers = [MunkresSolver(solver_config), SciPySolver(), LAPSolver()]
    bench_logger = BenchmarkLogger(log_dir=log_dir or bench.log_dir, experiment_name=bench.experiment_name)

    jobs = [(family, n) for n in bench.sizes for family in bench.families]
    for family, n in tqdm(jobs, desc="instances"):
        n_cols = max(1, int(round(n * bench.rectangular_ratio)))
        C, mask = generate_instance(family, n, n_cols, rng=rng, forbidden_ratio=bench.forbidden_ratio)
        results = benchmark_instance(C, mask, solvers, bench.num_warmups, bench.num_repeats)

        reference = results.get("SciPy", {}).get("cost")
        for name, result in results.items():
            notes = result.get("error", "")
            if result["cost"] is not None and reference is not None:
                gap = abs(float(result["cost"]) - float(reference))
                if gap > 1e-6 * max(1, n):
                    notes = f"cost gap vs SciPy: {gap:.3e}"
                    logger.warning("%s on %s %dx%d: %s", name, family, n, n_cols, notes)
            bench_logger.log_result(
                instance=f"{family}_{n}x{n_cols}",
                rows=n,
                cols=n_cols,
                family=family,
                solver_name=name,
                time_seconds=float(result["time"]),
                cost=result["cost"],
                forbidden_ratio=bench.forbidden_ratio,
                status=str(result["status"]),
                notes=notes,
            )

    bench_logger.save_experiment()
    return bench_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--config", type=Path, default=Path("configs/benchmark.yaml"))
    parser.add_argument("--log-dir", type=str, default=None, help="Override benchmark.log_dir")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    solver_config, bench = load_config(args.config)
    largest = max(max(bench.sizes), int(round(max(bench.sizes) * bench.rectangular_ratio)))
    if largest > solver_config.max_dimension:
        raise SystemExit(
            f"Largest instance {largest} exceeds solver.max_dimension={solver_config.max_dimension}"
        )

    bench_logger = run_benchmark(solver_config, bench, log_dir=args.log_dir)
    print(bench_logger.generate_summary())


if __name__ == "__main__":
    main()
