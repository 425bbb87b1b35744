#!/usr/bin/env python3
"""
Reference Case Runner
=====================

Solve every hand-written reference matrix, print the matches and compare the
total against the expected optimum (1e-3 tolerance). Exits non-zero when any
case fails.

Usage:
    python scripts/run_reference_cases.py
    python scripts/run_reference_cases.py --maximize --case forbidden
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from instances import REFERENCE_CASES, ReferenceCase, get_case
from munkres import MunkresConfig, format_matrix, solve, solve_maximum, to_cost_array


def run_case(case: ReferenceCase, maximize: bool, config: MunkresConfig, epsilon: float) -> bool:
    values, mask = to_cost_array(case.matrix)
    print(f"=== {case.name} ({case.shape[0]}x{case.shape[1]}) ===")
    print(format_matrix(values, mask, title="Cost matrix:"))

    runner = solve_maximum if maximize else solve
    result = runner(case.matrix, config=config)
    if not result.success:
        print(f"FAILED: {result.reason.value} ({result.message})\n")
        return False

    for r, c in result.assignments:
        print(f"  row {r} -> col {c}, cost: {values[r, c]:.4f}")

    expected = case.expected_max if maximize else case.expected_min
    print(f"Computed total = {result.total_cost:.4f}")
    print(f"Expected total = {expected:.4f}")
    ok = abs(result.total_cost - expected) < epsilon
    print("PASS\n" if ok else f"FAIL: expected {expected:.4f}, got {result.total_cost:.4f}\n")
    return ok


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--case", type=str, nargs="*", default=None, help="Only run these case names")
    parser.add_argument("--maximize", action="store_true", help="Maximise instead of minimise")
    parser.add_argument("--tolerance", type=float, default=1e-6, help="Zero tolerance of the engine")
    parser.add_argument("--epsilon", type=float, default=1e-3, help="Allowed deviation from the expected total")
    parser.add_argument("--verbose", action="store_true", help="Log every engine step")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cases = [get_case(name) for name in args.case] if args.case else REFERENCE_CASES
    config = MunkresConfig(tolerance=args.tolerance)

    failed = [case.name for case in cases if not run_case(case, args.maximize, config, args.epsilon)]
    print(f"{len(cases) - len(failed)}/{len(cases)} cases passed")
    if failed:
        print(f"Failed: {', '.join(failed)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
