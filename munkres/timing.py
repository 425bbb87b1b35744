"""
Timing Module

Timing methodology for comparing assignment solvers: warmups, repeated runs,
median-centred statistics.
"""

import time
import statistics
from typing import Callable, Dict, Union

from .errors import AssignmentFailedError


def time_solver_rigorous(solver_func: Callable, num_warmups: int = 5,
                         num_repeats: int = 30) -> Dict[str, Union[bool, float, int, str]]:
    """
    Time a solver:
    - Warmup runs to stabilize timing
    - Repeated timed runs
    - Reports median (robust to outliers)

    Args:
        solver_func: Function to time (should take no arguments)
        num_warmups: Number of warmup runs
        num_repeats: Number of timed runs

    Returns:
        Dictionary with timing statistics, or ``success=False`` and the error
        when the solver reports an infeasible instance
    """
    try:
        for _ in range(num_warmups):
            solver_func()
    except AssignmentFailedError as e:
        return {'success': False, 'error': str(e)}

    times = []
    for _ in range(num_repeats):
        start = time.perf_counter()
        try:
            solver_func()
        except AssignmentFailedError as e:
            return {'success': False, 'error': str(e)}
        times.append(time.perf_counter() - start)

    if len(times) == 0:
        return {'success': False, 'error': 'No timed runs requested'}

    return {
        'success': True,
        'median': statistics.median(times),
        'mean': statistics.mean(times),
        'std': statistics.stdev(times) if len(times) > 1 else 0.0,
        'min': min(times),
        'max': max(times),
        'num_samples': len(times)
    }
