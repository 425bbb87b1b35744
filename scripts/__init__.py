"""
Scripts Module

Command-line entry points: the reference-case runner and the solver benchmark.
"""

__all__ = [
    'run_reference_cases',
    'benchmark',
]
