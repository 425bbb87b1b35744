"""
Munkres Assignment Module

Covering-based Hungarian/Munkres solver for the rectangular assignment
problem with forbidden pairings:
- pad_matrix (rectangular -> square, padding never reaches the result)
- CoverState / StepEngine (explicit state machine, row-major tie-breaking)
- ResultExtractor (pairs and cost on the original matrix)
- Optional dual labels for diagnostics

Around the core:
- SciPy and LAP reference solvers with the same (rows, cols, cost) interface
- Cross-solver verification, timing and experiment logging
- Cost matrix generators
"""

from .config import DEFAULT_MAX_DIMENSION, DEFAULT_TOLERANCE, BenchmarkConfig, MunkresConfig, load_config
from .errors import AssignmentFailedError, FailureReason, InvalidCostMatrixError
from .padding import DISALLOWED, PaddedProblem, pad_matrix, to_cost_array
from .cover_state import CoverState, Mark
from .step_engine import Step, StepEngine
from .extraction import ResultExtractor, assignments_to_arrays, extract_assignments, total_cost
from .duals import DualLabels, DualTracker, check_dual_and_match, check_dual_feasible
from .solver import (
    MunkresSolver,
    SolveFailure,
    SolveSuccess,
    negate_costs,
    solve,
    solve_maximum,
)
from .formatting import format_matrix
from .scipy_solver import SciPySolver
from .lap_solver import LAPSolver
from .verification import VerificationReport, verify_solver_correctness
from .timing import time_solver_rigorous
from .generators import (
    GENERATOR_FAMILIES,
    generate_forbidden_mask,
    generate_identity_like_costs,
    generate_instance,
    generate_integer_costs,
    generate_metric_costs,
    generate_near_diagonal_costs,
    generate_tie_heavy_costs,
    generate_uniform_costs,
    generate_worst_case_costs,
)
from .logging_system import BenchmarkLogger, get_latest_experiment, list_experiments, load_experiment

__all__ = [
    'DEFAULT_MAX_DIMENSION',
    'DEFAULT_TOLERANCE',
    'BenchmarkConfig',
    'MunkresConfig',
    'load_config',
    'AssignmentFailedError',
    'FailureReason',
    'InvalidCostMatrixError',
    'DISALLOWED',
    'PaddedProblem',
    'pad_matrix',
    'to_cost_array',
    'CoverState',
    'Mark',
    'Step',
    'StepEngine',
    'ResultExtractor',
    'assignments_to_arrays',
    'extract_assignments',
    'total_cost',
    'DualLabels',
    'DualTracker',
    'check_dual_and_match',
    'check_dual_feasible',
    'MunkresSolver',
    'SolveFailure',
    'SolveSuccess',
    'negate_costs',
    'solve',
    'solve_maximum',
    'format_matrix',
    'SciPySolver',
    'LAPSolver',
    'VerificationReport',
    'verify_solver_correctness',
    'time_solver_rigorous',
    'GENERATOR_FAMILIES',
    'generate_forbidden_mask',
    'generate_identity_like_costs',
    'generate_instance',
    'generate_integer_costs',
    'generate_metric_costs',
    'generate_near_diagonal_costs',
    'generate_tie_heavy_costs',
    'generate_uniform_costs',
    'generate_worst_case_costs',
    'BenchmarkLogger',
    'get_latest_experiment',
    'list_experiments',
    'load_experiment',
]
