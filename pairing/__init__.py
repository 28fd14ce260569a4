"""
Pairing Module

Minimum-cost one-to-one pairing between two groups of items:
- Hungarian engine (reduction, zero-graph matching, Konig covers, adjustment)
- SciPy linear_sum_assignment and LAP lapjv references
- Greedy and random baselines
- Seeded cost matrix generators

Plus the tooling around them: correctness verification, repeated-run
timing and structured experiment logging.
"""

from .config import SolverConfig, DEFAULT_CONFIG
from .errors import (
    PairingError,
    MalformedCostMatrixError,
    InfeasibleTargetError,
    IterationLimitError,
)
from .reduction import validate_costs, pad_to_square, reduce_matrix, zero_mask
from .matching import UNMATCHED, Matching, Cover, max_matching, min_vertex_cover
from .hungarian import (
    UNPAIRED,
    HungarianResult,
    HungarianSolver,
    adjust_uncovered,
    solve_reduced,
    extract_assignment,
    compute_assignments,
    solve_assignment,
    assignment_cost,
)
from .scipy_solver import SciPySolver
from .lap_solver import LAPSolver
from .baselines import greedy_assignment, random_assignment
from .verification import check_assignment, verify_solver_correctness
from .timing import time_solver_rigorous
from .generators import (
    COST_FAMILIES,
    generate_costs,
    generate_uniform_costs,
    generate_integer_costs,
    generate_tie_heavy_costs,
    generate_identity_like_costs,
    generate_worst_case_costs,
    generate_clustered_costs,
    generate_constant_costs,
)
from .logging_system import BenchmarkLogger, get_latest_experiment, list_experiments, load_experiment

__all__ = [
    'SolverConfig',
    'DEFAULT_CONFIG',
    'PairingError',
    'MalformedCostMatrixError',
    'InfeasibleTargetError',
    'IterationLimitError',
    'validate_costs',
    'pad_to_square',
    'reduce_matrix',
    'zero_mask',
    'UNMATCHED',
    'Matching',
    'Cover',
    'max_matching',
    'min_vertex_cover',
    'UNPAIRED',
    'HungarianResult',
    'HungarianSolver',
    'adjust_uncovered',
    'solve_reduced',
    'extract_assignment',
    'compute_assignments',
    'solve_assignment',
    'assignment_cost',
    'SciPySolver',
    'LAPSolver',
    'greedy_assignment',
    'random_assignment',
    'check_assignment',
    'verify_solver_correctness',
    'time_solver_rigorous',
    'COST_FAMILIES',
    'generate_costs',
    'generate_uniform_costs',
    'generate_integer_costs',
    'generate_tie_heavy_costs',
    'generate_identity_like_costs',
    'generate_worst_case_costs',
    'generate_clustered_costs',
    'generate_constant_costs',
    'BenchmarkLogger',
    'get_latest_experiment',
    'list_experiments',
    'load_experiment',
]
