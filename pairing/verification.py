"""
Verification Module

Correctness checks for pairing solvers: structural validity of an assignment
and agreement of the Hungarian engine with the SciPy and LAP references.
"""

import numpy as np
from typing import Any, Dict, Optional

from .hungarian import UNPAIRED, HungarianSolver, assignment_cost
from .lap_solver import LAPSolver
from .scipy_solver import SciPySolver


def check_assignment(C: np.ndarray, assignment: np.ndarray,
                     expected_pairs: Optional[int] = None) -> bool:
    """
    Assert that an assignment is a valid pairing for C.

    - length equals the number of rows
    - every paired column is inside the unpadded column range
    - no column is used twice
    - optionally, exactly ``expected_pairs`` rows are paired
    """
    C = np.asarray(C)
    n_rows, n_cols = C.shape
    assignment = np.asarray(assignment)

    if assignment.shape != (n_rows,):
        raise AssertionError(f"assignment has shape {assignment.shape}, expected ({n_rows},)")
    paired = assignment[assignment != UNPAIRED]
    if np.any(paired < 0) or np.any(paired >= n_cols):
        raise AssertionError(f"assignment references columns outside 0..{n_cols - 1}: {paired}")
    if len(np.unique(paired)) != len(paired):
        raise AssertionError("assignment pairs a column with more than one row")
    if expected_pairs is not None and len(paired) != expected_pairs:
        raise AssertionError(f"{len(paired)} pairs formed, expected {expected_pairs}")
    return True


def verify_solver_correctness(C: np.ndarray, tolerance: float = 1e-6) -> Dict[str, Any]:
    """
    Verify that the Hungarian engine and both references reach the same cost.

    Args:
        C: Cost matrix
        tolerance: Per-pair numerical tolerance for cost comparison (the
            zero test of the Hungarian engine allows the same slack per cell)

    Returns:
        Report with per-solver costs, the spread and an ``agree`` flag
    """
    C = np.asarray(C, dtype=np.float64)
    solvers = [HungarianSolver(), SciPySolver(), LAPSolver()]

    costs = {}
    pairs = {}
    for solver in solvers:
        rows, cols, costs[solver.name] = solver.solve(C)
        pairs[solver.name] = (rows, cols)

    hungarian_assignment = np.full(C.shape[0], UNPAIRED, dtype=np.int64)
    rows, cols = pairs["Hungarian"]
    hungarian_assignment[rows] = cols
    check_assignment(C, hungarian_assignment, expected_pairs=min(C.shape))

    spread = max(costs.values()) - min(costs.values())
    scale = max(1.0, abs(costs["SciPy"]))
    agree = spread <= tolerance * min(C.shape) * scale

    if not agree:
        print(f"Verification failed on {C.shape[0]}x{C.shape[1]}: costs={costs}")

    return {
        "agree": agree,
        "costs": costs,
        "spread": spread,
        "hungarian_cost": assignment_cost(C, hungarian_assignment),
    }
