"""
LAP Solver Module

Reference interface for the LAP library's Jonker-Volgenant solver.
"""

import numpy as np
import lap
from typing import Tuple


class LAPSolver:
    """Wrapper for LAP library's lapjv algorithm."""

    def __init__(self):
        self.name = "LAP"

    def solve(self, C: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
        """
        Solve the pairing problem using lapjv.

        Rectangular matrices are extended to a square by lapjv itself
        (extend_cost=True); rows left without a column are dropped.

        Args:
            C: Cost matrix

        Returns:
            rows, cols, cost: Paired row indices, their columns, total cost
        """
        C = np.asarray(C, dtype=np.float64)
        _, x, _ = lap.lapjv(C, extend_cost=C.shape[0] != C.shape[1])

        x = np.asarray(x, dtype=np.int64)
        rows = np.flatnonzero(x >= 0).astype(np.int64)
        cols = x[rows]

        # Compute cost from assignment for consistency
        cost = C[rows, cols].sum()

        return rows, cols, float(cost)

    def __call__(self, C: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
        """Allow using solver as callable."""
        return self.solve(C)
