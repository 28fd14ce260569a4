"""
SciPy Solver Module

Reference interface for SciPy's linear_sum_assignment algorithm.
"""

import numpy as np
import scipy.optimize
from typing import Tuple


class SciPySolver:
    """Wrapper for SciPy's linear_sum_assignment algorithm."""

    def __init__(self):
        self.name = "SciPy"

    def solve(self, C: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
        """
        Solve the pairing problem using SciPy's linear_sum_assignment.

        Args:
            C: Cost matrix (rectangular allowed)

        Returns:
            rows, cols, cost: Paired row indices, their columns, total cost
        """
        C = np.asarray(C, dtype=np.float64)
        rows, cols = scipy.optimize.linear_sum_assignment(C)
        cost = C[rows, cols].sum()
        return rows.astype(np.int64), cols.astype(np.int64), float(cost)

    def __call__(self, C: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
        """Allow using solver as callable."""
        return self.solve(C)
