"""Naive pairing baselines used to sanity-check the optimal solvers.

Neither routine is optimal. They give an upper bound that an optimal solver
must never exceed on the same cost matrix.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .hungarian import UNPAIRED


def greedy_assignment(
    C: np.ndarray,
    *,
    row_order: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Row-wise greedy pairing: each row in turn takes its cheapest free column.

    Rows processed after every column is taken stay UNPAIRED.
    """

    C = np.asarray(C, dtype=np.float64)
    n_rows, n_cols = C.shape
    order = np.arange(n_rows) if row_order is None else np.asarray(row_order)

    remaining_cols = set(range(n_cols))
    assignment = np.full(n_rows, UNPAIRED, dtype=np.int64)

    for i in order:
        if not remaining_cols:
            break
        candidate_cols = np.array(sorted(remaining_cols))
        best_idx = candidate_cols[np.argmin(C[i, candidate_cols])]
        assignment[i] = best_idx
        remaining_cols.remove(int(best_idx))

    return assignment


def random_assignment(
    C: np.ndarray,
    *,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Uniformly random full pairing of min(n_rows, n_cols) rows."""

    C = np.asarray(C, dtype=np.float64)
    n_rows, n_cols = C.shape
    rng = rng or np.random.default_rng()

    k = min(n_rows, n_cols)
    rows = rng.permutation(n_rows)[:k]
    cols = rng.permutation(n_cols)[:k]

    assignment = np.full(n_rows, UNPAIRED, dtype=np.int64)
    assignment[rows] = cols
    return assignment


__all__ = [
    "greedy_assignment",
    "random_assignment",
]
