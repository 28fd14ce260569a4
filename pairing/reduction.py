"""
Matrix Reduction Module

Input validation, square padding and row/column minimum subtraction for the
pairing engine. Padding cells carry the sentinel ``padding_cost`` and are
never touched by a reduction, so they stay effectively infinite.
"""

import numpy as np

from .config import DEFAULT_CONFIG, SolverConfig
from .errors import MalformedCostMatrixError


def validate_costs(costs, config: SolverConfig = DEFAULT_CONFIG) -> np.ndarray:
    """
    Coerce a cost table to a float64 matrix and reject malformed input.

    Args:
        costs: 2D array-like of non-negative finite costs
        config: Solver settings (padding sentinel bounds the legal costs)

    Returns:
        C: Fresh float64 copy of the costs
    """
    if isinstance(costs, np.ndarray):
        C = costs
    else:
        rows = list(costs)
        if not rows:
            raise MalformedCostMatrixError("cost matrix is empty")
        try:
            widths = {len(row) for row in rows}
        except TypeError as e:
            raise MalformedCostMatrixError("cost matrix must be a sequence of rows") from e
        if len(widths) != 1:
            raise MalformedCostMatrixError(f"ragged cost matrix, row lengths {sorted(widths)}")
        C = rows

    try:
        C = np.array(C, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise MalformedCostMatrixError(f"cost matrix is not numeric: {e}") from e

    if C.ndim != 2:
        raise MalformedCostMatrixError(f"cost matrix must be 2D, got shape {C.shape}")
    if C.size == 0:
        raise MalformedCostMatrixError(f"cost matrix is empty, shape {C.shape}")
    if not np.all(np.isfinite(C)):
        raise MalformedCostMatrixError("cost matrix contains NaN or infinite entries")
    if C.min() < 0:
        raise MalformedCostMatrixError(f"negative cost {C.min():.6g} in cost matrix")
    if C.max() >= config.padding_cost:
        raise MalformedCostMatrixError(
            f"cost {C.max():.6g} reaches the padding sentinel {config.padding_cost:.6g}"
        )
    return C


def pad_to_square(C: np.ndarray, padding_cost: float = DEFAULT_CONFIG.padding_cost) -> np.ndarray:
    """Embed an n1 x n2 matrix in the top-left corner of an n x n sentinel matrix."""
    n1, n2 = C.shape
    n = max(n1, n2)
    padded = np.full((n, n), padding_cost, dtype=np.float64)
    padded[:n1, :n2] = C
    return padded


def _subtract_row_minima(M: np.ndarray, real: np.ndarray) -> None:
    for i in range(M.shape[0]):
        row_real = real[i]
        if not row_real.any():
            continue
        M[i, row_real] -= M[i, row_real].min()


def reduce_matrix(matrix: np.ndarray,
                  padding_cost: float = DEFAULT_CONFIG.padding_cost,
                  columns: bool = True) -> np.ndarray:
    """
    Subtract each row's minimum, then each column's minimum, over real cells.

    Sentinel cells (>= padding_cost) are skipped and rows or columns made only
    of sentinels are left unchanged. The input is not modified.

    Args:
        matrix: Square (padded) cost matrix
        padding_cost: Sentinel marking padding cells
        columns: Whether to run the column pass. Column minima may only be
            subtracted when every column has to be matched.

    Returns:
        Reduced copy of the matrix
    """
    M = np.array(matrix, dtype=np.float64, copy=True)
    real = M < padding_cost

    _subtract_row_minima(M, real)
    if columns:
        _subtract_row_minima(M.T, real.T)
    return M


def zero_mask(matrix: np.ndarray, tolerance: float = DEFAULT_CONFIG.tolerance) -> np.ndarray:
    """Boolean zero graph: True where a cell is within tolerance of zero."""
    return np.abs(np.asarray(matrix, dtype=np.float64)) < tolerance
