"""
Problem Generators Module

Seeded cost matrix generators for testing and benchmarking pairing solvers.
Every generator takes a (rows, cols) shape so rectangular problems are as
easy to produce as square ones, and returns non-negative float64 costs.
"""

import numpy as np
from typing import Callable, Dict, Tuple

Shape = Tuple[int, int]


def _shape(shape) -> Shape:
    if isinstance(shape, (int, np.integer)):
        return int(shape), int(shape)
    n_rows, n_cols = shape
    return int(n_rows), int(n_cols)


def generate_uniform_costs(shape, seed: int = 42) -> np.ndarray:
    """
    Generate uniform[0,1] costs.

    Args:
        shape: n or (n_rows, n_cols)
        seed: Random seed for reproducibility
    """
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, 1.0, _shape(shape)).astype(np.float64)


def generate_integer_costs(shape, high: int = 100, seed: int = 42) -> np.ndarray:
    """Integer costs in [0, high) stored as floats; ties are common."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, high, size=_shape(shape)).astype(np.float64)


def generate_tie_heavy_costs(shape, bins: int = 3, seed: int = 42) -> np.ndarray:
    """Costs drawn from a handful of levels so many optimal pairings exist."""
    rng = np.random.default_rng(seed)
    return (rng.integers(0, max(1, bins), size=_shape(shape)) / max(1, bins)).astype(np.float64)


def generate_identity_like_costs(shape, diagonal_cost: float = 0.0,
                                 off_diagonal_cost: float = 1.0) -> np.ndarray:
    """Optimal pairing is the (leading) diagonal."""
    n_rows, n_cols = _shape(shape)
    C = np.full((n_rows, n_cols), off_diagonal_cost, dtype=np.float64)
    k = min(n_rows, n_cols)
    C[np.arange(k), np.arange(k)] = diagonal_cost
    return C


def generate_worst_case_costs(shape) -> np.ndarray:
    """Anti-diagonal structure: C[i, j] = |i - (n_cols - 1 - j)| + 1."""
    n_rows, n_cols = _shape(shape)
    i = np.arange(n_rows)[:, None]
    j = np.arange(n_cols)[None, :]
    return (np.abs(i - (n_cols - 1 - j)) + 1).astype(np.float64)


def generate_clustered_costs(shape, blocks: int = 4, noise: float = 0.1, seed: int = 42) -> np.ndarray:
    """Block-structured costs with cheaper in-cluster pairs."""
    n_rows, n_cols = _shape(shape)
    rng = np.random.default_rng(seed)
    C = rng.uniform(0.0, 1.0, size=(n_rows, n_cols))
    row_block = max(1, n_rows // max(1, blocks))
    col_block = max(1, n_cols // max(1, blocks))
    for b in range(blocks):
        r0, c0 = b * row_block, b * col_block
        r1 = n_rows if b == blocks - 1 else min(n_rows, (b + 1) * row_block)
        c1 = n_cols if b == blocks - 1 else min(n_cols, (b + 1) * col_block)
        C[r0:r1, c0:c1] -= 0.4
    C += noise * rng.normal(0.0, 1.0, size=(n_rows, n_cols))
    return np.maximum(C, 0.0).astype(np.float64)


def generate_constant_costs(shape, value: float = 7.0) -> np.ndarray:
    """Every pairing costs the same; reduction zeroes the whole matrix."""
    return np.full(_shape(shape), value, dtype=np.float64)


COST_FAMILIES: Dict[str, Callable[..., np.ndarray]] = {
    "uniform": generate_uniform_costs,
    "integer": generate_integer_costs,
    "tie": generate_tie_heavy_costs,
    "clustered": generate_clustered_costs,
    "identity": lambda shape, seed=42: generate_identity_like_costs(shape),
    "worst_case": lambda shape, seed=42: generate_worst_case_costs(shape),
    "constant": lambda shape, seed=42: generate_constant_costs(shape),
}


def generate_costs(family: str, shape, seed: int = 42) -> np.ndarray:
    """Dispatch to a named family from COST_FAMILIES."""
    try:
        generator = COST_FAMILIES[family]
    except KeyError:
        raise ValueError(f"Unknown cost family '{family}'. Available: {sorted(COST_FAMILIES)}") from None
    return generator(shape, seed=seed)
