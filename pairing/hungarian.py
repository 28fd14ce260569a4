"""
Hungarian Pairing Module

Minimum-cost one-to-one pairing between two finite groups. The cost matrix is
padded to a square with a sentinel cost, reduced, and then driven through the
zero-cover augmentation loop until the zero graph holds enough pairs:

    validate -> pad -> reduce -> {match -> cover -> adjust}* -> extract

All state is local to one call, so independent solves may run concurrently.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, SolverConfig
from .errors import InfeasibleTargetError, IterationLimitError
from .matching import UNMATCHED, Cover, Matching, max_matching, min_vertex_cover
from .reduction import pad_to_square, reduce_matrix, validate_costs, zero_mask

UNPAIRED = UNMATCHED


@dataclass
class HungarianResult:
    """Final state of the augmentation loop."""

    matrix: np.ndarray
    matching: Matching
    iterations: int
    history: List[int] = field(default_factory=list)

    @property
    def matching_size(self) -> int:
        return self.matching.size


def adjust_uncovered(matrix: np.ndarray, cover: Cover,
                     padding_cost: float = DEFAULT_CONFIG.padding_cost) -> float:
    """
    Shift the smallest uncovered real cost into the covered region, in place.

    Subtracts delta from every uncovered cell, adds it to every cell covered
    by both a row and a column, and leaves singly covered cells unchanged.
    Sentinel cells are never changed.

    Returns:
        delta: The smallest uncovered value

    Raises:
        InfeasibleTargetError: No uncovered real cell exists
    """
    real = matrix < padding_cost
    uncovered = ~cover.rows[:, None] & ~cover.cols[None, :] & real
    if not uncovered.any():
        raise InfeasibleTargetError(
            "every real cell is covered; the target pairing count is unreachable"
        )
    delta = float(matrix[uncovered].min())
    doubly_covered = cover.rows[:, None] & cover.cols[None, :] & real
    matrix[uncovered] -= delta
    matrix[doubly_covered] += delta
    return delta


def solve_reduced(reduced: np.ndarray, target_pairs: int,
                  config: SolverConfig = DEFAULT_CONFIG) -> HungarianResult:
    """
    Run the zero-cover augmentation loop on a padded, reduced matrix.

    Each round builds the zero mask, extends the previous matching to a
    maximum one and stops once it reaches ``target_pairs``. Otherwise the
    minimum vertex cover of the zero graph decides the next adjustment.
    Matched cells keep their zero through an adjustment, so the matching is
    carried over between rounds and its size never decreases.

    Args:
        reduced: Square matrix after reduce_matrix
        target_pairs: Number of pairs required on the zero graph
        config: Shared tolerance, sentinel and optional round cap

    Returns:
        HungarianResult with the final matrix and matching
    """
    M = np.array(reduced, dtype=np.float64, copy=True)
    n = M.shape[0]
    matching = Matching.empty(n, n)
    history = []
    iterations = 0

    while True:
        mask = zero_mask(M, config.tolerance)
        matching = max_matching(mask, initial=matching)
        history.append(matching.size)
        if matching.size >= target_pairs:
            break
        if config.max_iterations is not None and iterations >= config.max_iterations:
            raise IterationLimitError(iterations, matching.size, target_pairs)

        cover = min_vertex_cover(mask, matching)
        adjust_uncovered(M, cover, config.padding_cost)
        iterations += 1

    return HungarianResult(matrix=M, matching=matching, iterations=iterations, history=history)


def extract_assignment(mask: np.ndarray, n_rows: int, n_cols: int,
                       matching: Optional[Matching] = None) -> np.ndarray:
    """
    Project a maximum zero matching onto the unpadded rows and columns.

    Args:
        mask: Final zero graph (padded, square)
        n_rows, n_cols: Original matrix shape
        matching: Matching to reuse; recomputed from the mask when omitted
            (over the unpadded block only)

    Returns:
        assignment: Length n_rows, column index or UNPAIRED per row
    """
    if matching is None:
        matching = max_matching(np.asarray(mask, dtype=bool)[:n_rows, :n_cols])
    assignment = np.full(n_rows, UNPAIRED, dtype=np.int64)
    for i, j in matching.pairs():
        if i < n_rows and j < n_cols and mask[i, j]:
            assignment[i] = j
    return assignment


def compute_assignments(costs, target_pairs: Optional[int] = None,
                        config: Optional[SolverConfig] = None) -> np.ndarray:
    """
    Minimum-cost pairing of row items with column items.

    Args:
        costs: n1 x n2 matrix of non-negative finite costs
        target_pairs: Number of pairs to form; defaults to the number of
            rows, capped at min(n1, n2)
        config: Solver settings; DEFAULT_CONFIG when omitted

    Returns:
        assignment: Length n1, assignment[i] = paired column or UNPAIRED
    """
    return solve_assignment(costs, target_pairs, config)[0]


def solve_assignment(costs, target_pairs: Optional[int] = None,
                     config: Optional[SolverConfig] = None) -> Tuple[np.ndarray, HungarianResult]:
    """Same as compute_assignments but also returns the loop's final state."""
    config = (config or DEFAULT_CONFIG).validate()
    C = validate_costs(costs, config)
    n1, n2 = C.shape

    if target_pairs is None:
        target_pairs = min(n1, n2)
    elif target_pairs < 1:
        raise ValueError(f"target_pairs must be >= 1, got {target_pairs}")

    # Work with rows <= columns: every row can then be matched, padding only
    # ever adds rows, and the column pass is valid only when square.
    transposed = n1 > n2
    work = C.T if transposed else C
    r, c = work.shape

    padded = pad_to_square(work, config.padding_cost)
    reduced = reduce_matrix(padded, config.padding_cost, columns=(r == c))
    result = solve_reduced(reduced, target_pairs, config)

    mask = zero_mask(result.matrix, config.tolerance)
    oriented = extract_assignment(mask, r, c, matching=result.matching)

    if not transposed:
        return oriented, result

    assignment = np.full(n1, UNPAIRED, dtype=np.int64)
    for col, row in enumerate(oriented):
        if row != UNPAIRED:
            assignment[row] = col
    return assignment, result


def assignment_cost(costs, assignment) -> float:
    """Total original cost of the paired cells."""
    C = np.asarray(costs, dtype=np.float64)
    assignment = np.asarray(assignment, dtype=np.int64)
    rows = np.flatnonzero(assignment != UNPAIRED)
    return float(C[rows, assignment[rows]].sum())


class HungarianSolver:
    """Zero-cover Hungarian solver with the same interface as the reference solvers."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.name = "Hungarian"
        self.config = (config or DEFAULT_CONFIG).validate()
        self.last_result: Optional[HungarianResult] = None

    def solve(self, C: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
        """
        Solve the pairing problem on C.

        Args:
            C: Cost matrix (rectangular allowed)

        Returns:
            rows, cols, cost: Paired row indices, their columns, total cost
        """
        C = np.asarray(C, dtype=np.float64)
        assignment, self.last_result = solve_assignment(C, config=self.config)
        rows = np.flatnonzero(assignment != UNPAIRED).astype(np.int64)
        cols = assignment[rows]
        return rows, cols, assignment_cost(C, assignment)

    def __call__(self, C: np.ndarray) -> Tuple[np.ndarray, np.ndarray, float]:
        """Allow using solver as callable."""
        return self.solve(C)
