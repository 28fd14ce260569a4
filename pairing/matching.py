"""
Bipartite Matching Module

Maximum matching on the zero graph (Kuhn's augmenting paths) and the
minimum vertex cover derived from it through Konig's theorem.

Rows are the left side of the graph and columns the right side. Both
searches visit rows and columns in ascending index order, so results are
reproducible for a given mask.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

UNMATCHED = -1


@dataclass
class Matching:
    """Partial one-to-one mapping stored as two inverse arrays."""

    row_to_col: np.ndarray
    col_to_row: np.ndarray

    @classmethod
    def empty(cls, n_rows: int, n_cols: int) -> "Matching":
        return cls(
            row_to_col=np.full(n_rows, UNMATCHED, dtype=np.int64),
            col_to_row=np.full(n_cols, UNMATCHED, dtype=np.int64),
        )

    @property
    def size(self) -> int:
        return int(np.count_nonzero(self.row_to_col != UNMATCHED))

    def copy(self) -> "Matching":
        return Matching(self.row_to_col.copy(), self.col_to_row.copy())

    def pairs(self) -> Iterator[Tuple[int, int]]:
        for i, j in enumerate(self.row_to_col):
            if j != UNMATCHED:
                yield i, int(j)

    def is_consistent(self) -> bool:
        """Check that both arrays describe the same injective mapping."""
        for i, j in enumerate(self.row_to_col):
            if j != UNMATCHED and self.col_to_row[j] != i:
                return False
        for j, i in enumerate(self.col_to_row):
            if i != UNMATCHED and self.row_to_col[i] != j:
                return False
        return True


@dataclass
class Cover:
    """Covered rows and columns of a vertex cover of the zero graph."""

    rows: np.ndarray
    cols: np.ndarray

    @property
    def size(self) -> int:
        return int(self.rows.sum() + self.cols.sum())

    def covers(self, mask: np.ndarray) -> bool:
        """True if every edge of the mask touches a covered row or column."""
        uncovered = mask & ~self.rows[:, None] & ~self.cols[None, :]
        return not uncovered.any()


def _adjacency(mask: np.ndarray) -> List[np.ndarray]:
    return [np.flatnonzero(row) for row in mask]


def _augment(root: int, adjacency: List[np.ndarray], matching: Matching) -> bool:
    """
    Search one augmenting path from an unmatched row and flip it.

    Depth-first with an explicit stack; the visited-column set lives only for
    this root.
    """
    row_to_col = matching.row_to_col
    col_to_row = matching.col_to_row
    visited = np.zeros(len(col_to_row), dtype=bool)
    reached_from = {}
    stack = [(root, iter(adjacency[root]))]

    while stack:
        row, candidates = stack[-1]
        for col in candidates:
            if visited[col]:
                continue
            visited[col] = True
            reached_from[col] = row
            owner = col_to_row[col]
            if owner == UNMATCHED:
                # Flip the alternating path back to the root.
                while col != UNMATCHED:
                    r = reached_from[col]
                    previous = row_to_col[r]
                    row_to_col[r] = col
                    col_to_row[col] = r
                    col = previous
                return True
            stack.append((owner, iter(adjacency[owner])))
            break
        else:
            stack.pop()
    return False


def max_matching(mask: np.ndarray, initial: Optional[Matching] = None) -> Matching:
    """
    Maximum matching of the bipartite zero graph.

    Args:
        mask: Boolean n_rows x n_cols zero graph
        initial: Optional matching on the same graph to extend. Augmentation
            never unmatches a column, so every column matched in ``initial``
            stays matched.

    Returns:
        A new Matching; ``initial`` is not modified
    """
    mask = np.asarray(mask, dtype=bool)
    n_rows, n_cols = mask.shape
    matching = initial.copy() if initial is not None else Matching.empty(n_rows, n_cols)
    adjacency = _adjacency(mask)

    for row in range(n_rows):
        if matching.row_to_col[row] == UNMATCHED and len(adjacency[row]):
            _augment(row, adjacency, matching)
    return matching


def min_vertex_cover(mask: np.ndarray, matching: Matching) -> Cover:
    """
    Konig construction of a minimum vertex cover from a maximum matching.

    Alternating paths are explored breadth-first from every unmatched row:
    zero edges lead to columns, matched edges lead back to rows. The cover is
    the unvisited rows together with the visited columns.
    """
    mask = np.asarray(mask, dtype=bool)
    n_rows, n_cols = mask.shape
    visited_rows = np.zeros(n_rows, dtype=bool)
    visited_cols = np.zeros(n_cols, dtype=bool)

    queue = deque()
    for i in range(n_rows):
        if matching.row_to_col[i] == UNMATCHED:
            visited_rows[i] = True
            queue.append(i)

    while queue:
        row = queue.popleft()
        for col in np.flatnonzero(mask[row] & ~visited_cols):
            visited_cols[col] = True
            owner = matching.col_to_row[col]
            if owner != UNMATCHED and not visited_rows[owner]:
                visited_rows[owner] = True
                queue.append(owner)

    return Cover(rows=~visited_rows, cols=visited_cols)
