"""
Minimum-cost assignment (Kuhn-Munkres / Hungarian method).

Provides the rectangular shortest-augmenting-path solver and the orientation
step every consumer goes through before solving.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from ..utils.logging_config import get_logger

logger = get_logger(__name__)

Array2D = np.ndarray


@dataclass(frozen=True)
class AssignmentResult:
    """Optimal row/column pairs of a cost matrix, in its own orientation."""

    rows: np.ndarray
    cols: np.ndarray
    total_cost: float
    transposed: bool = False


def as_cost_matrix(cost) -> Array2D:
    """
    Convert *cost* to a finite float64 matrix.

    Raises:
        ValueError: If the input is not 2-D or contains NaN/Inf
    """
    C = np.asarray(cost, dtype=np.float64)
    if C.ndim == 1 and C.size == 0:
        C = C.reshape(0, 0)
    if C.ndim != 2:
        raise ValueError(f"cost matrix must be 2-D, got shape {C.shape}")
    if not np.all(np.isfinite(C)):
        bad = np.argwhere(~np.isfinite(C))[0]
        raise ValueError(
            f"cost matrix must be finite; entry {tuple(int(x) for x in bad)} "
            f"is {C[tuple(bad)]}"
        )
    return C


def solve_assignment(cost) -> np.ndarray:
    """
    Assign every row of *cost* to a distinct column at minimum total cost.

    Shortest augmenting path method with row/column potentials: rows are
    inserted one at a time, each by a Dijkstra-like search over reduced costs
    ``cost[i, j] - u[i] - v[j]`` (kept non-negative by the potential updates),
    after which the augmenting path is flipped. Runs in O(R^2 * C).

    Ties between equal reduced costs go to the lowest column index, so the
    result is reproducible for identical input.

    Args:
        cost: Matrix of shape (R, C) with R <= C and finite entries

    Returns:
        Integer array of length R; ``assignment[i]`` is the column of row i

    Raises:
        ValueError: If the matrix is not 2-D, has R > C, or is not finite
    """
    C = as_cost_matrix(cost)
    n_rows, n_cols = C.shape
    if n_rows > n_cols:
        raise ValueError(
            f"cost matrix must not have more rows than columns, got "
            f"{n_rows}x{n_cols}; transpose it or use linear_assignment()"
        )
    if n_rows == 0:
        return np.empty(0, dtype=np.intp)

    # Rows and columns are 1-based below; column 0 is the virtual root of
    # each search and row 0 means "free".
    u = np.zeros(n_rows + 1)
    v = np.zeros(n_cols + 1)
    col_owner = np.zeros(n_cols + 1, dtype=np.intp)
    way = np.zeros(n_cols + 1, dtype=np.intp)

    for i in range(1, n_rows + 1):
        col_owner[0] = i
        j0 = 0
        min_reduced = np.full(n_cols + 1, np.inf)
        used = np.zeros(n_cols + 1, dtype=bool)

        while True:
            used[j0] = True
            i0 = col_owner[j0]
            cols = np.flatnonzero(~used[1:]) + 1

            reduced = C[i0 - 1, cols - 1] - u[i0] - v[cols]
            better = reduced < min_reduced[cols]
            min_reduced[cols[better]] = reduced[better]
            way[cols[better]] = j0

            k = int(np.argmin(min_reduced[cols]))
            j1 = int(cols[k])
            delta = min_reduced[j1]

            u[col_owner[used]] += delta
            v[used] -= delta
            min_reduced[cols] -= delta

            j0 = j1
            if col_owner[j0] == 0:
                break

        # Flip the augmenting path back to the root
        while j0 != 0:
            j1 = way[j0]
            col_owner[j0] = col_owner[j1]
            j0 = j1

    assignment = np.empty(n_rows, dtype=np.intp)
    owned = np.flatnonzero(col_owner[1:])
    assignment[col_owner[owned + 1] - 1] = owned

    logger.debug(
        "Solved %dx%d assignment, total cost %.6g",
        n_rows,
        n_cols,
        float(C[np.arange(n_rows), assignment].sum()),
    )
    return assignment


def linear_assignment(cost) -> AssignmentResult:
    """
    Solve an assignment problem of any orientation.

    Matrices with more rows than columns are transposed before solving and
    the result is mapped back, so ``rows``/``cols`` always index *cost* as
    given. Pairs are returned sorted by row.

    Args:
        cost: Matrix of shape (R, C) with finite entries

    Returns:
        AssignmentResult with the chosen pairs and their total cost
    """
    C = as_cost_matrix(cost)
    transposed = C.shape[0] > C.shape[1]

    if transposed:
        chosen = solve_assignment(C.T)
        order = np.argsort(chosen, kind="stable")
        rows = chosen[order]
        cols = order.astype(np.intp)
    else:
        chosen = solve_assignment(C)
        rows = np.arange(C.shape[0], dtype=np.intp)
        cols = chosen

    total = float(C[rows, cols].sum())
    logger.debug(
        "Matched %d pairs on %dx%d matrix (transposed=%s)",
        len(rows),
        C.shape[0],
        C.shape[1],
        transposed,
    )
    return AssignmentResult(
        rows=rows, cols=cols, total_cost=total, transposed=transposed
    )


def assignment_cost(cost, assignment) -> float:
    """Total cost of *assignment* (``assignment[i]`` = column of row i)."""
    C = as_cost_matrix(cost)
    assignment = np.asarray(assignment, dtype=np.intp)
    return float(C[np.arange(len(assignment)), assignment].sum())
