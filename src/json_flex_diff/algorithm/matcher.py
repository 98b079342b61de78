"""Element matching over a similarity matrix.

Two strategies pair left and right array elements:

- ``greedy_match``:  candidates at or above the threshold, discovered in
  left-major / right-minor order, stably sorted by similarity descending and
  claimed while both endpoints are free.  Deterministic, not globally optimal.
- ``optimal_match``: maximum total similarity via scipy's
  ``linear_sum_assignment``.  Below-threshold cells are forbidden with an
  ``np.inf`` cost that never reaches the solver (guard value formula:
  ``finite_max * 2.0 + 1.0``).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["Match", "greedy_match", "hungarian_match", "optimal_match"]


@dataclass(frozen=True, slots=True)
class Match:
    """One accepted pairing of a left element with a right element."""

    left_index: int
    right_index: int
    similarity: float


def greedy_match(similarities: np.ndarray, threshold: float) -> list[Match]:
    """Pair elements greedily by descending similarity.

    Args:
        similarities: 2-D matrix of shape ``(m, n)`` with scores in [0, 1].
        threshold:    Minimum score for a pair to be considered.  A pair
            scoring exactly the threshold is a candidate.

    Returns:
        Accepted matches in acceptance order (highest similarity first; ties
        in discovery order).
    """
    if similarities.size == 0:
        return []

    # np.nonzero walks the matrix in C order: left-major, right-minor
    rows, cols = np.nonzero(similarities >= threshold)
    scores = similarities[rows, cols]
    order = np.argsort(-scores, kind="stable")

    used_left: set[int] = set()
    used_right: set[int] = set()
    matches: list[Match] = []

    for k in order.tolist():
        i = int(rows[k])
        j = int(cols[k])
        if i in used_left or j in used_right:
            continue
        matches.append(Match(left_index=i, right_index=j, similarity=float(scores[k])))
        used_left.add(i)
        used_right.add(j)

    return matches


def hungarian_match(
    cost_matrix: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Compute optimal bipartite assignment with np.inf guard.

    Args:
        cost_matrix: 2-D cost matrix of shape ``(m, n)``.  May contain
            ``np.inf`` to mark forbidden assignments.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays giving the
        optimal assignment, with any pair whose *original* cost was
        infinite removed.  Empty arrays are returned when no valid
        assignment exists.
    """
    if cost_matrix.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)

    cost = np.asarray(cost_matrix, dtype=float)

    inf_mask = np.isinf(cost)

    if inf_mask.all():
        return np.array([], dtype=int), np.array([], dtype=int)

    if inf_mask.any():
        finite_max = float(cost[~inf_mask].max())
        guard_value = finite_max * 2.0 + 1.0
        cost = np.where(inf_mask, guard_value, cost)

    row_ind, col_ind = linear_sum_assignment(cost)

    if inf_mask.any():
        keep = ~inf_mask[row_ind, col_ind]
        row_ind = row_ind[keep]
        col_ind = col_ind[keep]

    return row_ind, col_ind


def optimal_match(similarities: np.ndarray, threshold: float) -> list[Match]:
    """Pair elements to maximise total similarity.

    Returns:
        Accepted matches ordered by left index.
    """
    if similarities.size == 0:
        return []

    cost = np.where(similarities >= threshold, 1.0 - similarities, np.inf)
    row_ind, col_ind = hungarian_match(cost)

    matches = [
        Match(left_index=int(i), right_index=int(j), similarity=float(similarities[i, j]))
        for i, j in zip(row_ind.tolist(), col_ind.tolist(), strict=True)
    ]
    matches.sort(key=lambda m: m.left_index)
    return matches
