"""Set-matching metric helpers for comparing clusterings.

Wraps the contingency table and score classes into label-vector functions and
summarizes agreement across repeated clusterings (e.g. restarts of the same
algorithm with different seeds).
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from ..algorithms.contingency import ContingencyTable
from ..algorithms.scores import ClusterAccuracyScore, PairSetsIndex

METRICS = [
    "accuracy",
    "psi",
    "simplified_psi",
]


@dataclass
class MatchingStability:
    """Pairwise set-matching agreement across multiple clustering runs."""

    accuracy_mean: float
    accuracy_std: float
    psi_mean: float
    psi_std: float
    simplified_psi_mean: float
    simplified_psi_std: float
    n_pairs: int


# ---------------------------------------------------------------------------
# Single comparisons
# ---------------------------------------------------------------------------

def compare_tables(table: ContingencyTable) -> Dict[str, float]:
    """Compute every metric in ``METRICS`` for one contingency table."""
    acc = ClusterAccuracyScore.from_table(table)
    psi = PairSetsIndex.from_table(table)
    return {
        "accuracy": acc.accuracy,
        "psi": psi.psi,
        "simplified_psi": psi.simplified_psi,
    }


def compare_clusterings(
    labels_a: np.ndarray,
    labels_b: np.ndarray,
    *,
    noise_label: Optional[Any] = None,
) -> Dict[str, float]:
    """
    Compare two clusterings of the same elements.

    Args:
        labels_a: Labels of the first clustering (e.g. ground truth)
        labels_b: Labels of the second clustering
        noise_label: Optional label whose elements are treated as singleton
            clusters

    Returns:
        Dict mapping each name in ``METRICS`` to its score

    Raises:
        ValueError: If the label vectors are empty or differ in length
    """
    table = ContingencyTable.from_labels(labels_a, labels_b, noise_label=noise_label)
    return compare_tables(table)


# ---------------------------------------------------------------------------
# Multi-run summaries
# ---------------------------------------------------------------------------

def pairwise_scores(
    labels_list: List[np.ndarray], *, noise_label: Optional[Any] = None
) -> Dict[str, List[float]]:
    """
    Compute the set-matching metrics between all pairs of clusterings.

    Args:
        labels_list: List of clustering label arrays over the same elements
        noise_label: Optional noise label, see ``compare_clusterings``

    Returns:
        ``{metric_name: [score for each pair (i, j) with i < j]}``
    """
    scores: Dict[str, List[float]] = {m: [] for m in METRICS}
    for i in range(len(labels_list)):
        for j in range(i + 1, len(labels_list)):
            pair = compare_clusterings(
                labels_list[i], labels_list[j], noise_label=noise_label
            )
            for m in METRICS:
                scores[m].append(pair[m])
    return scores


def compute_matching_stability(
    labels_list: List[np.ndarray], *, noise_label: Optional[Any] = None
) -> MatchingStability:
    """
    Summarize how consistently repeated runs cluster the same elements.

    Fewer than two runs count as perfectly stable (mean 1, std 0).

    Args:
        labels_list: List of clustering label arrays (one per restart)
        noise_label: Optional noise label, see ``compare_clusterings``

    Returns:
        MatchingStability with mean/std of each pairwise metric
    """
    scores = pairwise_scores(labels_list, noise_label=noise_label)
    n_pairs = len(scores["accuracy"])

    def _mean(values: List[float]) -> float:
        return float(np.mean(values)) if values else 1.0

    def _std(values: List[float]) -> float:
        return float(np.std(values)) if values else 0.0

    return MatchingStability(
        accuracy_mean=_mean(scores["accuracy"]),
        accuracy_std=_std(scores["accuracy"]),
        psi_mean=_mean(scores["psi"]),
        psi_std=_std(scores["psi"]),
        simplified_psi_mean=_mean(scores["simplified_psi"]),
        simplified_psi_std=_std(scores["simplified_psi"]),
        n_pairs=n_pairs,
    )
