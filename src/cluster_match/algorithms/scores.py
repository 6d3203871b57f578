"""
Set-matching scores between two clusterings.

Both scores pair up clusters with the minimum-cost assignment on a cost matrix
derived from the contingency table, then post-process the matched values.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from ..config import config
from ..utils.logging_config import get_logger
from .assignment import linear_assignment
from .contingency import ContingencyTable

logger = get_logger(__name__)


def _check_table(table: ContingencyTable, score: str) -> None:
    """Reject tables that cannot be scored."""
    if not isinstance(table, ContingencyTable):
        raise TypeError(
            f"{score} needs a ContingencyTable, got {type(table).__name__}"
        )
    if table.total <= 0:
        raise ValueError(
            f"{score} is undefined for an empty contingency table (n = 0)"
        )
    config.matching.check_dimensions(table.size1, table.size2)


@dataclass(frozen=True)
class ClusterAccuracyScore:
    """
    Clustering accuracy under the best one-to-one cluster correspondence.

    The clusters of both clusterings are matched so as to maximize the number
    of co-clustered elements; the accuracy is that number divided by the
    total element count. It is 1 exactly when some bijection between the
    clusters places every element in a matched pair.
    """

    accuracy: float
    matched: float
    total: int

    @classmethod
    def from_table(cls, table: ContingencyTable) -> "ClusterAccuracyScore":
        """
        Compute the accuracy of a contingency table.

        Args:
            table: Contingency table between the two clusterings

        Returns:
            ClusterAccuracyScore with accuracy in [0, 1]

        Raises:
            ValueError: If the table is empty or exceeds the cluster limit
        """
        _check_table(table, "ClusterAccuracyScore")
        # Maximizing matched counts == minimizing their negation
        costs = -table.counts.astype(np.float64)
        result = linear_assignment(costs)

        matched = float(-costs[result.rows, result.cols].sum())
        n = table.total
        accuracy = matched / n
        logger.debug(
            "Accuracy on %dx%d table: %g / %d = %.6f",
            table.size1,
            table.size2,
            matched,
            n,
            accuracy,
        )
        return cls(accuracy=accuracy, matched=matched, total=n)


def _expected_matching(table: ContingencyTable) -> float:
    """
    Expected matched similarity of two random clusterings with the same
    cluster sizes.

    Cluster sizes of both sides are sorted ascending and paired index for
    index over the first ``min(size1, size2)`` entries.
    """
    n = table.total
    sizes1 = np.sort(table.row_totals).astype(np.float64)
    sizes2 = np.sort(table.col_totals).astype(np.float64)
    k = min(len(sizes1), len(sizes2))
    a, b = sizes1[:k], sizes2[:k]
    larger = np.maximum(a, b)
    terms = np.divide(
        a * b / n, larger, out=np.zeros(k), where=larger > 0
    )
    return float(terms.sum())


@dataclass(frozen=True)
class PairSetsIndex:
    """
    Pair Sets Index (Rezaei & Franti, "Set Matching Measures for External
    Cluster Validity").

    ``observed`` is the summed similarity of optimally matched cluster pairs,
    where the similarity of two clusters is their overlap divided by the
    larger of the two sizes. ``psi`` corrects it by the ``expected`` value of
    random clusterings with the same cluster sizes; ``simplified_psi`` uses 1
    as the expectation instead. Both are 0 when the observed similarity is
    below the respective baseline and 1 for identical clusterings.
    """

    psi: float
    simplified_psi: float
    observed: float
    expected: float

    @classmethod
    def from_table(cls, table: ContingencyTable) -> "PairSetsIndex":
        """
        Compute PSI and simplified PSI of a contingency table.

        Args:
            table: Contingency table between the two clusterings

        Returns:
            PairSetsIndex with both scores

        Raises:
            ValueError: If the table is empty or exceeds the cluster limit
        """
        _check_table(table, "PairSetsIndex")
        size1, size2 = table.size1, table.size2
        if size1 == 1 and size2 == 1:
            # One cluster on each side always matches perfectly
            return cls(psi=1.0, simplified_psi=1.0, observed=1.0, expected=1.0)

        counts = table.counts.astype(np.float64)
        larger = np.maximum(
            table.row_totals[:, None], table.col_totals[None, :]
        ).astype(np.float64)
        costs = -np.divide(
            counts, larger, out=np.zeros_like(counts), where=larger > 0
        )
        result = linear_assignment(costs)

        s = float(-costs[result.rows, result.cols].sum())
        e = _expected_matching(table)
        k = max(size1, size2)

        simplified_psi = 0.0 if s < 1 else (s - 1) / (k - 1)
        psi = 0.0 if s < e else (s - e) / (k - e)
        logger.debug(
            "PSI on %dx%d table: s=%.6f e=%.6f psi=%.6f simplified=%.6f",
            size1,
            size2,
            s,
            e,
            psi,
            simplified_psi,
        )
        return cls(psi=psi, simplified_psi=simplified_psi, observed=s, expected=e)
