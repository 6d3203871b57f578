"""Comparison helpers built on the core scores."""

from .matching_metrics import (
    METRICS,
    MatchingStability,
    compare_clusterings,
    compare_tables,
    compute_matching_stability,
    pairwise_scores,
)

__all__ = [
    "METRICS",
    "MatchingStability",
    "compare_clusterings",
    "compare_tables",
    "compute_matching_stability",
    "pairwise_scores",
]
