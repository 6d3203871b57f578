"""
Tests for the label-vector comparison helpers.
"""

import numpy as np
import pytest

from cluster_match.experiments.matching_metrics import (
    METRICS,
    MatchingStability,
    compare_clusterings,
    compare_tables,
    compute_matching_stability,
    pairwise_scores,
)


def test_compare_clusterings_identical(identical_labels):
    result = compare_clusterings(*identical_labels)

    assert set(result) == set(METRICS)
    for name in METRICS:
        assert result[name] == pytest.approx(1.0)


def test_compare_tables_matches_clusterings(diagonal_table):
    result = compare_tables(diagonal_table)

    assert result["accuracy"] == pytest.approx(12.0 / 17.0)
    assert 0.0 <= result["psi"] <= 1.0
    assert 0.0 <= result["simplified_psi"] <= 1.0


def test_compare_clusterings_noise_label():
    """Noise elements become singleton clusters on both sides."""
    labels_a = np.array([0, 0, 1, 1, -1, -1])
    labels_b = np.array([0, 0, 1, 1, -1, -1])

    plain = compare_clusterings(labels_a, labels_b)
    with_noise = compare_clusterings(labels_a, labels_b, noise_label=-1)

    assert plain["accuracy"] == pytest.approx(1.0)
    # Noise singletons still pair up one-to-one, so accuracy stays 1
    assert with_noise["accuracy"] == pytest.approx(1.0)
    assert with_noise["psi"] == pytest.approx(1.0)


def test_compare_clusterings_errors_propagate():
    with pytest.raises(ValueError, match="differ in length"):
        compare_clusterings([0, 1], [0, 1, 1])

    with pytest.raises(ValueError, match="n = 0"):
        compare_clusterings([], [])


def test_pairwise_scores():
    labels_list = [
        np.array([0, 0, 1, 1]),
        np.array([1, 1, 0, 0]),
        np.array([0, 1, 0, 1]),
    ]

    scores = pairwise_scores(labels_list)

    assert set(scores) == set(METRICS)
    assert all(len(v) == 3 for v in scores.values())  # pairs (0,1), (0,2), (1,2)
    assert scores["accuracy"][0] == pytest.approx(1.0)
    assert scores["accuracy"][1] == pytest.approx(0.5)
    assert scores["psi"][1] == 0.0


def test_compute_matching_stability():
    rng = np.random.default_rng(42)
    labels_list = [rng.integers(0, 3, size=40) for _ in range(4)]

    stability = compute_matching_stability(labels_list)

    assert isinstance(stability, MatchingStability)
    assert stability.n_pairs == 6
    assert 0.0 <= stability.accuracy_mean <= 1.0
    assert stability.accuracy_std >= 0.0
    assert 0.0 <= stability.psi_mean <= 1.0
    assert 0.0 <= stability.simplified_psi_mean <= 1.0


def test_compute_matching_stability_single_run():
    """One run is trivially stable."""
    stability = compute_matching_stability([np.array([0, 1, 1])])

    assert stability.n_pairs == 0
    assert stability.accuracy_mean == 1.0
    assert stability.accuracy_std == 0.0
    assert stability.psi_mean == 1.0
