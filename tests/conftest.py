"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import itertools

import numpy as np
import pytest

from cluster_match.algorithms.contingency import ContingencyTable
from cluster_match.config import LOG_LEVEL_ENV, MAX_CLUSTERS_ENV, config


@pytest.fixture
def brute_force_min_cost():
    """
    Fixture returning an exhaustive minimum-cost assignment oracle.

    Enumerates every injective row -> column mapping, so only use it on
    small matrices (R, C <= 6).
    """
    def _brute_force(cost: np.ndarray) -> float:
        n_rows, n_cols = cost.shape
        if n_rows > n_cols:
            cost = cost.T
            n_rows, n_cols = n_cols, n_rows
        best = np.inf
        for cols in itertools.permutations(range(n_cols), n_rows):
            best = min(best, float(cost[np.arange(n_rows), list(cols)].sum()))
        return best

    return _brute_force


@pytest.fixture
def diagonal_table():
    """
    3x3 table with n = 17 whose best cluster matching is the diagonal (12).
    """
    return ContingencyTable.from_counts(
        np.array(
            [
                [5, 1, 2],
                [1, 4, 0],
                [0, 1, 3],
            ]
        )
    )


@pytest.fixture
def identical_labels():
    """Two identical clusterings under different label names."""
    labels_a = np.array([0, 0, 0, 1, 1, 2, 2, 2, 2])
    labels_b = np.array([7, 7, 7, 3, 3, 5, 5, 5, 5])
    return labels_a, labels_b


@pytest.fixture
def clean_config(monkeypatch):
    """
    Fixture that clears the cluster-match environment and reloads config.

    Restores the environment-derived config after the test.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(MAX_CLUSTERS_ENV, raising=False)
    config.reload()
    yield config
    monkeypatch.undo()
    config.reload()
