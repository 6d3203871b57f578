"""
Cluster Match - Core Package

Optimal cluster matching and set-matching scores for comparing two
clusterings of the same data.

This package provides:
- A rectangular Kuhn-Munkres (Hungarian) assignment solver
- Contingency tables between two clusterings
- Clustering accuracy and the Pair Sets Index
"""

__version__ = "0.1.0"

from .algorithms import (
    ClusterAccuracyScore,
    ContingencyTable,
    PairSetsIndex,
    linear_assignment,
    solve_assignment,
)
from .experiments import compare_clusterings

# Explicitly import subpackages to ensure they're discoverable
from . import algorithms
from . import experiments
from . import utils

__all__ = [
    "ClusterAccuracyScore",
    "ContingencyTable",
    "PairSetsIndex",
    "linear_assignment",
    "solve_assignment",
    "compare_clusterings",
    "algorithms",
    "experiments",
    "utils",
]
