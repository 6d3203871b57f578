"""
Algorithm Core Library - cluster matching and set-matching scores.

This module provides the assignment solver, contingency tables and the scores
built on them, with minimal dependencies. Designed for reuse and testing.
"""

from .assignment import (
    AssignmentResult,
    as_cost_matrix,
    assignment_cost,
    linear_assignment,
    solve_assignment,
)
from .contingency import ContingencyTable
from .scores import ClusterAccuracyScore, PairSetsIndex

__all__ = [
    # Assignment
    "AssignmentResult",
    "as_cost_matrix",
    "assignment_cost",
    "linear_assignment",
    "solve_assignment",
    # Contingency tables
    "ContingencyTable",
    # Scores
    "ClusterAccuracyScore",
    "PairSetsIndex",
]
