"""
Test suite for Cluster Match.

This package contains all tests organized by component:
- test_algorithms/: Tests for the assignment solver, contingency tables and scores
- test_experiments/: Tests for the label-vector comparison helpers
"""
