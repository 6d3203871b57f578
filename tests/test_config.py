"""
Tests for configuration and logging setup.
"""

import logging

import pytest

from cluster_match.config import (
    LOG_LEVEL_ENV,
    MAX_CLUSTERS_ENV,
    Config,
    MatchingConfig,
)
from cluster_match.utils.logging_config import get_logger, setup_logging


def test_matching_config_defaults(clean_config):
    cfg = Config()
    assert cfg.matching.log_level == "WARNING"
    assert cfg.matching.max_clusters == 0


def test_matching_config_from_env(clean_config, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    monkeypatch.setenv(MAX_CLUSTERS_ENV, "50")

    cfg = Config()

    assert cfg.matching.log_level == "DEBUG"
    assert cfg.matching.max_clusters == 50


def test_matching_config_validation():
    """Test invalid settings."""
    with pytest.raises(ValueError, match="must be an integer"):
        MatchingConfig(max_clusters="lots")

    with pytest.raises(ValueError, match="must be >= 0"):
        MatchingConfig(max_clusters=-1)

    with pytest.raises(ValueError, match="Unknown log level"):
        MatchingConfig(log_level="chatty")


def test_check_dimensions():
    MatchingConfig(max_clusters=0).check_dimensions(1000, 1000)
    MatchingConfig(max_clusters=3).check_dimensions(3, 2)

    with pytest.raises(ValueError, match="4x2 clusters"):
        MatchingConfig(max_clusters=3).check_dimensions(4, 2)


def test_setup_logging(clean_config):
    logger = setup_logging("INFO")
    assert logger.name == "cluster_match"
    assert logger.level == logging.INFO

    # Repeated calls only change the level
    n_handlers = len(logger.handlers)
    setup_logging(logging.DEBUG)
    assert len(logger.handlers) == n_handlers
    assert logger.level == logging.DEBUG

    # Default level comes from the config
    assert setup_logging().level == logging.WARNING


def test_get_logger_is_namespaced():
    logger = get_logger("cluster_match.algorithms.assignment")
    assert logger.name == "cluster_match.algorithms.assignment"
    assert logger is logging.getLogger("cluster_match.algorithms.assignment")
