"""
Configuration management for cluster-match.

Loads configuration from environment variables (typically from a .env file).
Uses python-dotenv to load .env automatically.

Usage:
    from cluster_match.config import config

    level = config.matching.log_level
    limit = config.matching.max_clusters
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Look for .env in project root (parent of src/)
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

LOG_LEVEL_ENV = "CLUSTER_MATCH_LOG_LEVEL"
MAX_CLUSTERS_ENV = "CLUSTER_MATCH_MAX_CLUSTERS"


@dataclass
class MatchingConfig:
    """Settings for cluster matching and logging."""
    log_level: str = "WARNING"
    max_clusters: int = 0  # 0 disables the guard

    def __post_init__(self):
        """Normalize and validate the settings."""
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(
                f"Unknown log level {self.log_level!r}; "
                f"set {LOG_LEVEL_ENV} to DEBUG, INFO, WARNING, ERROR or CRITICAL."
            )
        try:
            self.max_clusters = int(self.max_clusters)
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"{MAX_CLUSTERS_ENV} must be an integer, got {self.max_clusters!r}"
            ) from e
        if self.max_clusters < 0:
            raise ValueError(
                f"{MAX_CLUSTERS_ENV} must be >= 0, got {self.max_clusters}"
            )

    def check_dimensions(self, size1: int, size2: int) -> None:
        """
        Reject contingency tables that are too large to match.

        Args:
            size1: Number of clusters in the first clustering
            size2: Number of clusters in the second clustering

        Raises:
            ValueError: If the guard is enabled and either size exceeds it
        """
        if self.max_clusters and max(size1, size2) > self.max_clusters:
            raise ValueError(
                f"Contingency table of {size1}x{size2} clusters exceeds the "
                f"configured limit of {self.max_clusters} "
                f"({MAX_CLUSTERS_ENV})"
            )


class Config:
    """
    Application configuration loaded from environment variables.

    Environment variables can be set:
    1. In a .env file in the project root
    2. In the system environment
    """

    def __init__(self):
        """Load configuration from environment."""
        self.reload()

    def reload(self) -> MatchingConfig:
        """Re-read the environment, e.g. after a test patched it."""
        self.matching = MatchingConfig(
            log_level=os.getenv(LOG_LEVEL_ENV, "WARNING"),
            max_clusters=os.getenv(MAX_CLUSTERS_ENV, "0"),
        )
        return self.matching


# Global config instance
config = Config()
