"""Configuration for TripMerge."""

import logging
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class TripMergeConfig:
    """Runtime configuration shared by the CLI and the API."""

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Indentation of JSON written by the CLI
    json_indent: int = 2

    @classmethod
    def from_env(cls) -> "TripMergeConfig":
        """Build a config from ``TRIPMERGE_*`` environment variables."""
        config = cls()
        config.log_level = os.environ.get("TRIPMERGE_LOG_LEVEL", config.log_level).upper()
        return config


def configure_logging(config: Optional[TripMergeConfig] = None, verbose: bool = False) -> None:
    """
    Apply the configured level and format to the root logger.

    Args:
        config: Configuration to apply (``default_config`` if omitted)
        verbose: Force DEBUG level
    """
    config = config or default_config
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(level=level, format=config.log_format, force=True)


# Global configuration instance
default_config = TripMergeConfig.from_env()
