"""Utility modules for TripMerge."""

from .config import TripMergeConfig, configure_logging, default_config

__all__ = ['TripMergeConfig', 'configure_logging', 'default_config']
