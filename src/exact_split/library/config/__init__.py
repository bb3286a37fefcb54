"""Configuration models and utilities for exact-split."""

from exact_split.library.config.loader import configure_logging, load_config
from exact_split.library.config.models import (
    AllocatorConfig,
    LoggingConfig,
    SplitConfig,
)

__all__ = [
    "AllocatorConfig",
    "LoggingConfig",
    "SplitConfig",
    "configure_logging",
    "load_config",
]
