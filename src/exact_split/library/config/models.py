"""Pydantic models for allocator and logging configuration."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exact_split.library.error_messages import format_error, suggest_similar
from exact_split.library.exceptions import ConfigurationError
from exact_split.library.validation.inputs import (
    MAX_MANTISSA_BITS,
    MAX_SUPPORTED_SCALE,
)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class AllocatorConfig(BaseModel):
    """Limits and execution settings for the allocator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_scale: int = Field(
        MAX_SUPPORTED_SCALE,
        ge=0,
        le=MAX_SUPPORTED_SCALE,
        description="Largest accepted number of fractional digits",
    )
    mantissa_bits: int = Field(
        MAX_MANTISSA_BITS,
        ge=8,
        le=MAX_MANTISSA_BITS,
        description="Width of the signed integer holding a mantissa",
    )
    max_workers: int | None = Field(
        None,
        ge=1,
        description="Thread pool size for share computation (None: executor default)",
    )
    parallel_threshold: int = Field(
        10_000,
        ge=1,
        description="Recipient count from which shares are computed on a pool",
    )
    chunk_size: int = Field(
        4096, ge=1, description="Consecutive recipients handed to one worker"
    )


class LoggingConfig(BaseModel):
    """Logging settings applied by the command-line entry point."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field("WARNING", description="Log level name")
    format: str = Field(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="logging.Formatter format string",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate that the level is a standard logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                format_error(
                    "invalid_log_level",
                    level=v,
                    suggestion=suggest_similar(level, LOG_LEVELS),
                )
            )
        return level

    @property
    def numeric_level(self) -> int:
        """Return the numeric logging level."""
        return logging.getLevelName(self.level)


class SplitConfig(BaseModel):
    """Top-level configuration file layout."""

    model_config = ConfigDict(extra="forbid")

    allocator: AllocatorConfig = Field(default_factory=AllocatorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
