"""Tests for configuration models, YAML loading and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from exact_split.library.config import (
    AllocatorConfig,
    LoggingConfig,
    SplitConfig,
    configure_logging,
    load_config,
)
from exact_split.library.exceptions import ConfigurationError


class TestAllocatorConfig:
    """Allocator limits and pool settings."""

    def test_defaults(self):
        """Defaults mirror the fixed-point representation's limits."""
        config = AllocatorConfig()

        assert config.max_scale == 28
        assert config.mantissa_bits == 128
        assert config.max_workers is None
        assert config.parallel_threshold == 10_000

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_scale": 29},
            {"max_scale": -1},
            {"mantissa_bits": 256},
            {"max_workers": 0},
            {"chunk_size": 0},
            {"unknown": 1},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Out-of-range and unknown fields are rejected."""
        with pytest.raises(ValidationError):
            AllocatorConfig(**kwargs)

    def test_frozen(self):
        """The allocator config cannot be modified in place."""
        config = AllocatorConfig()

        with pytest.raises(ValidationError):
            config.max_scale = 2


class TestLoggingConfig:
    """Logging level validation."""

    def test_level_normalised(self):
        """Level names are case-insensitive."""
        config = LoggingConfig(level="debug")

        assert config.level == "DEBUG"
        assert config.numeric_level == logging.DEBUG

    def test_level_typo(self):
        """A misspelt level suggests the intended one."""
        with pytest.raises(ConfigurationError, match="Did you mean: DEBUG"):
            LoggingConfig(level="DEBGU")


class TestLoadConfig:
    """Reading YAML configuration files."""

    def test_full_file(self, yaml_config_file):
        """Both sections are read."""
        path = yaml_config_file(
            "allocator:\n"
            "  max_workers: 2\n"
            "  parallel_threshold: 50\n"
            "logging:\n"
            "  level: info\n"
        )

        config = load_config(path)

        assert config.allocator.max_workers == 2
        assert config.allocator.parallel_threshold == 50
        assert config.logging.level == "INFO"

    def test_empty_file_gives_defaults(self, yaml_config_file):
        """An empty file is the default configuration."""
        assert load_config(yaml_config_file("")) == SplitConfig()

    def test_missing_file(self, tmp_path):
        """A missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, yaml_config_file):
        """A YAML list is not a configuration."""
        with pytest.raises(ConfigurationError, match="Expected a mapping"):
            load_config(yaml_config_file("- 1\n- 2\n"))

    def test_malformed_yaml(self, yaml_config_file):
        """Unparseable YAML raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="is invalid"):
            load_config(yaml_config_file("allocator: [unclosed\n"))

    def test_invalid_field(self, yaml_config_file):
        """Model validation errors are reported as ConfigurationError."""
        with pytest.raises(ConfigurationError, match="max_scale"):
            load_config(yaml_config_file("allocator:\n  max_scale: 40\n"))


class TestConfigureLogging:
    """Caller-supplied logging setup."""

    def test_sets_level_and_handler(self):
        """The package logger gets the level and one handler."""
        handler = logging.NullHandler()

        logger = configure_logging(LoggingConfig(level="INFO"), handler=handler)

        assert logger.name == "exact_split"
        assert logger.level == logging.INFO
        assert logger.handlers == [handler]

    def test_repeated_calls_replace_handler(self):
        """Configuring twice does not stack handlers."""
        configure_logging(LoggingConfig(), handler=logging.NullHandler())
        second = logging.NullHandler()

        logger = configure_logging(LoggingConfig(level="DEBUG"), handler=second)

        assert logger.handlers == [second]
        assert logger.level == logging.DEBUG

    def test_library_logs_through_package_logger(self, caplog):
        """Allocator debug records reach the configured package logger."""
        from exact_split.library.allocations import allocate
        from exact_split.library.utils import ScaledAmount

        with caplog.at_level(logging.DEBUG, logger="exact_split"):
            allocate(ScaledAmount(10001, 2), 4, 2)

        assert any(
            "Allocating 10001 minimal units among 4 recipients" in record.getMessage()
            for record in caplog.records
        )
