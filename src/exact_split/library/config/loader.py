"""
Configuration loading and logging setup.

Configuration is read from YAML files into the pydantic models of
:mod:`exact_split.library.config.models`. Logging is only configured when a
caller passes a :class:`LoggingConfig` to :func:`configure_logging`; importing
the library never installs handlers.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from exact_split.library.config.models import LoggingConfig, SplitConfig
from exact_split.library.error_messages import format_error
from exact_split.library.exceptions import ConfigurationError

PACKAGE_LOGGER = "exact_split"


def load_config(path: Path | str) -> SplitConfig:
    """
    Load a configuration file.

    Parameters
    ----------
    path
        Path to a YAML file with optional ``allocator`` and ``logging``
        sections. An empty file gives the defaults.

    Returns
    -------
    SplitConfig
        The validated configuration

    Raises
    ------
    ConfigurationError
        If the file is missing, is not valid YAML, or does not match the
        configuration models
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(format_error("config_file_missing", path=config_path))

    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            format_error("config_file_invalid", path=config_path, details=e)
        ) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(
            format_error(
                "config_file_invalid",
                path=config_path,
                details=f"Expected a mapping, got {type(raw).__name__}",
            )
        )

    try:
        return SplitConfig.model_validate(raw)
    except PydanticValidationError as e:
        raise ConfigurationError(
            format_error("config_file_invalid", path=config_path, details=e)
        ) from e


def configure_logging(
    config: LoggingConfig, handler: logging.Handler | None = None
) -> logging.Logger:
    """
    Attach a handler to the package logger according to ``config``.

    Repeated calls replace the handler installed by a previous call instead of
    stacking another one.

    Parameters
    ----------
    config
        Level and format to apply
    handler
        Handler to install (default: a StreamHandler on stderr)

    Returns
    -------
    logging.Logger
        The configured ``exact_split`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, "_exact_split_handler", False):
            logger.removeHandler(existing)

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler._exact_split_handler = True
    logger.addHandler(handler)
    logger.setLevel(config.numeric_level)
    return logger
