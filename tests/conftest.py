"""
Common fixtures for pytest unit and integration tests for the exact-split library.

"""

from __future__ import annotations

import logging

import pytest

from exact_split.library.config import AllocatorConfig
from exact_split.library.config.loader import PACKAGE_LOGGER
from exact_split.library.utils import ScaledAmount

# (mantissa, scale, recipients, output_scale)
SPLIT_CASES = [
    (10001, 2, 4, 2),
    (10001, 2, 3, 2),
    (999999999999999999, 2, 10, 2),
    (1235, 2, 5, 2),
    (1234567, 0, 1, 2),
    (5, 0, 9, 0),
    (2, 0, 2, 0),
    (4185552, 3, 13, 3),
    (412434, 2, 2, 0),
    (6627186, 0, 10, 0),
    (12345, 2, 39, 2),
    (0, 2, 7, 2),
]


@pytest.fixture
def hundred_and_one_cent():
    """100.01 at scale 2."""
    return ScaledAmount(10001, 2)


@pytest.fixture
def parallel_config():
    """Allocator config that always takes the thread pool path in small chunks."""
    return AllocatorConfig(parallel_threshold=1, chunk_size=7, max_workers=4)


@pytest.fixture
def yaml_config_file(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(content: str):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
