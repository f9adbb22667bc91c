"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture
def fixtures_path() -> Path:
    """Path to test fixture directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample filter configuration file."""
    return fixtures_path / "sample_filters.yaml"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore package log level changed by config loading."""
    logger = logging.getLogger("metadata_filter")
    level = logger.level
    yield
    logger.setLevel(level)
