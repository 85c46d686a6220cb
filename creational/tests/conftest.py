"""
Test configuration and fixtures for the creational examples.

This module provides core fixtures and test isolation for the test suite.
"""

import logging
import os
import random
from collections.abc import Generator

import pytest

# Set environment variables before any config is loaded
os.environ.setdefault("LOGGING_ENVIRONMENT", "unit_test")
os.environ.setdefault("LOGGING_DISABLE_LOGGING", "true")

from creational.builder.dice import DiceRoller, reset_dice_roller  # noqa: E402
from creational.config import reset_config  # noqa: E402
from creational.structured_logging.enhanced_logging_config import (  # noqa: E402
    _configure_default_structlog,
    remove_handlers,
    reset_logging_state,
)

FAMILY_ENV_VARS = ("FAMILY_GUI_PLATFORM", "FAMILY_DATABASE_VENDOR", "DICE_SEED")


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Generator[None, None, None]:
    """Reset config and the shared dice roller before and after each test."""
    reset_config()
    reset_dice_roller()
    yield
    reset_config()
    reset_dice_roller()


@pytest.fixture(autouse=True)
def clean_family_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure family selection starts from its defaults unless a test sets it."""
    for name in FAMILY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def deterministic_random_seed() -> Generator[None, None, None]:
    """Set deterministic random seed for reproducible tests."""
    random.seed(42)
    yield


@pytest.fixture
def seeded_roller() -> DiceRoller:
    """A dice roller with a fixed seed."""
    return DiceRoller(seed=1234)


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo any logging setup performed by a test."""
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    yield
    remove_handlers()
    root_logger.setLevel(saved_level)
    reset_logging_state()
    _configure_default_structlog()
