"""
Configuration module for the creational examples.

This module provides type-safe, validated configuration using Pydantic BaseSettings.

Usage:
    from creational.config import get_config

    config = get_config()
    logger.info("Family selection", gui_platform=config.family.gui_platform)
"""

import sys
import threading
from functools import lru_cache
from os import getenv

from .models import AppConfig, DiceConfig, FamilyConfig, LoggingConfig

__all__ = ["get_config", "reset_config", "AppConfig", "DiceConfig", "FamilyConfig", "LoggingConfig"]

_config_lock = threading.Lock()


def _is_test_mode() -> bool:
    """
    Detect if running in test environment.

    Returns:
        bool: True if running under pytest, False otherwise
    """
    if "pytest" in sys.modules:
        return True

    return bool(getenv("PYTEST_CURRENT_TEST"))


@lru_cache(maxsize=1)
def _get_config_cached() -> AppConfig:
    """Config loader with caching, used outside tests."""
    with _config_lock:
        return AppConfig()


def get_config() -> AppConfig:
    """
    Get application configuration (singleton normally, fresh in tests).

    Configuration is loaded from environment variables and .env file.

    Returns:
        AppConfig: The application configuration

    Raises:
        ValidationError: If configuration is invalid
    """
    if _is_test_mode():
        return AppConfig()
    return _get_config_cached()


def reset_config() -> None:
    """Reset the configuration cache so the next get_config() re-reads the environment."""
    with _config_lock:
        _get_config_cached.cache_clear()
