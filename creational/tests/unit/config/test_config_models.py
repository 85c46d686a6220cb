"""
Unit tests for the configuration system.
"""

import pytest
from pydantic import ValidationError

from creational.config import AppConfig, get_config, reset_config
from creational.config.models import DiceConfig, FamilyConfig, LoggingConfig


def test_get_config_returns_app_config():
    """Test that get_config() returns an AppConfig object."""
    config = get_config()

    assert isinstance(config, AppConfig)
    assert hasattr(config, "logging")
    assert hasattr(config, "family")
    assert hasattr(config, "dice")


def test_get_config_test_mode_returns_fresh_instances():
    """Test that get_config() returns fresh instances in test mode."""
    assert get_config() is not get_config()


def test_reset_config_is_safe_to_call_repeatedly():
    reset_config()
    reset_config()

    assert isinstance(get_config(), AppConfig)


class TestFamilyConfig:
    def test_defaults(self):
        config = FamilyConfig()

        assert config.gui_platform == "macos"
        assert config.database_vendor == "mysql"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FAMILY_GUI_PLATFORM", "Windows")
        monkeypatch.setenv("FAMILY_DATABASE_VENDOR", " ORACLE ")

        config = FamilyConfig()

        assert config.gui_platform == "windows"
        assert config.database_vendor == "oracle"

    def test_rejects_unknown_platform(self, monkeypatch):
        monkeypatch.setenv("FAMILY_GUI_PLATFORM", "templeos")

        with pytest.raises(ValidationError, match="GUI platform must be one of"):
            FamilyConfig()

    def test_rejects_unknown_vendor(self):
        with pytest.raises(ValidationError, match="Database vendor must be one of"):
            FamilyConfig(database_vendor="mariadb")

    def test_app_config_picks_up_family(self, monkeypatch):
        monkeypatch.setenv("FAMILY_GUI_PLATFORM", "linux")

        assert get_config().family.gui_platform == "linux"


class TestDiceConfig:
    def test_unseeded_by_default(self):
        assert DiceConfig().seed is None

    def test_seed_from_environment(self, monkeypatch):
        monkeypatch.setenv("DICE_SEED", "31337")

        assert DiceConfig().seed == 31337


class TestLoggingConfig:
    def test_test_environment_from_conftest(self):
        assert LoggingConfig().environment == "unit_test"

    def test_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    @pytest.mark.parametrize(
        "kwargs",
        [{"environment": "staging"}, {"level": "LOUD"}, {"format": "xml"}],
    )
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            LoggingConfig(**kwargs)

    def test_to_legacy_dict(self):
        config = LoggingConfig(
            environment="local", level="WARNING", format="json", log_base="/tmp/x", disable_logging=False
        )

        assert config.to_legacy_dict() == {
            "environment": "local",
            "level": "WARNING",
            "format": "json",
            "log_base": "/tmp/x",
            "disable_logging": False,
        }
