"""
Pydantic-based configuration models for the creational examples.

Product families (GUI platform, database vendor) are selected from environment
variables once per process.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

GUI_PLATFORMS = ["windows", "linux", "macos"]
DATABASE_VENDORS = ["oracle", "postgres", "mysql"]


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    environment: str = Field(default="local", description="Logging environment")
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="human", description="Log format")
    log_base: str = Field(default="logs", description="Base log directory")
    disable_logging: bool = Field(default=False, description="Disable file logging")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate logging environment."""
        valid_environments = ["local", "unit_test", "production"]
        if v not in valid_environments:
            logger.error("Invalid logging environment", environment=v, valid_environments=valid_environments)
            raise ValueError(f"Environment must be one of {valid_environments}, got '{v}'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got '{v}'")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["json", "human", "colored"]
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of {valid_formats}, got '{v}'")
        return v

    model_config = {"env_prefix": "LOGGING_", "case_sensitive": False, "extra": "ignore"}

    def to_legacy_dict(self) -> dict:
        """Convert to the dict format expected by setup_logging()."""
        return {
            "environment": self.environment,
            "level": self.level,
            "format": self.format,
            "log_base": self.log_base,
            "disable_logging": self.disable_logging,
        }


class FamilyConfig(BaseSettings):
    """Product family selection for the abstract factory examples."""

    gui_platform: str = Field(default="macos", description="GUI widget family (windows, linux, macos)")
    database_vendor: str = Field(default="mysql", description="Database family (oracle, postgres, mysql)")

    @field_validator("gui_platform")
    @classmethod
    def validate_gui_platform(cls, v: str) -> str:
        """Validate GUI platform."""
        v_lower = v.strip().lower()
        if v_lower not in GUI_PLATFORMS:
            logger.error("Invalid GUI platform", gui_platform=v, valid_platforms=GUI_PLATFORMS)
            raise ValueError(f"GUI platform must be one of {GUI_PLATFORMS}, got '{v}'")
        return v_lower

    @field_validator("database_vendor")
    @classmethod
    def validate_database_vendor(cls, v: str) -> str:
        """Validate database vendor."""
        v_lower = v.strip().lower()
        if v_lower not in DATABASE_VENDORS:
            logger.error("Invalid database vendor", database_vendor=v, valid_vendors=DATABASE_VENDORS)
            raise ValueError(f"Database vendor must be one of {DATABASE_VENDORS}, got '{v}'")
        return v_lower

    model_config = {"env_prefix": "FAMILY_", "case_sensitive": False, "extra": "ignore"}


class DiceConfig(BaseSettings):
    """Dice rolling configuration."""

    seed: int | None = Field(default=None, description="Seed for the process-wide dice generator")

    model_config = {"env_prefix": "DICE_", "case_sensitive": False, "extra": "ignore"}


class AppConfig(BaseSettings):
    """
    Composite application configuration.

    Access via the get_config() function.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    family: FamilyConfig = Field(default_factory=FamilyConfig)
    dice: DiceConfig = Field(default_factory=DiceConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "case_sensitive": False, "extra": "ignore"}
