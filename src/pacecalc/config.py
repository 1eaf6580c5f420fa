"""Configuration management for pacecalc."""

import logging
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .parsing import MAX_PRECISION

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Settings loaded from ``PACECALC_*`` environment variables.

    No configuration file is read.
    """

    model_config = SettingsConfigDict(
        env_prefix="PACECALC_",
        case_sensitive=False,
        extra="ignore",
    )

    default_precision: int = Field(
        default=2,
        ge=0,
        le=MAX_PRECISION,
        description="Decimal places for numeric output when -p is not given",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Logging level when -v is not given",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration

    Raises:
        ConfigurationError: If a PACECALC_* variable holds an invalid value
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            names = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
            fields = ", ".join(f"PACECALC_{name.upper()}" for name in names)
            raise ConfigurationError(f"Invalid configuration in {fields}") from e
        logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings
