"""
Configuration management for the underlying catalog.

Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEFINITIONS_PATH = Path(__file__).parent / "catalog" / "data" / "underlyings.yml"


class Settings(BaseSettings):
    """
    Package settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_UNDERLYING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    definitions_path: Path | None = Field(
        default=None,
        description="Underlying definitions file (defaults to the packaged underlyings.yml)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON-shaped log lines",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @property
    def resolved_definitions_path(self) -> Path:
        """Get the definitions file that will actually be read."""
        if self.definitions_path is None:
            return DEFAULT_DEFINITIONS_PATH
        return self.definitions_path


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure single instance throughout the process.
    """
    return Settings()
