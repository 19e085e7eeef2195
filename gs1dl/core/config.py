"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Parser capacity limits live in ``gs1dl.digital_link.constants`` and are not
configurable here.
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from ``GS1DL_*`` environment variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GS1DL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Core Application Settings
    # ==========================================================================
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    project_name: str = "GS1 Digital Link URI parser"
    version: str = "0.1.0"

    # ==========================================================================
    # Command-line Output Defaults
    # ==========================================================================
    default_fixed_first: bool = Field(
        default=False,
        description="Emit fixed-length AIs ahead of the others when no CLI flag is given",
    )
    default_extra_separator: bool = Field(
        default=False,
        description="Emit an FNC1 after every unbracketed element when no CLI flag is given",
    )

    @model_validator(mode="after")
    def _validate_production_settings(self) -> Self:
        """Debug output is only allowed in development."""
        if self.environment in ("production", "staging") and self.debug:
            raise ValueError(f"debug must be False in {self.environment} environment")
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused,
    avoiding repeated environment variable parsing.
    """
    return Settings()
