"""Configuration management for Scriv RTF."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Encoding used to read and write .rtf files. Scrivener writes
    # ASCII-safe RTF, so undecodable bytes are dropped on read.
    encoding: str = Field(
        default="utf-8",
        alias="SCRIV_RTF_ENCODING",
    )

    # Suffix for annotated text written by `to-text`
    text_suffix: str = Field(
        default=".txt",
        alias="SCRIV_RTF_TEXT_SUFFIX",
    )

    log_level: str = Field(
        default="WARNING",
        alias="SCRIV_RTF_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
