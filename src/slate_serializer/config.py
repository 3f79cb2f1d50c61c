"""Configuration management for Slate Serializer."""

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

    # BeautifulSoup tree builder ("html.parser", "lxml", "html5lib")
    html_parser: str = Field(
        default="html.parser",
        alias="SLATE_SERIALIZER_HTML_PARSER",
    )

    # Format used by the CLI when the file extension is not recognized
    default_format: str = Field(
        default="html",
        alias="SLATE_SERIALIZER_FORMAT",
    )

    json_indent: int = Field(
        default=2,
        alias="SLATE_SERIALIZER_JSON_INDENT",
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
