from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .colors import Color


class Settings(BaseSettings):
    """Configuration for menu rendering and diagnostics.

    Values are loaded from environment variables and `.env`.

    Notes:
    - A color or select char set through the builder always wins over the
      defaults configured here.
    - Logging stays off unless TERM_SELECT_LOG_DIR is set; the menu owns the
      screen, so nothing is ever logged to the console.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Rendering defaults
    TERM_SELECT_HIGHLIGHT_COLOR: Color = Field(default=Color.GREEN)
    TERM_SELECT_SELECT_CHAR: str | None = Field(default=None)
    TERM_SELECT_SHOW_HINTS: bool = Field(default=True)
    TERM_SELECT_SHOW_BREADCRUMBS: bool = Field(default=True)
    TERM_SELECT_ROOT_LABEL: str = Field(default="Home")

    # Diagnostic logging (file only)
    TERM_SELECT_LOG_DIR: Path | None = Field(default=None)
    TERM_SELECT_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days).
    TERM_SELECT_LOG_BACKUP_COUNT: int = Field(default=7)

    @field_validator("TERM_SELECT_HIGHLIGHT_COLOR", mode="before")
    @classmethod
    def _parse_color(cls, value):
        return Color.parse(value)


def load_settings() -> Settings:
    return Settings()
