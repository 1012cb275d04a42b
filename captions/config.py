"""
Runtime configuration helpers for the caption service.

Loads DATABASE_URL and the caption display defaults from the environment,
falling back to the .env file located in the project root.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .charsets import parse_code_point_ranges
from .constants import DEFAULT_MAX_CHARACTERS, DEFAULT_MAX_LINES

# Resolve the project root
BASE_DIR = Path(__file__).resolve().parents[1]

ENV_PATH = BASE_DIR / ".env"

# Platform-provided environment variables win over .env values
load_dotenv(dotenv_path=ENV_PATH, override=False)


class Settings(BaseSettings):
    # Required; must come from the environment or .env
    database_url: str = Field(..., alias="DATABASE_URL")

    app_name: str = Field(default="Caption Service", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")

    # Caption rendering
    caption_max_characters: int = Field(default=DEFAULT_MAX_CHARACTERS, alias="CAPTION_MAX_CHARACTERS")
    caption_max_lines: int = Field(default=DEFAULT_MAX_LINES, ge=1, alias="CAPTION_MAX_LINES")
    caption_truncation_policy: Literal["ellipsis", "drop_tokens"] = Field(
        default="ellipsis", alias="CAPTION_TRUNCATION_POLICY"
    )
    # Comma separated hex code point ranges accepted inside hashtags/mentions
    caption_extra_word_ranges: str = Field(default="0590-05FF", alias="CAPTION_EXTRA_WORD_RANGES")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("caption_extra_word_ranges")
    @classmethod
    def _validate_word_ranges(cls, value: str) -> str:
        parse_code_point_ranges(value)
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
