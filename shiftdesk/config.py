# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration loaded from the environment."""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings.

    Values are read from environment variables (case-insensitive) and an
    optional ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./shiftdesk.db"
    min_shift_hours: float = Field(default=4.0, gt=0, le=24)
    # IANA zone used to decide what "today" is for the past-date rule
    timezone: str = "UTC"
    session_expiry_days: int = Field(default=7, ge=1)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    cors_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"
    issue_page_size: int = Field(default=25, ge=1)
    issue_max_page_size: int = Field(default=100, ge=1)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject names the tz database does not know."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise ValueError(f"Unknown timezone: {v}") from None
        return v


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
