from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    default_timezone: str | None = Field(None, alias="DAYBOUND_DEFAULT_TIMEZONE")
    log_level: str = Field("INFO", alias="DAYBOUND_LOG_LEVEL")

    # Process-level zone, used when no default timezone is configured.
    system_timezone: str | None = Field(None, alias="TZ")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def timezone_candidates(self) -> list[str]:
        items = [self.default_timezone, self.system_timezone]
        return [str(item).strip() for item in items if item and str(item).strip()]


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


# For local dev convenience only.
if os.getenv("DAYBOUND_DEBUG_SETTINGS"):
    print(get_settings())
