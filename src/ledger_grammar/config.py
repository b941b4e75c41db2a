from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prices_path: Path = Path("prices.db")
    source_encoding: str = "utf-8"
    strip_trailing_newlines: bool = True
    validate_calendar_dates: bool = False
    log_level: str = "INFO"

    @field_validator("prices_path", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        return Path(value).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return str(value).strip().upper()


settings = Settings()
