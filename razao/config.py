"""Settings read from environment variables with `RAZAO_` prefix."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RAZAO_", extra="ignore")

    journal_path: Path = Field(
        default=Path("razao.json"), description="JSON file with transactions"
    )
    chart_path: Path | None = Field(
        default=None, description="JSON file with chart of accounts"
    )
    strict: bool = Field(
        default=False, description="Reject transactions with unknown account ids"
    )
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | int = "WARNING"):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
