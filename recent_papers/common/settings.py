from functools import cached_property, lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from recent_papers.data.arxiv.constants import ARXIV_API_URL, DEFAULT_WINDOW_DAYS

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ENV_FILE = PROJECT_ROOT / "env" / ".env.local"


def _make_settings_config(env_prefix: str = "") -> SettingsConfigDict:
    """Factory for creating SettingsConfigDict."""
    return SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix=env_prefix,
    )


class ArxivSettings(BaseSettings):
    """arXiv search API settings."""

    model_config = _make_settings_config("ARXIV_")

    api_url: str = ARXIV_API_URL
    user_agent: str = "recent-papers/0.1"
    timeout_seconds: float = Field(default=30.0, gt=0)
    window_days: int = Field(default=DEFAULT_WINDOW_DAYS, ge=0)


class AppSettings(BaseSettings):
    """Application settings."""

    model_config = _make_settings_config()

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False

    @cached_property
    def arxiv(self) -> ArxivSettings:
        return ArxivSettings()


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
