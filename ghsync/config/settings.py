from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_GITHUB_HOST, DEFAULT_GITHUB_USER, DEFAULT_PROJECTS_SUBDIR

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="", env_file=None, extra="ignore")

    github_user: str = Field(default=DEFAULT_GITHUB_USER)
    github_host: str = Field(default=DEFAULT_GITHUB_HOST)
    github_token: str | None = Field(default_factory=lambda: os.getenv("GITHUB_TOKEN"))
    projects_dir: Path | None = Field(default=None)


def get_settings() -> Settings:
    return Settings()


def default_project_dir() -> Path:
    """$HOME/projects when it exists, otherwise the current directory."""
    candidate = Path(os.environ.get("HOME", str(Path.home()))) / DEFAULT_PROJECTS_SUBDIR
    if candidate.is_dir():
        return candidate
    return Path.cwd()
