"""Application configuration: env vars, YAML file, defaults.

Environment variables take precedence over values from the YAML file and over
keyword arguments, so ``ACRODB`` always wins for the database path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "damt" / "damt.yml"


class EnvFirstSettings(BaseSettings):
    """Settings where the environment outranks init values."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings, dotenv_settings, file_secret_settings


class DatabaseConfig(EnvFirstSettings):
    path: str = Field(default="", validation_alias=AliasChoices("ACRODB", "DAMT_DB_PATH"))
    filename: str = "acronyms.db"
    table: str = "ACRONYMS"

    model_config = {"env_prefix": "DAMT_DB_", "populate_by_name": True}


class AppInfo(EnvFirstSettings):
    """Program identity shown by the version banner."""

    name: str = "damt"
    version: str = "0.2.0"
    copyright_name: str = "Simon Rowe"
    copyright_year: str = "2022"
    license_url: str = "https://github.com/wiremoons/damt/"

    model_config = {"env_prefix": "DAMT_APP_"}


class AppConfig(EnvFirstSettings):
    """Top-level application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    app: AppInfo = Field(default_factory=AppInfo)

    log_level: str = "warning"
    timezone: str = "UTC"
    latest_limit: int = 5

    model_config = {"env_prefix": "DAMT_"}

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> AppConfig:
        """Load config from YAML file, with env var overrides."""
        if path is None:
            path = DEFAULT_CONFIG_FILE

        values: dict[str, Any] = {}
        if path.exists():
            with open(path) as f:
                values = yaml.safe_load(f) or {}

        # nested sections read their own env vars only when built as settings
        database = DatabaseConfig(**(values.pop("database", None) or {}))
        app = AppInfo(**(values.pop("app", None) or {}))
        return cls(database=database, app=app, **values)
