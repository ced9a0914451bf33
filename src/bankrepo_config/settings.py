"""Settings for processes hosting the bank repository.

Process environment variables override values from the .env file chosen by
``_resolve_env_file_path``.

Connection strings are read as a mapping keyed by name, e.g.
``CONNECTION_STRINGS__BANKDB=postgresql://user:pw@host:5432/banks``.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BANK_DB_KEY = "BankDB"
ENV_FILE_VARIABLE = "BANKREPO_ENV_FILE"
ENV_FILE_NAMES = (".env.dev", ".env")


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


def _find_project_root() -> Path:
    """Nearest directory above this package holding config/ or pyproject.toml.

    Falls back to the current working directory for installed copies, where
    no such directory exists above site-packages.
    """
    here = Path(__file__).resolve().parent
    for candidate in here.parents:
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return Path.cwd()


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Pick the .env file Settings reads, or None to rely on the environment.

    An explicit BANKREPO_ENV_FILE wins (relative paths resolve against the
    project root). Otherwise the first existing of config/.env.dev and
    config/.env is used.
    """
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        return path if path.is_file() else None

    config_dir = get_config_dir()
    return next(
        (config_dir / name for name in ENV_FILE_NAMES if (config_dir / name).is_file()),
        None,
    )


class Settings(BaseSettings):
    """Bank repository configuration: connection strings, engine and logging."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Named connection strings (CONNECTION_STRINGS__<NAME>)
    connection_strings: dict[str, str] = Field(default_factory=dict)

    # Engine options (DB_ECHO, DB_POOL_PRE_PING)
    db_echo: bool = False
    db_pool_pre_ping: bool = True

    # LOG_LEVEL, applied by configure_logging
    log_level: str = "INFO"

    def get_connection_string(self, name: str = BANK_DB_KEY) -> str:
        """Return the connection string registered under ``name``.

        Lookup is case-insensitive because environment variable names are
        often upper-cased. Raises ConfigurationError when absent or blank.
        """
        wanted = name.lower()
        for key, value in self.connection_strings.items():
            if key.lower() == wanted and value.strip():
                return value.strip()
        raise ConfigurationError(f"Connection string '{name}' is not configured")

    @property
    def bank_db_url(self) -> str:
        """SQLAlchemy async URL for the BankDB connection string."""
        return to_async_url(self.get_connection_string(BANK_DB_KEY))


def to_async_url(connection_string: str) -> str:
    """Rewrite a plain PostgreSQL URL to use the asyncpg driver."""
    for prefix in ("postgresql+psycopg2://", "postgresql://", "postgres://"):
        if connection_string.startswith(prefix):
            return "postgresql+asyncpg://" + connection_string[len(prefix) :]
    return connection_string


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
