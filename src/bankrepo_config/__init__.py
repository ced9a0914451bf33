"""Shared application configuration package."""

from .settings import (
    BANK_DB_KEY,
    ConfigurationError,
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
    to_async_url,
)

__all__ = [
    "BANK_DB_KEY",
    "ConfigurationError",
    "Settings",
    "clear_settings_cache",
    "get_config_dir",
    "get_settings",
    "to_async_url",
]
