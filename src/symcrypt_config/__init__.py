"""Configuration package for the symcrypt command line."""

from .settings import (
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "get_settings",
]
