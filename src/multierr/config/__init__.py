"""Configuration management using pydantic-settings."""

from .settings import MultierrSettings, clear_settings_cache, get_settings

__all__ = [
    "MultierrSettings",
    "clear_settings_cache",
    "get_settings",
]
