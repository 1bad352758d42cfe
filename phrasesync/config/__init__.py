"""
Configuration package for phrasesync.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "settings",
    "get_settings",
    "reload_settings",
]
