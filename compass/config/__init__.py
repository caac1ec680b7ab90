"""Configuration package."""

from compass.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
