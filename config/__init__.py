"""Application configuration utilities."""

from .logging_setup import configure_logging
from .settings import DEFAULT_APP_ID, DEFAULT_USER_ID, Settings, get_settings

__all__ = [
    "DEFAULT_APP_ID",
    "DEFAULT_USER_ID",
    "Settings",
    "configure_logging",
    "get_settings",
]
