"""Shared utilities: settings and logging."""

from fieldcheck.utils.config import Settings, get_settings, settings
from fieldcheck.utils.logger import setup_logger

__all__ = ["Settings", "get_settings", "settings", "setup_logger"]
