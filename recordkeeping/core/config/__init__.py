"""
Configuration package.

This package contains application configuration and settings.
"""

from recordkeeping.core.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
