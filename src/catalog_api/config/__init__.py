"""
Module: config
Description: Package initialization for application configuration.

- settings: pydantic-settings model read from environment and .env
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
