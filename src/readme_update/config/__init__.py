"""
Configuration management module for readme_update.

This module provides centralized configuration management using pydantic-settings:

1. Base settings class with the GitHub connection parameters
2. Step-specific settings classes
3. A provider singleton to manage settings instances

Usage:
    from readme_update.config import settings_provider, UpdateSettings

    settings = settings_provider.get_settings(UpdateSettings)
    username = settings.github_username
"""

from readme_update.config.settings import (
    PublishSettings,
    ReadmeUpdateBaseSettings,
    UpdateSettings,
    settings_provider,
)

__all__ = [
    "ReadmeUpdateBaseSettings",
    "UpdateSettings",
    "PublishSettings",
    "settings_provider",
]
