"""
Unified configuration management for readme_update using pydantic-settings.

This module provides a hierarchical configuration system with:
1. A base settings class with the GitHub connection parameters
2. Step-specific settings classes (README update, git publishing)
3. A provider singleton to manage settings instances

All settings classes read environment variables and an optional .env file.
"""

from pathlib import Path
from typing import Dict, Optional, Type, TypeVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from readme_update.publish.git import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_USER_EMAIL,
    DEFAULT_USER_NAME,
)

PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent

# Type variable for settings classes
T = TypeVar("T", bound="ReadmeUpdateBaseSettings")


class ReadmeUpdateBaseSettings(BaseSettings):
    """Base settings shared by every readme_update command."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # GitHub access
    github_token: Optional[str] = Field(
        default=None, alias="GITHUB_TOKEN", description="GitHub API token"
    )
    github_username: str = Field(
        default="m4ster-slave", description="Account whose profile is rendered"
    )
    api_base: str = Field(
        default="https://api.github.com", description="GitHub REST API base URL"
    )
    graphql_url: str = Field(
        default="https://api.github.com/graphql",
        description="GitHub GraphQL endpoint",
    )
    user_agent: str = Field(
        default="readme-update GitHub Action",
        description="User-Agent header sent with every request",
    )
    request_timeout: float = Field(
        default=30.0, description="HTTP timeout in seconds"
    )

    # Files
    repo_dir: Path = Field(
        default=Path("."), description="Working tree of the repository to update"
    )
    readme_path: Path = Field(
        default=Path("README.md"),
        description="README file to generate and commit, relative to repo_dir",
    )
    profile_template_path: Path = Field(
        default=PACKAGE_CONFIG_DIR / "profile.yaml",
        description="YAML file with the artwork and fixed text of the README",
    )

    @property
    def readme_target(self) -> Path:
        """README location shared by the update and publish steps."""
        if self.readme_path.is_absolute():
            return self.readme_path
        return self.repo_dir / self.readme_path


class UpdateSettings(ReadmeUpdateBaseSettings):
    """Settings for regenerating the README."""

    # The token is mandatory for the update step
    github_token: str = Field(..., alias="GITHUB_TOKEN")

    activity_limit: int = Field(
        default=5, description="Number of recent events to list"
    )
    language_limit: int = Field(
        default=10, description="Number of languages to show"
    )
    bar_width: int = Field(default=20, description="Cells per language bar")


class PublishSettings(ReadmeUpdateBaseSettings):
    """Settings for committing and pushing the generated README."""

    git_user_name: str = Field(
        default=DEFAULT_USER_NAME, description="Commit author name"
    )
    git_user_email: str = Field(
        default=DEFAULT_USER_EMAIL, description="Commit author email"
    )
    commit_message: str = Field(
        default=DEFAULT_COMMIT_MESSAGE, description="Message of the README commit"
    )


class SettingsProvider:
    """
    Central provider for application settings.

    This singleton ensures consistent settings access throughout the application.
    Settings instances are cached to avoid redundant parsing.

    Example usage:
        settings = settings_provider.get_settings(UpdateSettings)
        token = settings.github_token
    """

    _instance = None
    _settings_cache: Dict[str, ReadmeUpdateBaseSettings] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._settings_cache = {}
        return cls._instance

    def get_settings(self, settings_class: Type[T] = ReadmeUpdateBaseSettings) -> T:
        """
        Get settings of the specified type.

        Args:
            settings_class: Settings class to instantiate (defaults to
                ReadmeUpdateBaseSettings)

        Returns:
            Instance of the requested settings class
        """
        class_name = settings_class.__name__
        if class_name not in self._settings_cache:
            self._settings_cache[class_name] = settings_class()
        return self._settings_cache[class_name]  # type: ignore

    def clear(self) -> None:
        """Drop cached instances so the next lookup re-reads the environment."""
        self._settings_cache.clear()


# Global settings provider instance
settings_provider = SettingsProvider()
