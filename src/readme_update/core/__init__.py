from readme_update.core.errors import GitCommandError, GitHubAPIError
from readme_update.core.models import (
    ActivityEvent,
    GitHubStats,
    LanguageShare,
    ProfileSnapshot,
)

__all__ = [
    "ActivityEvent",
    "GitHubStats",
    "LanguageShare",
    "ProfileSnapshot",
    "GitHubAPIError",
    "GitCommandError",
]
