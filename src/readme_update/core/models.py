"""
Pydantic models for the GitHub data rendered into the profile README.
"""

import datetime
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


def parse_timestamp(value: Optional[str]) -> Optional[datetime.datetime]:
    """Parse an RFC 3339 timestamp as returned by the GitHub API.

    Returns None for missing or malformed values.
    """
    if not value:
        return None
    try:
        # fromisoformat only accepts a trailing "Z" from Python 3.11 on
        return datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable timestamp '{value}'")
        return None


class ActivityEvent(BaseModel):
    """A single public event from the user's activity feed."""

    event_type: str = ""
    repo_name: str = ""
    created_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_api(cls, data: dict) -> "ActivityEvent":
        """
        Build an event from a raw `/users/{user}/events/public` item.

        The `Event` suffix is stripped from the type (`PushEvent` -> `Push`).
        """
        event_type = str(data.get("type") or "").replace("Event", "")
        repo = data.get("repo") or {}
        return cls(
            event_type=event_type,
            repo_name=str(repo.get("name") or ""),
            created_at=parse_timestamp(data.get("created_at")),
        )


class LanguageShare(BaseModel):
    """Share of a language across all of the user's repositories."""

    name: str
    percentage: float

    model_config = ConfigDict(frozen=True)


class GitHubStats(BaseModel):
    """Contribution statistics from the GraphQL API."""

    total_commits: int = 0
    total_prs: int = 0
    total_issues: int = 0
    total_stars: int = 0
    repos_owned: int = 0
    contributed_to: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_graphql(cls, payload: dict) -> "GitHubStats":
        """
        Create stats from a GraphQL response body.

        Any missing or null value counts as 0, so a response without a `user`
        object produces all-zero stats.

        Args:
            payload: Decoded JSON body of the GraphQL response

        Returns:
            An instance of GitHubStats
        """
        user = _get(payload, "data", "user")
        contributions = _get(user, "contributionsCollection")
        repositories = _get(user, "repositories")

        nodes = _get(repositories, "nodes")
        total_stars = sum(
            _as_int(_get(node, "stargazerCount"))
            for node in (nodes if isinstance(nodes, list) else [])
        )

        return cls(
            total_commits=_as_int(_get(contributions, "totalCommitContributions"))
            + _as_int(_get(contributions, "restrictedContributionsCount")),
            total_prs=_as_int(_get(contributions, "totalPullRequestContributions")),
            total_issues=_as_int(_get(contributions, "totalIssueContributions")),
            total_stars=total_stars,
            repos_owned=_as_int(_get(repositories, "totalCount")),
            contributed_to=_as_int(
                _get(user, "repositoriesContributedTo", "totalCount")
            ),
        )


class ProfileSnapshot(BaseModel):
    """Everything needed to render the README at one point in time."""

    username: str
    followers: int = 0
    stats: GitHubStats = Field(default_factory=GitHubStats)
    languages: List[LanguageShare] = Field(default_factory=list)
    activities: List[ActivityEvent] = Field(default_factory=list)
    generated_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now().astimezone()
    )

    @field_validator("followers")
    @classmethod
    def validate_followers(cls, v: int) -> int:
        if v < 0:
            raise ValueError("followers cannot be negative")
        return v


def _get(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _as_int(value: Any) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value
