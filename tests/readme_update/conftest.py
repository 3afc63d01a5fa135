"""
Shared fixtures: canned GitHub API payloads served through httpx.MockTransport.
"""

import datetime

import httpx
import pytest

from readme_update.config import settings_provider
from readme_update.core.models import (
    ActivityEvent,
    GitHubStats,
    LanguageShare,
    ProfileSnapshot,
)
from readme_update.render.template import ProfileTemplate

USERNAME = "octo"

EVENTS = [
    {
        "type": "PushEvent",
        "repo": {"name": "octo/alpha"},
        "created_at": "2024-03-05T14:07:00Z",
    },
    {
        "type": "PullRequestEvent",
        "repo": {"name": "octo/beta"},
        "created_at": "2024-03-04T09:30:00Z",
    },
    {
        "type": "WatchEvent",
        "repo": {"name": "someone/gamma"},
        "created_at": "2024-03-03T08:00:00Z",
    },
]

REPOSITORIES = [
    {
        "name": "alpha",
        "languages_url": "https://api.github.com/repos/octo/alpha/languages",
    },
    {
        "name": "beta",
        "languages_url": "https://api.github.com/repos/octo/beta/languages",
    },
    # Forks or empty repos may come without a languages URL
    {"name": "empty"},
]

LANGUAGES = {
    "/repos/octo/alpha/languages": {"Python": 300},
    "/repos/octo/beta/languages": {"Python": 100, "Rust": 100},
}

STATS_PAYLOAD = {
    "data": {
        "user": {
            "name": "Octo",
            "contributionsCollection": {
                "totalCommitContributions": 120,
                "totalPullRequestContributions": 7,
                "totalIssueContributions": 3,
                "restrictedContributionsCount": 5,
            },
            "repositories": {
                "totalCount": 4,
                "nodes": [
                    {"stargazerCount": 10},
                    {"stargazerCount": 2},
                    {"stargazerCount": 0},
                    {"stargazerCount": 1},
                ],
            },
            "repositoriesContributedTo": {"totalCount": 6},
        }
    }
}


def github_handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == f"/users/{USERNAME}/events/public":
        return httpx.Response(200, json=EVENTS)
    if path == f"/users/{USERNAME}/repos":
        return httpx.Response(200, json=REPOSITORIES)
    if path in LANGUAGES:
        return httpx.Response(200, json=LANGUAGES[path])
    if path == "/graphql":
        return httpx.Response(200, json=STATS_PAYLOAD)
    if path == f"/users/{USERNAME}":
        return httpx.Response(200, json={"login": USERNAME, "followers": 42})
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def mock_http_client():
    client = httpx.Client(transport=httpx.MockTransport(github_handler))
    yield client
    client.close()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    settings_provider.clear()
    yield
    settings_provider.clear()


@pytest.fixture
def generated_at() -> datetime.datetime:
    return datetime.datetime(2024, 3, 6, 12, 30, 45, tzinfo=datetime.timezone.utc)


@pytest.fixture
def sample_snapshot(generated_at) -> ProfileSnapshot:
    return ProfileSnapshot(
        username=USERNAME,
        followers=42,
        stats=GitHubStats(
            total_commits=125,
            total_prs=7,
            total_issues=3,
            total_stars=13,
            repos_owned=4,
            contributed_to=6,
        ),
        languages=[
            LanguageShare(name="Python", percentage=80.0),
            LanguageShare(name="Rust", percentage=20.0),
        ],
        activities=[ActivityEvent.from_api(event) for event in EVENTS],
        generated_at=generated_at,
    )


@pytest.fixture
def small_template() -> ProfileTemplate:
    return ProfileTemplate(
        header_art=["AAAA", "BBBB", "CCCC", "DDDD", "EEEE"],
        language_art=["xx", "yy", "zz"],
        tagline="tag line",
        footer="foot",
        badge_offset=1,
        badge_gap=4,
    )
