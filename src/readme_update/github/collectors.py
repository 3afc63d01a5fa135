"""
Collect the data shown in the profile README from the GitHub API.

Failure policy per data source:
- activity, languages and stats: API errors propagate and abort the update
- followers: API errors are logged and the count falls back to 0
"""

import datetime
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional

from readme_update.core.errors import GitHubAPIError
from readme_update.core.models import (
    ActivityEvent,
    GitHubStats,
    LanguageShare,
    ProfileSnapshot,
)
from readme_update.github.client import GitHubClient

logger = logging.getLogger(__name__)

STATS_QUERY = """
query($login: String!) {
  user(login: $login) {
    name
    contributionsCollection {
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
      restrictedContributionsCount
    }
    repositories(first: 100, ownerAffiliations: OWNER, isFork: false) {
      totalCount
      nodes {
        stargazerCount
      }
    }
    repositoriesContributedTo(
      first: 1, contributionTypes: [COMMIT, ISSUE, PULL_REQUEST, REPOSITORY]
    ) {
      totalCount
    }
  }
}
"""


def fetch_activity(
    client: GitHubClient, username: str, limit: int = 5
) -> List[ActivityEvent]:
    """Return the `limit` most recent public events of the user."""
    events = client.get_public_events(username)
    return [ActivityEvent.from_api(event) for event in events[:limit]]


def aggregate_languages(
    byte_counts: Iterable[Mapping[str, int]], limit: int = 10
) -> List[LanguageShare]:
    """
    Merge per-repository language byte counts into overall percentages.

    Args:
        byte_counts: One `{language: bytes}` mapping per repository
        limit: Maximum number of languages to keep

    Returns:
        Languages sorted by share, largest first. Empty when no bytes were
        counted at all.
    """
    totals: Dict[str, int] = defaultdict(int)
    for counts in byte_counts:
        for language, count in counts.items():
            if isinstance(count, int) and not isinstance(count, bool) and count > 0:
                totals[language] += count

    total_bytes = sum(totals.values())
    if total_bytes == 0:
        return []

    shares = [
        LanguageShare(name=language, percentage=count / total_bytes * 100.0)
        for language, count in totals.items()
    ]
    # sorted() is stable, ties keep first-seen order
    shares = sorted(shares, key=lambda share: share.percentage, reverse=True)
    return shares[:limit]


def fetch_top_languages(
    client: GitHubClient, username: str, limit: int = 10
) -> List[LanguageShare]:
    """Fetch every repository's languages and aggregate them."""
    repositories = client.get_repositories(username)
    byte_counts = []
    for repo in repositories:
        languages_url = repo.get("languages_url")
        if not languages_url:
            continue
        byte_counts.append(client.get_languages(languages_url))

    logger.info(f"Collected languages from {len(byte_counts)} repositories")
    return aggregate_languages(byte_counts, limit=limit)


def parse_stats(payload: dict) -> GitHubStats:
    """Convert a GraphQL stats response, warning about query-level errors."""
    errors = payload.get("errors")
    if errors:
        messages = "; ".join(
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in errors
        )
        logger.warning(f"GraphQL query reported errors: {messages}")
    return GitHubStats.from_graphql(payload)


def fetch_stats(client: GitHubClient, username: str) -> GitHubStats:
    payload = client.graphql(STATS_QUERY, {"login": username})
    return parse_stats(payload)


def fetch_followers(client: GitHubClient, username: str) -> int:
    """Return the follower count, or 0 if it cannot be fetched."""
    try:
        user = client.get_user(username)
    except GitHubAPIError as e:
        logger.warning(f"Could not fetch followers for {username}: {e}")
        return 0

    followers = user.get("followers")
    if isinstance(followers, bool) or not isinstance(followers, int) or followers < 0:
        return 0
    return followers


def collect_snapshot(
    client: GitHubClient,
    username: str,
    activity_limit: int = 5,
    language_limit: int = 10,
    generated_at: Optional[datetime.datetime] = None,
) -> ProfileSnapshot:
    """
    Gather everything the README shows into a single snapshot.

    Args:
        client: Authenticated GitHub client
        username: Account to describe
        activity_limit: Number of recent events to keep
        language_limit: Number of languages to keep
        generated_at: Timestamp to record (defaults to now, local time)

    Returns:
        ProfileSnapshot with activity, languages, stats and followers
    """
    logger.info(f"Fetching GitHub data for {username}")
    activities = fetch_activity(client, username, limit=activity_limit)
    languages = fetch_top_languages(client, username, limit=language_limit)
    stats = fetch_stats(client, username)
    followers = fetch_followers(client, username)

    snapshot = ProfileSnapshot(
        username=username,
        followers=followers,
        stats=stats,
        languages=languages,
        activities=activities,
    )
    if generated_at is not None:
        snapshot = snapshot.model_copy(update={"generated_at": generated_at})
    return snapshot
