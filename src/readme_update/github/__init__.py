from readme_update.github.client import GitHubClient
from readme_update.github.collectors import (
    aggregate_languages,
    collect_snapshot,
    fetch_activity,
    fetch_followers,
    fetch_stats,
    fetch_top_languages,
    parse_stats,
)

__all__ = [
    "GitHubClient",
    "aggregate_languages",
    "collect_snapshot",
    "fetch_activity",
    "fetch_followers",
    "fetch_stats",
    "fetch_top_languages",
    "parse_stats",
]
