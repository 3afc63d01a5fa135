"""
ASCII building blocks for the profile README: bars, badges, tables and lines.
"""

import datetime
import math
from typing import Optional

from readme_update.core.models import ActivityEvent, GitHubStats, LanguageShare

BAR_FILLED = "█"
BAR_EDGE = "▓"
BAR_EMPTY = "░"

ACTIVITY_DATE_FORMAT = "%Y-%m-%d %H:%M"

STATS_TABLE_TEMPLATE = (
    "+-------------+------------------------+----------------+"
    "--------------------------------------+\n"
    "|   Metric    |         Value          |     Metric     |"
    "                Value                 |\n"
    "+-------------+------------------------+----------------+"
    "--------------------------------------+\n"
    "|   Commits   | {total_commits:>22} | Issues opened  | {total_issues:>36} |\n"
    "| PRs opened  | {total_prs:>22} | Stars received | {total_stars:>36} |\n"
    "| Repos owned | {repos_owned:>22} | Contributed to | {contributed_to:>36} |\n"
    "+-------------+------------------------+----------------+"
    "--------------------------------------+"
)


def create_ascii_bar(percentage: float, width: int = 20) -> str:
    """
    Draw a horizontal progress bar such as `[████▓░░░]`.

    Cells before the fill point are solid, the cell at the fill point is the
    shaded edge and the rest are empty. A 100% bar has no edge cell.

    Args:
        percentage: Value between 0 and 100
        width: Number of cells between the brackets

    Returns:
        The bar, including the surrounding brackets
    """
    # Round half up, not to even
    filled = int(math.floor(percentage / 100.0 * width + 0.5))
    cells = []
    for i in range(width):
        if i < filled:
            cells.append(BAR_FILLED)
        elif i == filled:
            cells.append(BAR_EDGE)
        else:
            cells.append(BAR_EMPTY)
    return f"[{''.join(cells)}]"


def create_ascii_badge(label: str, value: str, width: int = 20) -> str:
    """
    Draw a three-line rounded badge:

        ╭────────────────────╮
        │ Followers│ 42      │
        ╰────────────────────╯

    The inner width grows beyond `width` when label and value do not fit.
    """
    total_width = max(width, len(label) + len(value) + 4)
    label_width = len(label) + 2
    value_width = total_width - label_width

    border = "─" * total_width
    label_part = f" {label:<{label_width - 2}}"
    value_part = f" {value:<{value_width - 2}} "

    return f"╭{border}╮\n│{label_part}│{value_part}│\n╰{border}╯"


def format_activity(
    event: ActivityEvent, now: Optional[datetime.datetime] = None
) -> str:
    """Format an event as `date | type | repo`; undated events show `now`."""
    created_at = event.created_at
    if created_at is None:
        created_at = now or datetime.datetime.now(datetime.timezone.utc)
    date = created_at.strftime(ACTIVITY_DATE_FORMAT)
    return f"{date:<16} | {event.event_type:<15} | {event.repo_name}"


def format_stats_table(stats: GitHubStats) -> str:
    return STATS_TABLE_TEMPLATE.format(**stats.model_dump())


def format_language_line(share: LanguageShare, bar_width: int = 20) -> str:
    bar = create_ascii_bar(share.percentage, bar_width)
    return f"{share.name:<12} {bar} {share.percentage:.1f}%"
