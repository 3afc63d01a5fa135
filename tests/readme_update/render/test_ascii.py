"""
Tests for the ASCII building blocks.

Focuses on rounding and alignment, the places where the rendered README
visibly breaks.
"""

import datetime

import pytest

from readme_update.core.models import ActivityEvent, GitHubStats, LanguageShare
from readme_update.render.ascii import (
    create_ascii_badge,
    create_ascii_bar,
    format_activity,
    format_language_line,
    format_stats_table,
)


class TestAsciiBar:
    @pytest.mark.parametrize(
        "percentage,width,expected,description",
        [
            (0.0, 20, "[▓" + "░" * 19 + "]", "empty bar keeps the edge cell"),
            (100.0, 20, "[" + "█" * 20 + "]", "full bar has no edge cell"),
            (50.0, 20, "[" + "█" * 10 + "▓" + "░" * 9 + "]", "half bar"),
            (12.5, 20, "[" + "█" * 3 + "▓" + "░" * 16 + "]", "2.5 cells round up"),
            (50.0, 4, "[██▓░]", "custom width"),
        ],
    )
    def test_bar_cells(self, percentage, width, expected, description):
        assert create_ascii_bar(percentage, width) == expected, description

    @pytest.mark.parametrize("percentage", [0.0, 3.3, 49.9, 77.7, 100.0])
    def test_bar_width_is_constant(self, percentage):
        assert len(create_ascii_bar(percentage, 20)) == 22


class TestAsciiBadge:
    def test_badge_layout(self):
        badge = create_ascii_badge("Followers", "42", 20)

        assert badge.split("\n") == [
            "╭" + "─" * 20 + "╮",
            f"│ Followers│ {'42':<7} │",
            "╰" + "─" * 20 + "╯",
        ]

    def test_badge_grows_for_long_values(self):
        badge = create_ascii_badge("Stars", "1234567890123456", 20)
        lines = badge.split("\n")

        # 5 + 16 + 4 = 25 cells between the corners
        assert lines[0] == "╭" + "─" * 25 + "╮"
        assert {len(line) for line in lines} == {27}
        assert "1234567890123456" in lines[1]


class TestFormatActivity:
    def test_dated_event(self):
        event = ActivityEvent.from_api(
            {
                "type": "PushEvent",
                "repo": {"name": "octo/alpha"},
                "created_at": "2024-03-05T14:07:00Z",
            }
        )

        assert format_activity(event) == (
            f"2024-03-05 14:07 | {'Push':<15} | octo/alpha"
        )

    def test_undated_event_uses_now(self):
        event = ActivityEvent.from_api(
            {"type": "CreateEvent", "repo": {"name": "octo/new"}, "created_at": "bad"}
        )
        now = datetime.datetime(2025, 1, 2, 3, 4, tzinfo=datetime.timezone.utc)

        assert event.created_at is None
        assert format_activity(event, now).startswith("2025-01-02 03:04 | Create")

    def test_missing_fields_render_empty(self):
        event = ActivityEvent.from_api({})
        now = datetime.datetime(2025, 1, 2, 3, 4)

        assert format_activity(event, now) == f"2025-01-02 03:04 | {'':<15} | "


class TestStatsTable:
    def test_values_are_right_aligned(self):
        stats = GitHubStats(
            total_commits=125,
            total_prs=7,
            total_issues=3,
            total_stars=13,
            repos_owned=4,
            contributed_to=6,
        )

        table = format_stats_table(stats)
        lines = table.split("\n")

        assert len(lines) == 7
        assert len({len(line) for line in lines}) == 1
        assert f"|   Commits   | {125:>22} | Issues opened  | {3:>36} |" in lines
        assert f"| PRs opened  | {7:>22} | Stars received | {13:>36} |" in lines
        assert f"| Repos owned | {4:>22} | Contributed to | {6:>36} |" in lines

    def test_zero_stats(self):
        table = format_stats_table(GitHubStats())
        assert table.count(" 0 |") == 6


def test_format_language_line():
    line = format_language_line(LanguageShare(name="Python", percentage=80.0), 20)

    assert line == "Python       [" + "█" * 16 + "▓" + "░" * 3 + "] 80.0%"
