"""
Assemble the full profile README from a snapshot and the profile template.

Layout:
1. Warning callout with the header art and follower/star badges
2. Tagline and horizontal rule
3. Languages, stats and activity code blocks
4. Note callout with the footer
"""

import datetime
import logging
from pathlib import Path
from typing import List

from readme_update.core.models import ProfileSnapshot
from readme_update.render.ascii import (
    create_ascii_badge,
    format_activity,
    format_language_line,
    format_stats_table,
)
from readme_update.render.template import ProfileTemplate

logger = logging.getLogger(__name__)

BADGE_WIDTH = 20
# Language name (12) plus bar and percentage (26)
LANGUAGE_COLUMN_WIDTH = 38
LANGUAGE_ART_WIDTH = 50
ACTIVITY_RULE = "-" * 60
LAST_UPDATED_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_header(snapshot: ProfileSnapshot, template: ProfileTemplate) -> List[str]:
    """Render the warning callout with the art on the left, badges on the right."""
    followers_badge = create_ascii_badge(
        "Followers", str(snapshot.followers), BADGE_WIDTH
    )
    stars_badge = create_ascii_badge(
        "Stars", str(snapshot.stats.total_stars), BADGE_WIDTH
    )
    badge_lines = f"{followers_badge}\n\n{stars_badge}".split("\n")

    art = template.header_art
    offset = template.badge_offset
    column = max((len(row) for row in art), default=0) + template.badge_gap

    lines = ["> [!WARNING]", "> ```"]
    for i in range(max(len(art), len(badge_lines) + offset)):
        art_part = art[i] if i < len(art) else ""
        badge_index = i - offset
        badge_part = (
            badge_lines[badge_index] if 0 <= badge_index < len(badge_lines) else ""
        )
        lines.append(f"> {art_part:<{column}} {badge_part}".rstrip())
    lines.append("> ```")
    return lines


def render_languages(
    snapshot: ProfileSnapshot, template: ProfileTemplate, bar_width: int = 20
) -> List[str]:
    """
    Render the language bars with the small artwork aligned to the bottom rows.

    When there are fewer languages than art rows, empty rows are added above
    the bars so the artwork is always drawn whole.
    """
    rows = [format_language_line(share, bar_width) for share in snapshot.languages]
    art = template.language_art
    if len(rows) < len(art):
        rows = [""] * (len(art) - len(rows)) + rows

    art_start = len(rows) - len(art)
    lines = ["#### 🛠️ Languages", "```css"]
    for i, row in enumerate(rows):
        if art and i >= art_start:
            art_row = art[i - art_start]
            lines.append(
                f"{row:<{LANGUAGE_COLUMN_WIDTH}} {art_row:>{LANGUAGE_ART_WIDTH}}"
            )
        else:
            lines.append(row)
    lines.append("```")
    return lines


def render_stats(snapshot: ProfileSnapshot) -> List[str]:
    return ["#### 📊 Stats", "```", format_stats_table(snapshot.stats), "```"]


def render_activity(snapshot: ProfileSnapshot) -> List[str]:
    now = snapshot.generated_at.astimezone(datetime.timezone.utc)
    lines = ["#### 🔥 Activity", "```", ACTIVITY_RULE]
    lines.extend(format_activity(event, now) for event in snapshot.activities)
    lines.extend(
        [
            ACTIVITY_RULE,
            "",
            f"Last updated: {snapshot.generated_at.strftime(LAST_UPDATED_FORMAT)}",
            "```",
        ]
    )
    return lines


def render_readme(
    snapshot: ProfileSnapshot, template: ProfileTemplate, bar_width: int = 20
) -> str:
    """
    Render the complete README markdown.

    Args:
        snapshot: Data collected from GitHub
        template: Artwork and fixed text
        bar_width: Cells per language bar

    Returns:
        README content, ending with a newline
    """
    sections = [
        render_header(snapshot, template) + [f"> <p>{template.tagline}</p>"],
        ["---"],
        render_languages(snapshot, template, bar_width),
        render_stats(snapshot),
        render_activity(snapshot),
        ["> [!NOTE]", f"> {template.footer}"],
    ]
    return "\n\n".join("\n".join(section) for section in sections) + "\n"


def write_readme(readme_path: Path, content: str) -> Path:
    path = Path(readme_path)
    path.write_text(content, encoding="utf-8")
    logger.info(f"✓ Wrote {len(content.splitlines())} lines to {path}")
    return path
