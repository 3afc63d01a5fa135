from readme_update.render.ascii import (
    create_ascii_badge,
    create_ascii_bar,
    format_activity,
    format_language_line,
    format_stats_table,
)
from readme_update.render.readme import render_readme, write_readme
from readme_update.render.template import ProfileTemplate, load_profile_template

__all__ = [
    "ProfileTemplate",
    "create_ascii_badge",
    "create_ascii_bar",
    "format_activity",
    "format_language_line",
    "format_stats_table",
    "load_profile_template",
    "render_readme",
    "write_readme",
]
