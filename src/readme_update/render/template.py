"""
Loading of the YAML profile template (artwork, tagline and footer).
"""

import logging
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("header_art", "tagline", "language_art", "footer")


class ProfileTemplate(BaseModel):
    """Static parts of the README that do not come from the GitHub API."""

    header_art: List[str]
    language_art: List[str] = Field(default_factory=list)
    tagline: str = ""
    footer: str = ""
    badge_offset: int = Field(default=3, ge=0)
    badge_gap: int = Field(default=20, ge=1)

    model_config = ConfigDict(frozen=True, extra="forbid")


def load_profile_template(template_path: Path) -> ProfileTemplate:
    """
    Load the profile template from YAML.

    The file must contain the top-level keys `header_art`, `tagline`,
    `language_art` and `footer`. If the file is missing or invalid the
    function raises SystemExit.
    """
    p = Path(template_path)
    if not p.exists():
        raise SystemExit(f"Profile template not found: {p}")

    try:
        with open(p, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SystemExit(f"Failed to read profile template {p}: {e}")

    if not isinstance(data, dict):
        raise SystemExit(f"Profile template {p} must be a mapping")

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise SystemExit(
            f"Profile template {p} is missing keys: " + ", ".join(missing)
        )

    try:
        template = ProfileTemplate.model_validate(data)
    except ValidationError as e:
        raise SystemExit(f"Invalid profile template {p}: {e}")

    logger.debug(
        f"Loaded template with {len(template.header_art)} header rows and "
        f"{len(template.language_art)} language art rows"
    )
    return template
