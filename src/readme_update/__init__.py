"""
readme-update: regenerates a GitHub profile README from live account data.

This package provides components for:
- Fetching public activity, language usage and contribution stats from GitHub
- Rendering them as ASCII art sections of a markdown README
- Committing and pushing the refreshed README from a scheduled workflow
"""

__version__ = "0.1.0"
