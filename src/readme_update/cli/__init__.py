"""Command line interface for readme_update."""
