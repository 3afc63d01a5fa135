"""
CLI for regenerating and publishing the GitHub profile README.

Commands:
1. update  - fetch GitHub data and write README.md
2. publish - commit and push README.md as the bot identity
3. run     - update followed by publish
4. stats   - print the collected numbers without writing anything
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import coloredlogs
import httpx
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from tabulate import tabulate

from readme_update.config import PublishSettings, UpdateSettings, settings_provider
from readme_update.core.errors import GitCommandError, GitHubAPIError
from readme_update.core.models import ProfileSnapshot
from readme_update.github.client import GitHubClient
from readme_update.github.collectors import collect_snapshot
from readme_update.publish.git import PublishResult, publish_readme
from readme_update.render.readme import render_readme, write_readme
from readme_update.render.template import load_profile_template

# Make .env values visible to settings and to the git subprocesses
load_dotenv()

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    coloredlogs.install(
        level="DEBUG" if verbose else "INFO",
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_update_settings() -> UpdateSettings:
    """Load UpdateSettings, exiting with a readable message if the token is missing."""
    try:
        return settings_provider.get_settings(UpdateSettings)
    except ValidationError as e:
        missing = ", ".join(
            str(error["loc"][0]) for error in e.errors() if error.get("loc")
        )
        logger.error(f"Invalid configuration ({missing}); is GITHUB_TOKEN set?")
        sys.exit(1)


def build_snapshot(
    settings: UpdateSettings, http_client: Optional[httpx.Client] = None
) -> ProfileSnapshot:
    with GitHubClient(
        token=settings.github_token,
        api_base=settings.api_base,
        graphql_url=settings.graphql_url,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout,
        http_client=http_client,
    ) as client:
        return collect_snapshot(
            client,
            settings.github_username,
            activity_limit=settings.activity_limit,
            language_limit=settings.language_limit,
        )


def update_readme(
    settings: UpdateSettings,
    output: Optional[Path] = None,
    dry_run: bool = False,
    http_client: Optional[httpx.Client] = None,
    console: Optional[Console] = None,
) -> str:
    """
    Fetch GitHub data, render the README and write it (unless dry-run).

    Args:
        settings: Update settings
        output: Target file (defaults to readme_path inside repo_dir)
        dry_run: Print the README instead of writing it
        http_client: Optional pre-configured httpx client
        console: Rich console used for dry-run output

    Returns:
        The rendered README content
    """
    template = load_profile_template(settings.profile_template_path)
    snapshot = build_snapshot(settings, http_client=http_client)
    content = render_readme(snapshot, template, bar_width=settings.bar_width)

    if dry_run:
        console = console or Console()
        # Markup off: the README contains [!WARNING] style brackets
        console.print(content, markup=False, highlight=False)
        return content

    target = output or settings.readme_target
    write_readme(target, content)
    logger.info(f"✅ {target} has been updated successfully.")
    return content


def publish(
    settings: PublishSettings, readme_path: Optional[Path] = None
) -> PublishResult:
    """
    Commit and push the README written by update_readme.

    Args:
        settings: Publish settings
        readme_path: File written with --output, relative to the current
            directory (defaults to readme_path inside repo_dir)
    """
    # git runs inside repo_dir, so an explicit path must not stay cwd-relative
    return publish_readme(
        readme_path=readme_path.absolute() if readme_path else settings.readme_path,
        repo_dir=settings.repo_dir,
        user_name=settings.git_user_name,
        user_email=settings.git_user_email,
        commit_message=settings.commit_message,
    )


def update_command(args):
    """Regenerate the README."""
    settings = load_update_settings()
    output = Path(args.output) if args.output else None
    try:
        update_readme(
            settings, output=output, dry_run=getattr(args, "dry_run", False)
        )
    except GitHubAPIError as e:
        logger.error(f"GitHub API request failed: {e}")
        sys.exit(1)


def publish_command(args):
    """Commit and push the README."""
    settings = settings_provider.get_settings(PublishSettings)
    output = getattr(args, "output", None)
    readme_path = Path(output) if output else None
    try:
        publish(settings, readme_path=readme_path)
    except GitCommandError as e:
        logger.error(str(e))
        sys.exit(1)


def run_command(args):
    """Regenerate, then commit and push."""
    update_command(args)
    publish_command(args)


def stats_command(args):
    """Show the numbers that would be rendered."""
    settings = load_update_settings()
    try:
        snapshot = build_snapshot(settings)
    except GitHubAPIError as e:
        logger.error(f"GitHub API request failed: {e}")
        sys.exit(1)

    print(f"\n=== GitHub Profile: {snapshot.username} ===")
    stats = snapshot.stats
    stats_table = [
        ["Followers", snapshot.followers],
        ["Commits", stats.total_commits],
        ["PRs opened", stats.total_prs],
        ["Issues opened", stats.total_issues],
        ["Stars received", stats.total_stars],
        ["Repos owned", stats.repos_owned],
        ["Contributed to", stats.contributed_to],
    ]
    print(tabulate(stats_table, tablefmt="plain"))

    if snapshot.languages:
        print("\n=== Languages ===")
        language_table = [
            [share.name, f"{share.percentage:.1f}%"] for share in snapshot.languages
        ]
        print(
            tabulate(
                language_table,
                headers=["Language", "Share"],
                tablefmt="grid",
            )
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-update",
        description="Regenerate and publish a GitHub profile README",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    update_parser = subparsers.add_parser(
        "update", help="Fetch GitHub data and write the README"
    )
    update_parser.add_argument(
        "--output", help="File to write (default: README_PATH or README.md)"
    )
    update_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the README instead of writing it",
    )

    run_parser = subparsers.add_parser(
        "run", help="Update the README, then commit and push it"
    )
    run_parser.add_argument(
        "--output", help="File to write (default: README_PATH or README.md)"
    )

    subparsers.add_parser("publish", help="Commit and push the README")
    subparsers.add_parser("stats", help="Show the collected GitHub numbers")
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "update":
        update_command(args)
    elif args.command == "publish":
        publish_command(args)
    elif args.command == "run":
        run_command(args)
    elif args.command == "stats":
        stats_command(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
