"""
Commit and push the regenerated README with the git command line.

Failure policy mirrors the workflow's shell step:

    git config --local user.email ...
    git config --local user.name ...
    git add README.md
    git commit -m "🔄 Update README" || echo "No changes to commit"
    git push || echo "No changes to push"

Identity and staging failures raise GitCommandError; a failed commit or push
is logged and the step still succeeds.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from readme_update.core.errors import GitCommandError

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 120

DEFAULT_USER_NAME = "github-actions[bot]"
DEFAULT_USER_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"
DEFAULT_COMMIT_MESSAGE = "🔄 Update README"


@dataclass(frozen=True)
class PublishResult:
    """Outcome of a publish run."""

    committed: bool
    pushed: bool


class GitPublisher:
    """Runs the git commands of the publish step inside one working tree."""

    def __init__(self, repo_dir: Path = Path("."), git_executable: str = "git"):
        self.repo_dir = Path(repo_dir)
        self.git_executable = git_executable

    def run(self, *args: str) -> subprocess.CompletedProcess:
        """
        Run a git command and raise GitCommandError on a non-zero exit.

        Args:
            *args: Arguments after the git executable

        Returns:
            The completed process with decoded stdout/stderr
        """
        cmd: List[str] = [self.git_executable, *args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                cwd=str(self.repo_dir),
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=GIT_TIMEOUT_SECONDS,
            )
        except (subprocess.TimeoutExpired, FileNotFoundError) as e:
            raise GitCommandError(cmd, -1, str(e)) from e

        if result.returncode != 0:
            raise GitCommandError(cmd, result.returncode, result.stderr or "")
        return result

    def configure_identity(self, user_name: str, user_email: str) -> None:
        self.run("config", "--local", "user.email", user_email)
        self.run("config", "--local", "user.name", user_name)

    def add(self, paths: Sequence[Path]) -> None:
        self.run("add", *[str(p) for p in paths])

    def commit(self, message: str) -> bool:
        """Commit staged changes; returns False instead of raising on failure."""
        try:
            self.run("commit", "-m", message)
        except GitCommandError as e:
            logger.info("No changes to commit")
            logger.debug(str(e))
            return False
        return True

    def push(self) -> bool:
        """Push the current branch; returns False instead of raising on failure."""
        try:
            self.run("push")
        except GitCommandError as e:
            logger.info("No changes to push")
            logger.debug(str(e))
            return False
        return True


def publish_readme(
    readme_path: Path,
    repo_dir: Path = Path("."),
    user_name: str = DEFAULT_USER_NAME,
    user_email: str = DEFAULT_USER_EMAIL,
    commit_message: str = DEFAULT_COMMIT_MESSAGE,
    publisher: Optional[GitPublisher] = None,
) -> PublishResult:
    """
    Stage, commit and push the README as the bot identity.

    Args:
        readme_path: README file, relative to `repo_dir` or absolute
        repo_dir: Repository working tree
        user_name: Commit author name
        user_email: Commit author email
        commit_message: Commit message
        publisher: Pre-built publisher (defaults to one for `repo_dir`)

    Returns:
        PublishResult telling whether a commit and a push happened
    """
    publisher = publisher or GitPublisher(repo_dir)

    publisher.configure_identity(user_name, user_email)
    publisher.add([readme_path])
    committed = publisher.commit(commit_message)
    pushed = publisher.push()

    if committed and pushed:
        logger.info(f"✓ Published {readme_path}")
    return PublishResult(committed=committed, pushed=pushed)
