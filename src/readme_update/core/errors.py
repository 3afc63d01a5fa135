"""
Exceptions raised by the GitHub client and the git publishing step.
"""

from typing import Optional, Sequence


class GitHubAPIError(Exception):
    """A GitHub API request failed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitCommandError(Exception):
    """A git subprocess exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"`{' '.join(self.command)}` failed with exit code {returncode}: "
            f"{stderr.strip()}"
        )
