"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Raised when a git command exits non-zero
- RepositoryError: Alias of GitError used by the merge workflow
"""

from typing import Optional

from mob.errors import MobError


class GitError(MobError):
    """Raised when a git command fails.

    Attributes:
        command: The full argument vector that was run (including "git").
        returncode: The exit status, or None if git could not be started.
    """

    def __init__(
        self,
        message: str,
        command: Optional[list[str]] = None,
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode


RepositoryError = GitError
