"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its trimmed output
- run_git: Run a git command with output streamed to the terminal
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from mob.git.exceptions import GitError


def _run_git_command(args: list[str], cwd: Path = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (optional, defaults to the process cwd).

    Returns:
        The stdout of the git command, stripped of surrounding whitespace.

    Raises:
        GitError: If the command fails.
    """
    command = ["git"] + args
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(
            f"Git command failed: git {' '.join(args)} (exit status {e.returncode})\n{stderr}".rstrip(),
            command=command,
            returncode=e.returncode,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.", command=command)


def run_git(args: list[str], cwd: Path = None) -> None:
    """Run a git command with stdout and stderr connected to the terminal.

    Used for mutating and long-running commands (checkout, merge, commit,
    push) where the operator should see git's own output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (optional, defaults to the process cwd).

    Raises:
        GitError: If the command exits non-zero.
    """
    command = ["git"] + args
    try:
        subprocess.run(command, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        raise GitError(
            f"Git command failed: git {' '.join(args)} (exit status {e.returncode})",
            command=command,
            returncode=e.returncode,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.", command=command)


def get_repo_root(cwd: Path = None) -> Path:
    """Get the root directory of the current git repository.

    Args:
        cwd: Directory to start from (optional).

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
        return Path(root)
    except GitError as e:
        raise GitError(
            "Not in a git repository. Please run this command from within a git repo.",
            command=e.command,
            returncode=e.returncode,
        )
