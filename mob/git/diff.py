"""Git diff utilities.

Contains:
- get_diff: Full diff between two refs
- get_diff_stat: Diff statistics between two refs
- get_diff_files: Names of files changed between two refs
"""

from pathlib import Path

from mob.git.runner import _run_git_command


def get_diff(base: str, head: str, cwd: Path = None) -> str:
    """Return the diff between two refs."""
    return _run_git_command(["diff", base, head], cwd=cwd)


def get_diff_stat(base: str, head: str, cwd: Path = None) -> str:
    """Return ``git diff --stat`` output between two refs."""
    return _run_git_command(["diff", "--stat", base, head], cwd=cwd)


def get_diff_files(base: str, head: str, cwd: Path = None) -> list[str]:
    """Return the list of files changed between two refs.

    Returns:
        File paths relative to the repository root, empty if nothing changed.
    """
    output = _run_git_command(["diff", "--name-only", base, head], cwd=cwd)
    if not output:
        return []
    return output.split("\n")
