"""Git branch and commit utilities.

Contains:
- checkout: Switch to a branch or commit
- checkout_new_branch: Create a branch at HEAD and switch to it
- pull: Fetch and merge the upstream of the current branch
- delete_branch: Force-delete a local branch
- get_current_branch: Get the current branch name
- branch_exists: Check whether a ref resolves
- get_commit_hash: Resolve a ref to a commit hash
- get_commits_between: List commit hashes in base..head, newest first
"""

from pathlib import Path

from mob.git.runner import _run_git_command, run_git
from mob.git.exceptions import GitError


def checkout(ref: str, cwd: Path = None) -> None:
    """Switch to the given branch or commit.

    Args:
        ref: Branch name or commit hash.
        cwd: Repository directory (optional).
    """
    run_git(["checkout", ref], cwd=cwd)


def checkout_new_branch(branch: str, cwd: Path = None) -> None:
    """Create a new branch at HEAD and switch to it.

    Args:
        branch: Name of the branch to create.
        cwd: Repository directory (optional).
    """
    run_git(["checkout", "-b", branch], cwd=cwd)


def pull(cwd: Path = None) -> None:
    """Fetch and merge the latest changes for the current branch."""
    run_git(["pull"], cwd=cwd)


def delete_branch(branch: str, cwd: Path = None) -> None:
    """Delete a local branch even if it is not merged anywhere.

    Raises:
        GitError: If the branch does not exist or is checked out.
    """
    run_git(["branch", "-D", branch], cwd=cwd)


def get_current_branch(cwd: Path = None) -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD' if in detached state.
    """
    return _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)


def branch_exists(branch: str, cwd: Path = None) -> bool:
    """Check if a branch (or any ref) exists.

    Args:
        branch: The ref to verify.
        cwd: Repository directory (optional).

    Returns:
        True if the ref resolves to an object, False otherwise.
    """
    try:
        _run_git_command(["rev-parse", "--verify", branch], cwd=cwd)
        return True
    except GitError:
        return False


def get_commit_hash(ref: str, cwd: Path = None) -> str:
    """Return the full commit hash a ref points to.

    Raises:
        GitError: If the ref does not resolve.
    """
    return _run_git_command(["rev-parse", ref], cwd=cwd)


def get_commits_between(base: str, head: str, cwd: Path = None) -> list[str]:
    """Get commit hashes reachable from head but not from base.

    Args:
        base: Exclusive lower bound (usually the fork point).
        head: Inclusive upper bound (usually the wip branch).
        cwd: Repository directory (optional).

    Returns:
        Commit hashes, newest first. Empty if head adds nothing over base.
    """
    output = _run_git_command(["log", "--format=%H", f"{base}..{head}"], cwd=cwd)
    if not output:
        return []
    return output.split("\n")
