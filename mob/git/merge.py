"""Git merge, commit and history-rewriting utilities.

Contains:
- merge_squash: Squash-merge a branch into the working tree and index
- abort_merge: Abort an in-progress merge
- reset_merge: Discard a staged or conflicted merge result, including a squash
- commit_squash: Commit the staged squash result
- reset_hard: Reset the current branch to a commit, discarding changes
- push_set_upstream: Push a branch and set its upstream
- is_merge_in_progress: Check if a merge is currently in progress
"""

from pathlib import Path
from typing import Optional

from mob.git.runner import _run_git_command, run_git, get_repo_root
from mob.git.exceptions import GitError


def merge_squash(branch: str, strategy_option: Optional[str] = "theirs", cwd: Path = None) -> None:
    """Squash-merge a branch into the current branch without committing.

    Args:
        branch: The branch whose changes are merged.
        strategy_option: Value for ``-X`` (e.g. "theirs" so incoming hunks win
            on conflict). None merges without a strategy option, so conflicts
            make the command fail.
        cwd: Repository directory (optional).
    """
    args = ["merge", "--squash"]
    if strategy_option:
        args += ["-X", strategy_option]
    args.append(branch)
    run_git(args, cwd=cwd)


def abort_merge(cwd: Path = None) -> None:
    """Abort an in-progress merge.

    Raises:
        GitError: If no merge is in progress.
    """
    run_git(["merge", "--abort"], cwd=cwd)


def reset_merge(cwd: Path = None) -> None:
    """Reset the index and the files touched by an uncommitted merge.

    A squash-merge writes no MERGE_HEAD, so `merge --abort` cannot undo it;
    `reset --merge` clears its staged and unmerged entries while keeping
    unrelated local changes.
    """
    run_git(["reset", "--merge"], cwd=cwd)


def commit_squash(message: str, cwd: Path = None) -> None:
    """Create a commit from the staged squash result.

    Args:
        message: The commit message.
        cwd: Repository directory (optional).
    """
    run_git(["commit", "-m", message], cwd=cwd)


def reset_hard(commit: str, cwd: Path = None) -> None:
    """Reset the current branch to a commit, discarding all changes."""
    run_git(["reset", "--hard", commit], cwd=cwd)


def push_set_upstream(remote: str, branch: str, cwd: Path = None) -> None:
    """Push a branch to a remote and set it as the upstream.

    Args:
        remote: Remote name (e.g. "origin").
        branch: Local branch to push.
        cwd: Repository directory (optional).
    """
    run_git(["push", "-u", remote, branch], cwd=cwd)


def is_merge_in_progress(repo_root: Path = None) -> bool:
    """Check if a merge is currently in progress.

    A merge is in progress when MERGE_HEAD exists in the git directory.

    Args:
        repo_root: The root directory of the git repository (optional).

    Returns:
        True if a merge is in progress, False otherwise.
    """
    if repo_root is None:
        try:
            repo_root = get_repo_root()
        except GitError:
            return False

    try:
        git_dir = Path(_run_git_command(["rev-parse", "--git-dir"], cwd=repo_root))
    except GitError:
        return False
    if not git_dir.is_absolute():
        git_dir = repo_root / git_dir
    return (git_dir / "MERGE_HEAD").exists()
