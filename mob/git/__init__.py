"""Git adapter package for mob.

This package wraps the git command line:
- exceptions: GitError, RepositoryError
- runner: _run_git_command, run_git, get_repo_root
- branch: checkout, checkout_new_branch, pull, delete_branch, get_current_branch,
          branch_exists, get_commit_hash, get_commits_between
- merge: merge_squash, abort_merge, reset_merge, commit_squash, reset_hard,
         push_set_upstream, is_merge_in_progress
- diff: get_diff, get_diff_stat, get_diff_files
- repository: Repository (all of the above bound to one repo root)
"""

# Exceptions
from mob.git.exceptions import (
    GitError,
    RepositoryError,
)

# Runner utilities
from mob.git.runner import (
    _run_git_command,
    run_git,
    get_repo_root,
)

# Branch utilities
from mob.git.branch import (
    checkout,
    checkout_new_branch,
    pull,
    delete_branch,
    get_current_branch,
    branch_exists,
    get_commit_hash,
    get_commits_between,
)

# Merge utilities
from mob.git.merge import (
    merge_squash,
    abort_merge,
    reset_merge,
    commit_squash,
    reset_hard,
    push_set_upstream,
    is_merge_in_progress,
)

# Diff utilities
from mob.git.diff import (
    get_diff,
    get_diff_stat,
    get_diff_files,
)

# Repository adapter
from mob.git.repository import Repository


__all__ = [
    # Exceptions
    "GitError",
    "RepositoryError",
    # Runner
    "_run_git_command",
    "run_git",
    "get_repo_root",
    # Branch
    "checkout",
    "checkout_new_branch",
    "pull",
    "delete_branch",
    "get_current_branch",
    "branch_exists",
    "get_commit_hash",
    "get_commits_between",
    # Merge
    "merge_squash",
    "abort_merge",
    "reset_merge",
    "commit_squash",
    "reset_hard",
    "push_set_upstream",
    "is_merge_in_progress",
    # Diff
    "get_diff",
    "get_diff_stat",
    "get_diff_files",
    # Repository
    "Repository",
]
