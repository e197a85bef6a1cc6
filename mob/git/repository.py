"""Repository adapter bound to a single working directory.

The merge workflow receives a Repository instance rather than calling the
module-level git helpers directly, so every operation runs against the
same root and tests can substitute an in-memory double.
"""

from pathlib import Path
from typing import Optional

from mob.git.branch import (
    branch_exists,
    checkout,
    checkout_new_branch,
    delete_branch,
    get_commit_hash,
    get_commits_between,
    get_current_branch,
    pull,
)
from mob.git.diff import get_diff, get_diff_files, get_diff_stat
from mob.git.merge import (
    abort_merge,
    commit_squash,
    is_merge_in_progress,
    merge_squash,
    push_set_upstream,
    reset_hard,
    reset_merge,
)
from mob.git.runner import get_repo_root


class Repository:
    """Typed git operations for one repository."""

    def __init__(self, root: Path):
        self.root = Path(root)

    @classmethod
    def discover(cls, cwd: Path = None) -> "Repository":
        """Locate the enclosing repository of cwd (or the process cwd)."""
        return cls(get_repo_root(cwd))

    # Queries (captured output)

    def current_branch(self) -> str:
        return get_current_branch(cwd=self.root)

    def branch_exists(self, branch: str) -> bool:
        return branch_exists(branch, cwd=self.root)

    def get_commit_hash(self, ref: str) -> str:
        return get_commit_hash(ref, cwd=self.root)

    def get_commits_between(self, base: str, head: str) -> list[str]:
        return get_commits_between(base, head, cwd=self.root)

    def diff(self, base: str, head: str) -> str:
        return get_diff(base, head, cwd=self.root)

    def diff_stat(self, base: str, head: str) -> str:
        return get_diff_stat(base, head, cwd=self.root)

    def diff_files(self, base: str, head: str) -> list[str]:
        return get_diff_files(base, head, cwd=self.root)

    def is_merge_in_progress(self) -> bool:
        return is_merge_in_progress(self.root)

    # Mutations (streamed to the terminal)

    def checkout(self, ref: str) -> None:
        checkout(ref, cwd=self.root)

    def checkout_new_branch(self, branch: str) -> None:
        checkout_new_branch(branch, cwd=self.root)

    def pull(self) -> None:
        pull(cwd=self.root)

    def delete_branch(self, branch: str) -> None:
        delete_branch(branch, cwd=self.root)

    def merge_squash(self, branch: str, strategy_option: Optional[str] = "theirs") -> None:
        merge_squash(branch, strategy_option=strategy_option, cwd=self.root)

    def abort_merge(self) -> None:
        abort_merge(cwd=self.root)

    def reset_merge(self) -> None:
        reset_merge(cwd=self.root)

    def commit_squash(self, message: str) -> None:
        commit_squash(message, cwd=self.root)

    def reset_hard(self, commit: str) -> None:
        reset_hard(commit, cwd=self.root)

    def push_set_upstream(self, remote: str, branch: str) -> None:
        push_set_upstream(remote, branch, cwd=self.root)
