"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from mob.git import GitError
from mob.tracking import TrackingStore
from mob.user_config import WorkflowSettings
from mob.workflow import MergeCoordinator


class FakeRepository:
    """In-memory stand-in for mob.git.Repository.

    Branches map to commit ids, HEAD is a branch name or a bare commit id,
    and every call is recorded in ``calls``. ``fail(op, arg)`` makes the
    named operation raise GitError (for any argument if arg is None).

    Like git, a squash-merge stages its result without writing MERGE_HEAD,
    so ``abort_merge`` cannot undo it. With ``conflict_on_merge`` set, the
    squash-merge fails and leaves unmerged entries that block checkout
    until ``reset_merge`` or ``reset_hard`` clears them.
    """

    def __init__(self, root: Path):
        self.root = root
        self.branches: dict[str, str] = {}
        self.objects: set[str] = set()
        self.head = None
        self.wip_commits: list[str] = []
        self.diff_text = ""
        self.diff_stat_text = ""
        self.changed_files: list[str] = []
        self.merge_in_progress = False
        self.conflict_on_merge = False
        self.conflicted = False
        self.staged = False
        self.pushed: list[tuple[str, str, str]] = []
        self.calls: list[tuple] = []
        self._failures: set[tuple] = set()
        self._counter = 0

    # Test helpers

    def fail(self, op: str, arg=None) -> None:
        self._failures.add((op, arg))

    def clear_failures(self) -> None:
        self._failures.clear()

    def _record(self, op: str, *args) -> None:
        self.calls.append((op,) + args)
        first = args[0] if args else None
        if (op, None) in self._failures or (op, first) in self._failures:
            raise GitError(f"simulated failure: {op}", command=["git", op], returncode=1)

    def _resolve(self, ref: str) -> str:
        if ref == "HEAD":
            ref = self.head
        if ref in self.branches:
            return self.branches[ref]
        if ref in self.objects:
            return ref
        raise GitError(f"unknown revision: {ref}", command=["git", "rev-parse", ref], returncode=128)

    def _clear_index(self) -> None:
        self.staged = False
        self.conflicted = False
        self.merge_in_progress = False

    def ops(self) -> list[str]:
        return [call[0] for call in self.calls]

    # Queries

    def current_branch(self) -> str:
        self._record("current_branch")
        return self.head

    def branch_exists(self, branch: str) -> bool:
        self._record("branch_exists", branch)
        return branch in self.branches

    def get_commit_hash(self, ref: str) -> str:
        self._record("get_commit_hash", ref)
        return self._resolve(ref)

    def get_commits_between(self, base: str, head: str) -> list[str]:
        self._record("get_commits_between", base, head)
        return list(self.wip_commits)

    def diff(self, base: str, head: str) -> str:
        self._record("diff", base, head)
        return self.diff_text

    def diff_stat(self, base: str, head: str) -> str:
        self._record("diff_stat", base, head)
        return self.diff_stat_text

    def diff_files(self, base: str, head: str) -> list[str]:
        self._record("diff_files", base, head)
        return list(self.changed_files)

    def is_merge_in_progress(self) -> bool:
        return self.merge_in_progress

    # Mutations

    def checkout(self, ref: str) -> None:
        self._record("checkout", ref)
        if self.conflicted:
            raise GitError("you need to resolve your current index first", command=["git", "checkout", ref], returncode=1)
        if self.staged and ref != self.head:
            raise GitError("local changes would be overwritten", command=["git", "checkout", ref], returncode=1)
        self._resolve(ref)
        self.head = ref

    def checkout_new_branch(self, branch: str) -> None:
        self._record("checkout_new_branch", branch)
        if branch in self.branches:
            raise GitError(f"branch {branch} already exists", command=["git", "checkout", "-b", branch], returncode=128)
        self.branches[branch] = self._resolve("HEAD")
        self.head = branch

    def pull(self) -> None:
        self._record("pull")

    def delete_branch(self, branch: str) -> None:
        self._record("delete_branch", branch)
        if branch == self.head or branch not in self.branches:
            raise GitError(f"cannot delete branch {branch}", command=["git", "branch", "-D", branch], returncode=1)
        del self.branches[branch]

    def merge_squash(self, branch: str, strategy_option="theirs") -> None:
        self._record("merge_squash", branch, strategy_option)
        self.staged = True
        if self.conflict_on_merge:
            self.conflicted = True
            raise GitError("Automatic merge failed; fix conflicts", command=["git", "merge", "--squash", branch], returncode=1)

    def abort_merge(self) -> None:
        self._record("abort_merge")
        if not self.merge_in_progress:
            raise GitError("There is no merge to abort", command=["git", "merge", "--abort"], returncode=128)
        self._clear_index()

    def reset_merge(self) -> None:
        self._record("reset_merge")
        self._clear_index()

    def commit_squash(self, message: str) -> None:
        self._record("commit_squash", message)
        if self.conflicted or not self.staged:
            raise GitError("nothing to commit", command=["git", "commit", "-m", message], returncode=1)
        self._counter += 1
        commit = f"squash{self._counter}"
        self.objects.add(commit)
        self.branches[self.head] = commit
        self._clear_index()

    def reset_hard(self, commit: str) -> None:
        self._record("reset_hard", commit)
        self.branches[self.head] = self._resolve(commit)
        self._clear_index()

    def push_set_upstream(self, remote: str, branch: str) -> None:
        self._record("push_set_upstream", remote, branch)
        self.pushed.append((remote, branch, self.branches[branch]))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def fake_repo(mock_repo_root):
    """A fake repository on wip/42 forked from commit F with three commits."""
    repo = FakeRepository(mock_repo_root)
    repo.objects.update({"F", "c1", "c2", "c3", "c4"})
    repo.branches = {"main": "F", "wip/42": "c3"}
    repo.head = "wip/42"
    repo.wip_commits = ["c3", "c2", "c1"]
    return repo


@pytest.fixture
def store(mock_repo_root):
    """A tracking store in the mock repository."""
    return TrackingStore(mock_repo_root)


@pytest.fixture
def progress_messages():
    """Collects progress lines reported by the coordinator."""
    return []


@pytest.fixture
def coordinator(fake_repo, store, progress_messages):
    """A coordinator wired to the fake repository with default settings."""
    return MergeCoordinator(
        repo=fake_repo,
        store=store,
        settings=WorkflowSettings(),
        progress=progress_messages.append,
    )
