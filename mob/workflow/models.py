"""Workflow state and result types.

Contains:
- UpdateState: States of a single `mob update` run
- UpdateRun: Tracks the state of an in-flight update
- FullSuccess, PartialSuccess, RolledBack, NothingToMerge: update results
- WorkStarted, ReviewContext, IssueStatus: results of the other operations
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class UpdateState(Enum):
    """Protocol states of an update, in order."""

    IDLE = "idle"
    DELTA_COMPUTED = "delta-computed"
    BRANCH_SELECTED = "branch-selected"
    MERGED = "merged"
    COMMITTED = "committed"
    TRACKING_PERSISTED = "tracking-persisted"
    PUSHED = "pushed"
    DONE = "done"
    ROLLING_BACK = "rolling-back"


# States from which a failure still triggers a rollback (steps 4-8 in flight)
ROLLBACK_STATES = frozenset({
    UpdateState.DELTA_COMPUTED,
    UpdateState.BRANCH_SELECTED,
    UpdateState.MERGED,
    UpdateState.COMMITTED,
    UpdateState.TRACKING_PERSISTED,
})

_TRANSITIONS = {
    UpdateState.IDLE: {UpdateState.DELTA_COMPUTED},
    UpdateState.DELTA_COMPUTED: {UpdateState.BRANCH_SELECTED},
    UpdateState.BRANCH_SELECTED: {UpdateState.MERGED},
    UpdateState.MERGED: {UpdateState.COMMITTED},
    UpdateState.COMMITTED: {UpdateState.TRACKING_PERSISTED},
    UpdateState.TRACKING_PERSISTED: {UpdateState.PUSHED},
    UpdateState.PUSHED: {UpdateState.DONE},
    UpdateState.DONE: set(),
    UpdateState.ROLLING_BACK: set(),
}


@dataclass
class UpdateRun:
    """Bookkeeping for one update invocation."""

    issue: str
    wip_branch: str
    pr_branch: str
    fork_point: str
    state: UpdateState = UpdateState.IDLE
    history: list[UpdateState] = field(default_factory=lambda: [UpdateState.IDLE])

    def advance(self, new_state: UpdateState) -> None:
        """Move to new_state, enforcing the protocol order."""
        if new_state is UpdateState.ROLLING_BACK:
            allowed = self.state in ROLLBACK_STATES
        else:
            allowed = new_state in _TRANSITIONS[self.state]
        if not allowed:
            raise RuntimeError(f"Invalid update transition: {self.state.value} -> {new_state.value}")
        self.state = new_state
        self.history.append(new_state)


@dataclass
class FullSuccess:
    """Merge, commit, tracking, push and the return checkout all succeeded."""

    issue: str
    pr_branch: str
    merged_commits: list[str]
    created_branch: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass
class PartialSuccess:
    """Everything up to the push succeeded; only the final checkout failed."""

    issue: str
    pr_branch: str
    merged_commits: list[str]
    details: str

    @property
    def ok(self) -> bool:
        return False


@dataclass
class RolledBack:
    """A mutating step failed and the repository was restored."""

    issue: str
    reason: str
    failed_at: UpdateState

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"{self.reason} (changes rolled back)"


@dataclass
class NothingToMerge:
    """The update stopped before touching the repository."""

    issue: str
    reason: str

    @property
    def ok(self) -> bool:
        return True


UpdateResult = Union[FullSuccess, PartialSuccess, RolledBack, NothingToMerge]


@dataclass
class WorkStarted:
    """Result of creating a wip branch."""

    issue: str
    branch: str
    fork_point: str
    replaced_fork_point: Optional[str] = None


@dataclass
class ReviewContext:
    """Everything the review surface needs for one issue."""

    issue: str
    wip_branch: str
    fork_point: str
    diff: str
    diff_stat: str
    changed_files: list[str] = field(default_factory=list)


@dataclass
class IssueStatus:
    """Read-only snapshot of an issue's tracking and branch state."""

    issue: str
    wip_branch: str
    pr_branch: str
    fork_point: str
    last_merged_commit: str
    merged_count: int
    unmerged_commits: list[str]
    pr_exists: bool
    merge_in_progress: bool
