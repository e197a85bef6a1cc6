"""Merge coordinator: creates wip branches and folds them into pr branches.

The update protocol squash-merges the commits of wip/<issue> that are not
yet recorded as merged into pr/<issue>, commits, records the merged commits
in the tracking document, pushes, and returns to the wip branch. Any
failure while the pr branch is being changed (steps 4-8) rolls the
repository back to where it was before the update. Once the push has
succeeded nothing is rolled back.
"""

from typing import Callable, Optional

from mob.errors import StorageError, UsageError
from mob.git.exceptions import GitError
from mob.tracking import TrackingDocument, TrackingStore
from mob.user_config import ReinitPolicy, WorkflowSettings
from mob.workflow.branches import (
    issue_from_branch,
    normalize_issue,
    pr_branch_name,
    wip_branch_name,
)
from mob.workflow.models import (
    FullSuccess,
    IssueStatus,
    NothingToMerge,
    PartialSuccess,
    ReviewContext,
    RolledBack,
    UpdateResult,
    UpdateRun,
    UpdateState,
    WorkStarted,
)

# Describes the step that was running when a failure happened, keyed by the
# last state reached before it.
_FAILED_STEP = {
    UpdateState.DELTA_COMPUTED: "error selecting pr branch",
    UpdateState.BRANCH_SELECTED: "error merging wip branch",
    UpdateState.MERGED: "error creating squash commit",
    UpdateState.COMMITTED: "error saving tracking data",
    UpdateState.TRACKING_PERSISTED: "error pushing to remote",
}

# States in which the pr branch is checked out (or was just created)
_ON_PR_BRANCH = frozenset({
    UpdateState.BRANCH_SELECTED,
    UpdateState.MERGED,
    UpdateState.COMMITTED,
    UpdateState.TRACKING_PERSISTED,
})


def _silent(_message: str) -> None:
    pass


class MergeCoordinator:
    """Runs the wip/pr workflow against one repository and tracking store.

    Args:
        repo: A Repository (or compatible object) for git operations.
        store: The TrackingStore of the same repository.
        settings: Remote, conflict strategy and re-init policy.
        progress: Callable receiving human-readable progress lines.
    """

    def __init__(
        self,
        repo,
        store: TrackingStore,
        settings: Optional[WorkflowSettings] = None,
        progress: Optional[Callable[[str], None]] = None,
    ):
        self.repo = repo
        self.store = store
        self.settings = settings or WorkflowSettings()
        self.progress = progress or _silent

    # ------------------------------------------------------------------
    # Shared lookups
    # ------------------------------------------------------------------

    def current_issue(self) -> tuple[str, str]:
        """Return (issue, wip branch) for the checked-out branch.

        Raises:
            UsageError: If the current branch is not a wip/<issue> branch.
        """
        branch = self.repo.current_branch()
        issue = issue_from_branch(branch)
        if issue is None:
            raise UsageError("Not on a wip branch. Please checkout a wip/<issue> branch first.")
        return issue, branch

    @staticmethod
    def _require_fork_point(document: TrackingDocument, issue: str) -> str:
        fork_point = document.get_fork_point(issue)
        if not fork_point:
            raise UsageError(
                f"No fork point found for issue '{issue}'. Was this branch created with 'mob init'?"
            )
        return fork_point

    # ------------------------------------------------------------------
    # init
    # ------------------------------------------------------------------

    def start_work(self, issue: str, base_branch: Optional[str] = None) -> WorkStarted:
        """Create wip/<issue> at the current HEAD and record its fork point.

        Args:
            issue: Issue identifier (spaces are turned into hyphens).
            base_branch: If given, check it out and pull before branching.

        Raises:
            UsageError: If the issue is empty, or it already has a fork point
                and the re-init policy is "reject".
            GitError: If any git command fails.
            StorageError: If the tracking document cannot be read or written.
        """
        issue = normalize_issue(issue)
        branch = wip_branch_name(issue)

        document = self.store.load()
        previous = document.get_fork_point(issue)
        if previous:
            if self.settings.reinit is ReinitPolicy.REJECT:
                raise UsageError(
                    f"Issue '{issue}' already has a fork point ({previous[:12]}). "
                    "Re-initializing is disabled (reinit: reject)."
                )
            if self.settings.reinit is ReinitPolicy.WARN:
                self.progress(
                    f"Warning: replacing recorded fork point {previous[:12]} for issue '{issue}'"
                )

        if base_branch:
            self.repo.checkout(base_branch)
            self.repo.pull()

        fork_point = self.repo.get_commit_hash("HEAD")
        self.repo.checkout_new_branch(branch)

        document.set_fork_point(issue, fork_point)
        self.store.save(document)

        return WorkStarted(
            issue=issue,
            branch=branch,
            fork_point=fork_point,
            replaced_fork_point=previous or None,
        )

    # ------------------------------------------------------------------
    # update
    # ------------------------------------------------------------------

    def update(self, message: str) -> UpdateResult:
        """Squash new wip commits into pr/<issue>, commit and push.

        Args:
            message: Commit message for the squash commit (required).

        Returns:
            FullSuccess, PartialSuccess, RolledBack or NothingToMerge.

        Raises:
            UsageError: On a missing message, a non-wip branch or a missing
                fork point. Nothing has been changed.
            GitError: If a query before the first mutation fails.
            StorageError: If the tracking document cannot be loaded.
        """
        if not message or not message.strip():
            raise UsageError("A commit message is required for the squash commit (use --message).")

        issue, wip_branch = self.current_issue()
        document = self.store.load()
        fork_point = self._require_fork_point(document, issue)

        run = UpdateRun(
            issue=issue,
            wip_branch=wip_branch,
            pr_branch=pr_branch_name(issue),
            fork_point=fork_point,
        )

        all_commits = self.repo.get_commits_between(fork_point, wip_branch)
        if not all_commits:
            return NothingToMerge(issue=issue, reason="No commits to merge")

        unmerged = document.get_unmerged_commits(issue, all_commits)
        if not unmerged:
            return NothingToMerge(issue=issue, reason="No new commits to merge")
        run.advance(UpdateState.DELTA_COMPUTED)

        self.progress(f"Found {len(unmerged)} new commit(s) to merge")

        pr_existed = self.repo.branch_exists(run.pr_branch)
        checkpoint = self.repo.get_commit_hash(run.pr_branch) if pr_existed else None
        snapshot = document.model_copy(deep=True)

        try:
            if pr_existed:
                self.repo.checkout(run.pr_branch)
            else:
                self.repo.checkout(fork_point)
                self.repo.checkout_new_branch(run.pr_branch)
            run.advance(UpdateState.BRANCH_SELECTED)

            self.repo.merge_squash(
                wip_branch,
                strategy_option=self.settings.conflict_strategy.merge_option,
            )
            run.advance(UpdateState.MERGED)

            self.repo.commit_squash(message)
            run.advance(UpdateState.COMMITTED)

            document.update_issue_tracking(issue, all_commits[0], unmerged)
            self.store.save(document)
            run.advance(UpdateState.TRACKING_PERSISTED)

            self.repo.push_set_upstream(self.settings.remote, run.pr_branch)
            run.advance(UpdateState.PUSHED)
        except (GitError, StorageError) as e:
            return self._rollback(run, e, checkpoint, snapshot)

        try:
            self.repo.checkout(wip_branch)
        except GitError as e:
            return PartialSuccess(
                issue=issue,
                pr_branch=run.pr_branch,
                merged_commits=unmerged,
                details=f"error switching back to wip branch: {e} (but merge was successful)",
            )
        run.advance(UpdateState.DONE)

        return FullSuccess(
            issue=issue,
            pr_branch=run.pr_branch,
            merged_commits=unmerged,
            created_branch=not pr_existed,
        )

    def _rollback(
        self,
        run: UpdateRun,
        error: Exception,
        checkpoint: Optional[str],
        snapshot: TrackingDocument,
    ) -> RolledBack:
        """Restore the repository (and tracking file) after a failed step.

        With a checkpoint the pr branch is reset to it; without one the pr
        branch was created by this update and is deleted again. Each restore
        step is best-effort: a failure there means the state it corrects was
        already consistent, so it is ignored.
        """
        failed_at = run.state
        run.advance(UpdateState.ROLLING_BACK)
        self.progress("Rolling back changes...")

        self._attempt(self.repo.abort_merge)
        # Squash-merges leave no MERGE_HEAD; clear staged and unmerged entries
        if failed_at in _ON_PR_BRANCH:
            self._attempt(self.repo.reset_merge)
        self._attempt(self.repo.checkout, run.wip_branch)

        # Only reset once the pr branch is checked out, never the wip branch
        if checkpoint and self._attempt(self.repo.checkout, run.pr_branch):
            self._attempt(self.repo.reset_hard, checkpoint)
            self._attempt(self.repo.checkout, run.wip_branch)

        if checkpoint is None and failed_at in _ON_PR_BRANCH:
            self._attempt(self.repo.delete_branch, run.pr_branch)

        # The push failed after the new merged commits were written
        if failed_at is UpdateState.TRACKING_PERSISTED:
            self._attempt(self.store.save, snapshot)

        return RolledBack(
            issue=run.issue,
            reason=f"{_FAILED_STEP[failed_at]}: {error}",
            failed_at=failed_at,
        )

    @staticmethod
    def _attempt(operation: Callable, *args) -> bool:
        try:
            operation(*args)
            return True
        except (GitError, StorageError):
            return False

    # ------------------------------------------------------------------
    # review / status
    # ------------------------------------------------------------------

    def prepare_review(self) -> Optional[ReviewContext]:
        """Collect the diff of the current wip branch against its fork point.

        Returns:
            The review context, or None if the branch has no changes.

        Raises:
            UsageError: If not on a wip branch or no fork point is recorded.
            GitError: If the diff cannot be computed.
        """
        issue, wip_branch = self.current_issue()
        document = self.store.load()
        fork_point = self._require_fork_point(document, issue)

        diff = self.repo.diff(fork_point, wip_branch)
        if not diff:
            return None

        try:
            diff_stat = self.repo.diff_stat(fork_point, wip_branch)
        except GitError:
            diff_stat = "Unable to get diff stats"

        try:
            changed_files = self.repo.diff_files(fork_point, wip_branch)
        except GitError:
            changed_files = []

        return ReviewContext(
            issue=issue,
            wip_branch=wip_branch,
            fork_point=fork_point,
            diff=diff,
            diff_stat=diff_stat,
            changed_files=changed_files,
        )

    def issue_status(self) -> IssueStatus:
        """Report tracking and branch state for the current wip branch."""
        issue, wip_branch = self.current_issue()
        document = self.store.load()
        fork_point = self._require_fork_point(document, issue)
        tracking = document.get_issue_tracking(issue)
        pr_branch = pr_branch_name(issue)

        all_commits = self.repo.get_commits_between(fork_point, wip_branch)

        return IssueStatus(
            issue=issue,
            wip_branch=wip_branch,
            pr_branch=pr_branch,
            fork_point=fork_point,
            last_merged_commit=tracking.last_merged_commit,
            merged_count=len(tracking.merged_commits),
            unmerged_commits=document.get_unmerged_commits(issue, all_commits),
            pr_exists=self.repo.branch_exists(pr_branch),
            merge_in_progress=self.repo.is_merge_in_progress(),
        )
