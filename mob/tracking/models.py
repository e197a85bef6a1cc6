"""Tracking data models for mob.

Contains Pydantic models for the persisted tracking document:
- IssueTracking: Fork point and merge history of one issue
- TrackingDocument: All issues, keyed by issue identifier
"""

from pydantic import BaseModel, Field, field_validator


class IssueTracking(BaseModel):
    """Tracking state for a single issue's wip/pr branch pair."""

    fork_point: str = ""  # Commit the wip branch was created from
    last_merged_commit: str = ""  # Newest wip commit in the last update (informational)
    merged_commits: list[str] = Field(default_factory=list)  # Treated as a set

    @field_validator("fork_point", "last_merged_commit", mode="before")
    @classmethod
    def _none_to_empty_string(cls, value):
        return "" if value is None else value

    @field_validator("merged_commits", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value):
        return [] if value is None else value


class TrackingDocument(BaseModel):
    """The whole tracking document stored in .mob/tracking.json."""

    issues: dict[str, IssueTracking] = Field(default_factory=dict)

    @field_validator("issues", mode="before")
    @classmethod
    def _none_to_empty_dict(cls, value):
        return {} if value is None else value

    def get_issue_tracking(self, issue: str) -> IssueTracking:
        """Return a copy of an issue's tracking, or an empty default.

        Reading never inserts the issue into the document.
        """
        tracking = self.issues.get(issue)
        if tracking is None:
            return IssueTracking()
        return tracking.model_copy(deep=True)

    def get_fork_point(self, issue: str) -> str:
        """Return the recorded fork point, or "" if the issue is unknown."""
        return self.get_issue_tracking(issue).fork_point

    def set_fork_point(self, issue: str, fork_point: str) -> None:
        """Record the fork point for an issue, keeping its other fields."""
        tracking = self.get_issue_tracking(issue)
        tracking.fork_point = fork_point
        self.issues[issue] = tracking

    def get_unmerged_commits(self, issue: str, all_commits: list[str]) -> list[str]:
        """Return the commits of all_commits not yet merged for an issue.

        Args:
            issue: Issue identifier.
            all_commits: Commits between fork point and wip head, newest first.

        Returns:
            The sublist of all_commits not in the issue's merged set, in the
            same relative order.
        """
        merged = set(self.get_issue_tracking(issue).merged_commits)
        return [commit for commit in all_commits if commit not in merged]

    def update_issue_tracking(self, issue: str, last_commit: str, commits: list[str]) -> None:
        """Record a successful update.

        Sets last_merged_commit and appends commits to merged_commits.
        Commits already present are skipped, so repeating a call is a no-op
        for delta computation.
        """
        tracking = self.get_issue_tracking(issue)
        tracking.last_merged_commit = last_commit
        seen = set(tracking.merged_commits)
        for commit in commits:
            if commit not in seen:
                tracking.merged_commits.append(commit)
                seen.add(commit)
        self.issues[issue] = tracking
