"""The wip/pr branch workflow.

- branches: branch naming and issue normalization
- models: update states and result types
- coordinator: MergeCoordinator (init, update, review, status)
"""

from mob.workflow.branches import (
    PR_PREFIX,
    WIP_PREFIX,
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
from mob.workflow.coordinator import MergeCoordinator


__all__ = [
    # Branches
    "PR_PREFIX",
    "WIP_PREFIX",
    "issue_from_branch",
    "normalize_issue",
    "pr_branch_name",
    "wip_branch_name",
    # Models
    "FullSuccess",
    "IssueStatus",
    "NothingToMerge",
    "PartialSuccess",
    "ReviewContext",
    "RolledBack",
    "UpdateResult",
    "UpdateRun",
    "UpdateState",
    "WorkStarted",
    # Coordinator
    "MergeCoordinator",
]
