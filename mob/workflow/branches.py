"""Branch naming for the wip/pr workflow.

Contains:
- normalize_issue: Turn a free-form issue token into a branch-safe identifier
- wip_branch_name: Name of an issue's working branch
- pr_branch_name: Name of an issue's target branch
- issue_from_branch: Extract the issue identifier from a wip branch name
"""

from typing import Optional

from mob.errors import UsageError

WIP_PREFIX = "wip/"
PR_PREFIX = "pr/"


def normalize_issue(issue: str) -> str:
    """Normalize an issue identifier for use in branch names.

    Surrounding whitespace is stripped and inner spaces become hyphens.

    Raises:
        UsageError: If the identifier is empty.
    """
    normalized = (issue or "").strip().replace(" ", "-")
    if not normalized:
        raise UsageError("Issue identifier cannot be empty.")
    return normalized


def wip_branch_name(issue: str) -> str:
    return f"{WIP_PREFIX}{issue}"


def pr_branch_name(issue: str) -> str:
    return f"{PR_PREFIX}{issue}"


def issue_from_branch(branch: str) -> Optional[str]:
    """Return the issue of a wip/<issue> branch, or None for any other branch."""
    if not branch.startswith(WIP_PREFIX):
        return None
    issue = branch[len(WIP_PREFIX):]
    return issue or None
