"""CLI command for creating a wip branch."""

from typing import Optional

import typer

from mob.errors import StorageError, UsageError
from mob.git import GitError
from mob.issues import PromptIssueSelector
from mob.cli.utils import build_coordinator, short_hash
from mob.workflow import MergeCoordinator


def handle_init(coordinator: MergeCoordinator, issue: str, base_branch: Optional[str]) -> None:
    """Create wip/<issue> and report the recorded fork point."""
    started = coordinator.start_work(issue, base_branch=base_branch)
    if started.replaced_fork_point:
        typer.echo(
            f"Replaced fork point {short_hash(started.replaced_fork_point)} "
            f"with {short_hash(started.fork_point)}",
            err=True,
        )
    typer.echo(f"Created and switched to branch '{started.branch}'")


def init_command(
    issue: Optional[str] = typer.Argument(
        None,
        help="Issue number or short name (prompted for if omitted)",
    ),
    base_branch: Optional[str] = typer.Option(
        None,
        "--base-branch",
        "-b",
        help="Base branch to check out and pull before creating the wip branch",
    ),
) -> None:
    """Create and check out a new wip/<issue> branch."""
    try:
        coordinator = build_coordinator()
        if issue is None:
            issue = PromptIssueSelector().select()
        handle_init(coordinator, issue, base_branch)

    except UsageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except StorageError as e:
        typer.echo(f"Storage error: {e}", err=True)
        raise typer.Exit(1)
