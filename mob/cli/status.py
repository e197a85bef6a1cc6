"""CLI command for showing the tracking state of the current issue."""

import typer

from mob.errors import StorageError, UsageError
from mob.git import GitError
from mob.cli.utils import build_coordinator, short_hash
from mob.workflow import MergeCoordinator


def handle_status(coordinator: MergeCoordinator) -> None:
    status = coordinator.issue_status()

    typer.echo(f"Issue: {status.issue}")
    typer.echo(f"  Working branch: {status.wip_branch}")
    pr_state = "exists" if status.pr_exists else "not created yet"
    typer.echo(f"  PR branch: {status.pr_branch} ({pr_state})")
    typer.echo(f"  Fork point: {short_hash(status.fork_point)}")
    typer.echo(f"  Last merged commit: {short_hash(status.last_merged_commit)}")
    typer.echo(f"  Merged commits: {status.merged_count}")
    typer.echo(f"  Unmerged commits: {len(status.unmerged_commits)}")
    for commit in status.unmerged_commits:
        typer.echo(f"    - {short_hash(commit)}")
    if status.merge_in_progress:
        typer.echo("")
        typer.echo("Warning: a merge is in progress in this repository.", err=True)


def status_command() -> None:
    """Show fork point and merge progress for the current wip branch."""
    try:
        handle_status(build_coordinator())

    except UsageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except StorageError as e:
        typer.echo(f"Storage error: {e}", err=True)
        raise typer.Exit(1)
