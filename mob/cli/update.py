"""CLI command for folding wip commits into the pr branch."""

import typer

from mob.errors import StorageError, UsageError
from mob.git import GitError
from mob.cli.utils import build_coordinator
from mob.workflow import (
    FullSuccess,
    MergeCoordinator,
    NothingToMerge,
    PartialSuccess,
    RolledBack,
)


def handle_update(coordinator: MergeCoordinator, message: str) -> None:
    """Run the update protocol and report its outcome.

    Raises:
        typer.Exit: With code 1 if the update was rolled back or only
            partially succeeded.
    """
    result = coordinator.update(message)

    if isinstance(result, NothingToMerge):
        typer.echo(result.reason)
    elif isinstance(result, FullSuccess):
        created = " (new branch)" if result.created_branch else ""
        typer.echo(
            f"Successfully merged {len(result.merged_commits)} commit(s) into "
            f"'{result.pr_branch}'{created} and pushed to remote"
        )
    elif isinstance(result, PartialSuccess):
        typer.echo(
            f"Merged {len(result.merged_commits)} commit(s) into '{result.pr_branch}' and pushed to remote",
        )
        typer.echo(f"Warning: {result.details}", err=True)
        raise typer.Exit(1)
    elif isinstance(result, RolledBack):
        typer.echo(f"Error: {result.message}", err=True)
        raise typer.Exit(1)


def update_command(
    message: str = typer.Option(
        ...,
        "--message",
        "-m",
        help="Commit message for the squash commit",
    ),
) -> None:
    """Squash new wip commits and merge them into pr/<issue>.

    Only commits that haven't been merged yet are included.
    """
    try:
        coordinator = build_coordinator()
        handle_update(coordinator, message)

    except UsageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except StorageError as e:
        typer.echo(f"Storage error: {e}", err=True)
        raise typer.Exit(1)
