"""CLI command for reviewing a wip branch before updating."""

import typer

from mob.checklist import load_checklist
from mob.errors import StorageError, UsageError
from mob.git import GitError
from mob.cli.utils import build_coordinator
from mob.review import PromptReviewSurface
from mob.workflow import MergeCoordinator


def handle_review(coordinator: MergeCoordinator, surface: PromptReviewSurface) -> None:
    """Show the wip diff and walk the checklist."""
    context = coordinator.prepare_review()
    if context is None:
        typer.echo("No changes to review")
        return

    checklist = load_checklist(coordinator.repo.root)
    completed = surface.run(context, checklist.items)

    typer.echo("")
    if completed:
        typer.echo("✓ Review complete! You can now run 'mob update' to push changes.")
    else:
        typer.echo("✗ Review incomplete. Please check all items before updating.")


def review_command(
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Show the diff without ANSI colors",
    ),
) -> None:
    """Review changes before updating the pr branch.

    Shows the diff of the wip branch against its fork point and a checklist
    that must be fully checked before running 'mob update'.
    """
    try:
        coordinator = build_coordinator()
        handle_review(coordinator, PromptReviewSurface(color=not no_color))

    except UsageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except StorageError as e:
        typer.echo(f"Storage error: {e}", err=True)
        raise typer.Exit(1)
