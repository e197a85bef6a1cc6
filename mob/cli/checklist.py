"""CLI commands for review checklist management."""

import typer

from mob.checklist import create_default_checklist, load_checklist
from mob.errors import StorageError
from mob.git import GitError, get_repo_root
from mob.paths import get_checklist_file

# Subcommand group for checklist management
checklist_app = typer.Typer(
    name="checklist",
    help="Manage the review checklist in .mob/checklist.yaml",
    add_completion=False,
)


@checklist_app.command("list")
def checklist_list() -> None:
    """Show the effective review checklist."""
    try:
        repo_root = get_repo_root()
        checklist = load_checklist(repo_root)

        source = ".mob/checklist.yaml" if get_checklist_file(repo_root).exists() else "built-in default"
        typer.echo(f"Review checklist ({source}):")
        typer.echo()
        if checklist.items:
            for item in checklist.items:
                typer.echo(f"  [{item.id}] {item.description}")
            typer.echo()
            typer.echo(f"Total: {len(checklist.items)} item(s)")
        else:
            typer.echo("  (no items configured)")

    except (GitError, StorageError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@checklist_app.command("init")
def checklist_init() -> None:
    """Write the default checklist to .mob/checklist.yaml."""
    try:
        repo_root = get_repo_root()

        if get_checklist_file(repo_root).exists():
            overwrite = typer.confirm(
                "Checklist already exists at .mob/checklist.yaml. Overwrite?",
                default=False,
            )
            if not overwrite:
                typer.echo("Keeping existing checklist.")
                raise typer.Exit(0)

        checklist = create_default_checklist(repo_root)
        typer.echo(f"✓ Checklist with {len(checklist.items)} item(s) saved to .mob/checklist.yaml")

    except (GitError, StorageError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
