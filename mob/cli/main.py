"""Top-level callback for the mob CLI."""

import typer

from mob import __version__


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mob {__version__}")
        raise typer.Exit()


def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """mob: per-issue wip/pr branch workflow for git."""
