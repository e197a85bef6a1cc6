"""CLI commands for repository configuration management."""

import typer

from mob.errors import UsageError
from mob.git import GitError, get_repo_root
from mob.user_config import DEFAULT_CONFIG, load_config, set_config_value

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage repository configuration in .mob/config.yaml",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        repo_root = get_repo_root()
        config = load_config(repo_root)

        typer.echo("Current mob configuration (.mob/config.yaml):")
        typer.echo()
        for key in DEFAULT_CONFIG:
            typer.echo(f"  {key}: {config.get(key)}")
        typer.echo()

    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        ...,
        help="Configuration key (remote, conflict_strategy, reinit)",
    ),
    value: str = typer.Argument(
        ...,
        help="New value",
    ),
) -> None:
    """Set a configuration value."""
    try:
        repo_root = get_repo_root()
        set_config_value(repo_root, key, value)
        typer.echo(f"Set {key} = {load_config(repo_root)[key]}")

    except UsageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)
