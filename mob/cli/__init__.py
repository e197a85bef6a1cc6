"""CLI entry point for mob.

This module assembles the command table once at import time. Each command
builds its own MergeCoordinator and passes it to a handler function.
"""

import typer

from mob.cli.config import config_app
from mob.cli.checklist import checklist_app
from mob.cli.init import init_command, handle_init
from mob.cli.update import update_command, handle_update
from mob.cli.review import review_command, handle_review
from mob.cli.status import status_command, handle_status
from mob.cli.main import main_callback
from mob.cli.utils import build_coordinator

# Main application
app = typer.Typer(
    name="mob",
    help="mob: per-issue wip/pr branch workflow for git",
    add_completion=False,
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(config_app, name="config")
app.add_typer(checklist_app, name="checklist")

# Add individual commands
app.command("init")(init_command)
app.command("update")(update_command)
app.command("review")(review_command)
app.command("status")(status_command)

app.callback()(main_callback)


__all__ = [
    "app",
    "config_app",
    "checklist_app",
    "init_command",
    "update_command",
    "review_command",
    "status_command",
    "main_callback",
    "handle_init",
    "handle_update",
    "handle_review",
    "handle_status",
    "build_coordinator",
]
