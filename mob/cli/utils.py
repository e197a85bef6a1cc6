"""Shared utility functions for CLI commands."""

from typing import Optional

import typer

from mob.git import Repository
from mob.tracking import TrackingStore
from mob.user_config import load_workflow_settings
from mob.workflow import MergeCoordinator


def echo_progress(message: str) -> None:
    """Write a progress line to stderr."""
    typer.echo(message, err=True)


def build_coordinator(repo: Optional[Repository] = None) -> MergeCoordinator:
    """Construct the coordinator for the repository containing the cwd.

    Every command builds its own coordinator so that the tracking document
    and configuration are read fresh for each invocation.

    Raises:
        GitError: If not in a git repository.
        UsageError: If .mob/config.yaml holds an invalid value.
    """
    repo = repo or Repository.discover()
    return MergeCoordinator(
        repo=repo,
        store=TrackingStore(repo.root),
        settings=load_workflow_settings(repo.root),
        progress=echo_progress,
    )


def short_hash(commit: str) -> str:
    return commit[:12] if commit else "(none)"
