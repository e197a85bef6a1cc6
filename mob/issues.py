"""Issue selection for `mob init`.

The selector only has to produce an issue identifier; branch names are
derived from it by the workflow.
"""

from typing import Callable, Optional, Protocol

import typer

from mob.workflow.branches import normalize_issue


class IssueSelector(Protocol):
    """Anything that can hand back a chosen issue identifier."""

    def select(self) -> str:
        ...


class PromptIssueSelector:
    """Ask the operator for an issue identifier on the terminal."""

    def __init__(self, prompt: Optional[Callable[..., str]] = None):
        self.prompt = prompt or typer.prompt

    def select(self) -> str:
        """Prompt until a non-empty identifier is entered.

        Returns:
            The normalized issue identifier (spaces replaced by hyphens).
        """
        while True:
            answer = self.prompt("Issue to work on (number or short name)")
            if answer and answer.strip():
                return normalize_issue(answer)
            typer.echo("Issue identifier cannot be empty.", err=True)
