"""Prompt-based review surface.

Shows the diff of a wip branch and walks the reviewer through the
checklist. The surface only reads; it never touches tracking state.
"""

from enum import Enum
from typing import Callable, Optional

import typer

from mob.checklist import ChecklistItem
from mob.workflow.models import ReviewContext


class ReviewPanel(Enum):
    """Sections of the review, visited in a fixed order."""

    SUMMARY = "summary"
    DIFF = "diff"
    CHECKLIST = "checklist"
    DONE = "done"


PANEL_TRANSITIONS = {
    ReviewPanel.SUMMARY: ReviewPanel.DIFF,
    ReviewPanel.DIFF: ReviewPanel.CHECKLIST,
    ReviewPanel.CHECKLIST: ReviewPanel.DONE,
    ReviewPanel.DONE: ReviewPanel.DONE,
}


def next_panel(panel: ReviewPanel) -> ReviewPanel:
    return PANEL_TRANSITIONS[panel]


def _style_diff_line(line: str) -> str:
    if line.startswith("@@"):
        return typer.style(line, fg="cyan")
    if line.startswith(("---", "+++", "diff --git")):
        return typer.style(line, bold=True)
    if line.startswith("-"):
        return typer.style(line, fg="red")
    if line.startswith("+"):
        return typer.style(line, fg="green")
    return line


def colorize_diff(text: str) -> str:
    """Color a unified diff the way `git diff` does on a terminal.

    Removed lines are red, added lines green, hunk headers cyan, and file
    headers bold.
    """
    return "\n".join(_style_diff_line(line) for line in text.split("\n"))


def show_in_pager(text: str) -> None:
    """Page text through the user's pager, keeping ANSI colors."""
    typer.echo_via_pager(text, color=True)


class PromptReviewSurface:
    """Line-oriented review: summary, optional diff, then the checklist.

    The echo/confirm/pager callables default to typer and the system pager;
    tests pass their own.
    """

    def __init__(
        self,
        echo: Optional[Callable[..., None]] = None,
        confirm: Optional[Callable[..., bool]] = None,
        pager: Optional[Callable[[str], None]] = None,
        color: bool = True,
    ):
        self.echo = echo or typer.echo
        self.confirm = confirm or typer.confirm
        self.pager = pager or show_in_pager
        self.color = color

    def run(self, context: ReviewContext, items: list[ChecklistItem]) -> bool:
        """Run the review and return True if every checklist item was checked."""
        checked: dict[str, bool] = {}
        panel = ReviewPanel.SUMMARY

        while panel is not ReviewPanel.DONE:
            if panel is ReviewPanel.SUMMARY:
                self._show_summary(context)
            elif panel is ReviewPanel.DIFF:
                if self.confirm("Show the full diff?", default=True):
                    self.pager(colorize_diff(context.diff) if self.color else context.diff)
            elif panel is ReviewPanel.CHECKLIST:
                checked = self._walk_checklist(items)
            panel = next_panel(panel)

        return all(checked.get(item.id, False) for item in items)

    def _show_summary(self, context: ReviewContext) -> None:
        self.echo("=" * 60)
        self.echo(f"Review: {context.wip_branch} (issue {context.issue})")
        self.echo(f"Fork point: {context.fork_point[:12]}")
        if context.changed_files:
            self.echo(f"Files changed: {len(context.changed_files)}")
        self.echo("=" * 60)
        self.echo(context.diff_stat)
        self.echo("")

    def _walk_checklist(self, items: list[ChecklistItem]) -> dict[str, bool]:
        if not items:
            self.echo("Checklist is empty.")
            return {}

        self.echo("Checklist:")
        checked = {}
        for item in items:
            checked[item.id] = self.confirm(f"  [{item.id}] {item.description}", default=False)
        return checked
