"""Review checklist configuration.

Handles reading and writing .mob/checklist.yaml:
- ChecklistItem, Checklist: Pydantic models for the file
- load_checklist: Load the checklist, falling back to the built-in default
- save_checklist: Write a checklist to disk
- create_default_checklist: Write the default checklist file
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from mob.errors import StorageError
from mob.paths import get_checklist_file


class ChecklistItem(BaseModel):
    """A single item the reviewer must confirm."""

    id: str
    description: str


class Checklist(BaseModel):
    """The review checklist."""

    items: list[ChecklistItem] = Field(default_factory=list)


# Used when no checklist.yaml exists
DEFAULT_CHECKLIST_ITEMS = [
    ChecklistItem(id="tests", description="All tests pass"),
    ChecklistItem(id="review", description="Code has been self-reviewed"),
    ChecklistItem(id="docs", description="Documentation updated if needed"),
    ChecklistItem(id="no-debug", description="No debug code left behind"),
]

# Written by `mob checklist init`
INITIAL_CHECKLIST_ITEMS = DEFAULT_CHECKLIST_ITEMS + [
    ChecklistItem(id="lint", description="No lint errors"),
]


def load_checklist(repo_root: Path) -> Checklist:
    """Load the checklist from .mob/checklist.yaml.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        The configured checklist, or the default one if the file is missing.

    Raises:
        StorageError: If the file exists but cannot be parsed.
    """
    checklist_file = get_checklist_file(repo_root)
    if not checklist_file.exists():
        return Checklist(items=[item.model_copy() for item in DEFAULT_CHECKLIST_ITEMS])

    try:
        with open(checklist_file, "r") as f:
            data = yaml.safe_load(f) or {}
        return Checklist.model_validate(data)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise StorageError(f"Failed to load checklist from {checklist_file}: {e}")


def save_checklist(repo_root: Path, checklist: Checklist) -> None:
    """Write the checklist to .mob/checklist.yaml.

    Raises:
        StorageError: If the file cannot be written.
    """
    checklist_file = get_checklist_file(repo_root)
    try:
        checklist_file.parent.mkdir(parents=True, exist_ok=True)
        with open(checklist_file, "w") as f:
            yaml.dump(checklist.model_dump(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise StorageError(f"Failed to save checklist to {checklist_file}: {e}")


def create_default_checklist(repo_root: Path) -> Checklist:
    """Write the initial checklist file and return it."""
    checklist = Checklist(items=[item.model_copy() for item in INITIAL_CHECKLIST_ITEMS])
    save_checklist(repo_root, checklist)
    return checklist
