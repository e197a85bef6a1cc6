"""File path utilities for mob's project-local state.

Contains functions for getting paths under the .mob directory:
- get_mob_dir: Get the .mob directory (not created)
- get_tracking_file: Get path to tracking.json
- get_config_file: Get path to config.yaml
- get_checklist_file: Get path to checklist.yaml
"""

from pathlib import Path

MOB_DIR_NAME = ".mob"


def get_mob_dir(repo_root: Path) -> Path:
    """Return the .mob directory of a repository.

    The directory is created by whichever writer needs it first, so that
    read-only commands leave the working tree untouched.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to the .mob directory.
    """
    return repo_root / MOB_DIR_NAME


def get_tracking_file(repo_root: Path) -> Path:
    """Return path to the per-issue tracking document.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .mob/tracking.json.
    """
    return get_mob_dir(repo_root) / "tracking.json"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the repository configuration file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .mob/config.yaml.
    """
    return get_mob_dir(repo_root) / "config.yaml"


def get_checklist_file(repo_root: Path) -> Path:
    """Return path to the review checklist file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .mob/checklist.yaml.
    """
    return get_mob_dir(repo_root) / "checklist.yaml"
