"""Repository configuration management for mob.

Handles reading and writing the .mob/config.yaml file in each repository.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml

from mob.errors import UsageError
from mob.paths import get_config_file


class ConflictStrategy(Enum):
    """How the squash-merge treats conflicting hunks."""

    THEIRS = "theirs"  # Incoming wip content wins (-X theirs)
    FAIL = "fail"  # No strategy option; a conflict fails the update

    @property
    def merge_option(self) -> Optional[str]:
        return "theirs" if self is ConflictStrategy.THEIRS else None


class ReinitPolicy(Enum):
    """What `mob init` does when the issue already has a fork point."""

    ALLOW = "allow"
    WARN = "warn"
    REJECT = "reject"


# Default configuration values
DEFAULT_CONFIG = {
    "remote": "origin",
    "conflict_strategy": ConflictStrategy.THEIRS.value,
    "reinit": ReinitPolicy.ALLOW.value,
}

# Keys whose values must be members of an enum
_ENUM_KEYS = {
    "conflict_strategy": ConflictStrategy,
    "reinit": ReinitPolicy,
}


@dataclass
class WorkflowSettings:
    """Effective settings consumed by the merge workflow."""

    remote: str = "origin"
    conflict_strategy: ConflictStrategy = ConflictStrategy.THEIRS
    reinit: ReinitPolicy = ReinitPolicy.ALLOW


def load_config(repo_root: Path) -> dict:
    """Load the mob configuration from .mob/config.yaml.

    Missing keys are filled from DEFAULT_CONFIG. A missing or corrupted file
    yields the defaults; nothing is written.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            return DEFAULT_CONFIG.copy()
        for key, value in DEFAULT_CONFIG.items():
            if key not in config:
                config[key] = value
        return config
    except (OSError, yaml.YAMLError):
        return DEFAULT_CONFIG.copy()


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to .mob/config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.
    """
    config_file = get_config_file(repo_root)
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def _parse_enum(key: str, value) -> Enum:
    enum_cls = _ENUM_KEYS[key]
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise UsageError(f"Invalid value for '{key}': {value} (valid: {valid})")


def load_workflow_settings_from_dict(config: dict) -> WorkflowSettings:
    """Build WorkflowSettings from a configuration dictionary.

    Raises:
        UsageError: If an enumerated key holds an unknown value.
    """
    remote = config.get("remote") or DEFAULT_CONFIG["remote"]
    return WorkflowSettings(
        remote=str(remote),
        conflict_strategy=_parse_enum(
            "conflict_strategy", config.get("conflict_strategy", DEFAULT_CONFIG["conflict_strategy"])
        ),
        reinit=_parse_enum("reinit", config.get("reinit", DEFAULT_CONFIG["reinit"])),
    )


def load_workflow_settings(repo_root: Path) -> WorkflowSettings:
    """Load the effective workflow settings for a repository."""
    return load_workflow_settings_from_dict(load_config(repo_root))


def set_config_value(repo_root: Path, key: str, value: str) -> None:
    """Validate and persist a single configuration value.

    Args:
        repo_root: The root directory of the git repository.
        key: One of the keys in DEFAULT_CONFIG.
        value: The new value.

    Raises:
        UsageError: If the key is unknown or the value is invalid.
    """
    if key not in DEFAULT_CONFIG:
        valid = ", ".join(DEFAULT_CONFIG)
        raise UsageError(f"Unknown config key: {key} (valid: {valid})")

    if key in _ENUM_KEYS:
        value = _parse_enum(key, value).value
    elif not value.strip():
        raise UsageError(f"Value for '{key}' cannot be empty")

    config = load_config(repo_root)
    config[key] = value
    save_config(repo_root, config)
