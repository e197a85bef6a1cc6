"""Exception classes shared across mob.

Contains:
- MobError: Base exception for all mob errors
- UsageError: Raised when a command is invoked in a state it cannot run in
- StorageError: Raised when the tracking document cannot be read or written
"""


class MobError(Exception):
    """Base exception for mob errors."""

    pass


class UsageError(MobError):
    """Raised for operator mistakes detected before any repository mutation.

    Examples: not on a wip/<issue> branch, no fork point recorded for the
    issue, or an empty squash commit message.
    """

    pass


class StorageError(MobError):
    """Raised when the tracking document is unreadable or unwritable."""

    pass
