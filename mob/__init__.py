"""mob: per-issue wip/pr branch workflow for git."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("mob")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
