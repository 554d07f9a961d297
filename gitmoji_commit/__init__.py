"""Gitmoji commit message tools for AI assistants."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gitmoji-commit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
