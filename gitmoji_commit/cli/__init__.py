"""CLI entry point for gitmoji-commit.

This module provides the main CLI application that combines all commands
into a single unified interface.
"""

from typing import Optional

import typer
from pydantic import ValidationError

from gitmoji_commit import __version__
from gitmoji_commit.cli.commit import commit_command, suggest_command
from gitmoji_commit.cli.config import config_app
from gitmoji_commit.cli.message import (
    format_command,
    parse_command,
    types_command,
    validate_command,
)
from gitmoji_commit.cli.serve import serve_command
from gitmoji_commit.config import ConfigError, Settings, load_settings
from gitmoji_commit.logger import configure_logging

# Main application
app = typer.Typer(
    name="gitmoji-commit",
    help="gitmoji-commit: emoji commit message tools for AI assistants",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitmoji-commit {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the log level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        settings = load_settings()
        if log_level:
            settings = Settings(**{**settings.model_dump(), "log_level": log_level})
    except (ConfigError, ValidationError) as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = settings


# Add individual commands
app.command("types")(types_command)
app.command("format")(format_command)
app.command("validate")(validate_command)
app.command("parse")(parse_command)
app.command("suggest")(suggest_command)
app.command("commit")(commit_command)
app.command("serve")(serve_command)
app.add_typer(config_app, name="config")


__all__ = [
    "app",
    "types_command",
    "format_command",
    "validate_command",
    "parse_command",
    "suggest_command",
    "commit_command",
    "serve_command",
    "config_app",
]
