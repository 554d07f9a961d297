"""Shared utility functions for CLI commands."""

from typing import Any, Optional

import typer

from gitmoji_commit.config import Settings
from gitmoji_commit.tools import ToolResult, dispatch


def get_settings(ctx: typer.Context) -> Settings:
    """Get the settings loaded by the main callback.

    Falls back to defaults when a command is invoked without the callback
    having run (e.g. in tests).
    """
    if ctx.obj is None:
        ctx.obj = Settings()
    return ctx.obj


def run_tool(ctx: typer.Context, name: str, arguments: dict[str, Any]) -> ToolResult:
    """Run a tool through the dispatcher and print its result.

    Errors are printed to stderr and exit with status 1.
    """
    arguments = {k: v for k, v in arguments.items() if v is not None}
    result = dispatch(name, arguments, get_settings(ctx))

    if result.is_error:
        typer.echo(result.text, err=True)
        raise typer.Exit(1)

    typer.echo(result.text.rstrip("\n"))
    return result


def read_message(message: Optional[str], file: Optional[typer.FileText]) -> str:
    """Read a commit message from an argument, a file or stdin ("-")."""
    if file is not None:
        return file.read()
    if message == "-":
        return typer.get_text_stream("stdin").read()
    if message is None:
        typer.echo("Provide a message argument, '-' for stdin, or --file.", err=True)
        raise typer.Exit(1)
    return message
