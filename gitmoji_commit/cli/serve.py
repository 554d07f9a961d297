"""CLI command for running the MCP server."""

import typer

from gitmoji_commit.cli.utils import get_settings
from gitmoji_commit.server import run_server


def serve_command(ctx: typer.Context) -> None:
    """Run the MCP server over stdio."""
    try:
        run_server(get_settings(ctx))
    except KeyboardInterrupt:
        raise typer.Exit(0)
