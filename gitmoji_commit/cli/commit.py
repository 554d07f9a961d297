"""CLI commands that work on the staged changes."""

from typing import Optional

import typer

from gitmoji_commit.cli.utils import get_settings, run_tool
from gitmoji_commit.tools import dispatch


def suggest_command(
    ctx: typer.Context,
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Path to the git repository"),
) -> None:
    """Suggest a commit type from the staged changes."""
    run_tool(ctx, "git_suggest_type", {"repo_path": repo})


def commit_command(
    ctx: typer.Context,
    commit_type: str = typer.Argument(..., metavar="TYPE", help="The commit type (feat, fix, docs, etc.)"),
    title: str = typer.Argument(..., help="Brief description in imperative mood (50 chars max)"),
    scope: Optional[str] = typer.Option(None, "--scope", "-s", help="Optional scope (e.g., #123, auth, api)"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Optional detailed explanation"),
    breaking: bool = typer.Option(False, "--breaking", "-b", help="Mark as a breaking change"),
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Path to the git repository"),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt and commit immediately",
    ),
) -> None:
    """Commit the staged changes with a formatted gitmoji message."""
    arguments = {
        "type": commit_type,
        "title": title,
        "scope": scope,
        "description": description,
        "breaking": breaking,
        "repo_path": repo,
    }

    if not yes:
        preview = dispatch("git_format_message", arguments, get_settings(ctx))
        if preview.is_error:
            typer.echo(preview.text, err=True)
            raise typer.Exit(1)

        message = preview.text.split("\n\n", 1)[1]
        typer.echo("=" * 60)
        typer.echo(message)
        typer.echo("=" * 60)
        typer.echo("")

        confirm = typer.prompt(
            "Commit with this message? [Y/n]",
            default="y",
            show_default=False,
        )
        if confirm.lower() not in ("y", "yes", ""):
            typer.echo("Commit cancelled.", err=True)
            raise typer.Exit(0)

    run_tool(ctx, "git_commit", arguments)
