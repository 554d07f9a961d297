"""CLI commands for formatting, validating and parsing commit messages."""

from typing import Optional

import typer

from gitmoji_commit.cli.utils import read_message, run_tool
from gitmoji_commit.commit_types import COMMIT_TYPES, EXTENDED_TYPES, PRIMARY_TYPES
from gitmoji_commit.exceptions import MalformedMessageError
from gitmoji_commit.message import parse_commit_message_strict, wrap_text


def types_command() -> None:
    """List the available commit types and their emoji."""
    for heading, group in (("Primary types", PRIMARY_TYPES), ("Extended types", EXTENDED_TYPES)):
        typer.echo(f"{heading}:")
        for commit_type in group:
            info = COMMIT_TYPES[commit_type]
            typer.echo(f"  {info.emoji}  {commit_type:<10} {info.title}")
            typer.echo(f"      {info.description}")
        typer.echo()


def format_command(
    ctx: typer.Context,
    commit_type: str = typer.Argument(..., metavar="TYPE", help="The commit type (feat, fix, docs, etc.)"),
    title: str = typer.Argument(..., help="Brief description in imperative mood (50 chars max)"),
    scope: Optional[str] = typer.Option(None, "--scope", "-s", help="Optional scope (e.g., #123, auth, api)"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Optional detailed explanation"),
    breaking: bool = typer.Option(False, "--breaking", "-b", help="Mark as a breaking change"),
    wrap: bool = typer.Option(False, "--wrap", "-w", help="Wrap the description at 72 characters"),
) -> None:
    """Format a commit message with the emoji for its type."""
    if description and wrap:
        description = wrap_text(description)

    run_tool(
        ctx,
        "git_format_message",
        {
            "type": commit_type,
            "title": title,
            "scope": scope,
            "description": description,
            "breaking": breaking,
        },
    )


def validate_command(
    ctx: typer.Context,
    message: Optional[str] = typer.Argument(None, help="The commit message, or '-' to read stdin"),
    file: Optional[typer.FileText] = typer.Option(None, "--file", "-f", encoding="utf-8", help="Read the message from a file"),
) -> None:
    """Validate a commit message against the convention."""
    text = read_message(message, file)
    result = run_tool(ctx, "git_validate_message", {"message": text})

    if not result.text.startswith("✅"):
        raise typer.Exit(1)


def parse_command(
    message: Optional[str] = typer.Argument(None, help="The commit message, or '-' to read stdin"),
    file: Optional[typer.FileText] = typer.Option(None, "--file", "-f", encoding="utf-8", help="Read the message from a file"),
) -> None:
    """Show the fields of a commit message."""
    text = read_message(message, file)

    try:
        fields = parse_commit_message_strict(text)
    except MalformedMessageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"type:        {fields.type}")
    typer.echo(f"scope:       {fields.scope or '-'}")
    typer.echo(f"title:       {fields.title}")
    typer.echo(f"breaking:    {'yes' if fields.breaking else 'no'}")
    if fields.description:
        typer.echo("description:")
        for line in fields.description.split("\n"):
            typer.echo(f"  {line}")
