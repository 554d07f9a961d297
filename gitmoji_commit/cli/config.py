"""CLI commands for configuration management."""

from pathlib import Path

import typer
from pydantic import ValidationError

from gitmoji_commit.config import (
    ConfigError,
    Settings,
    get_config_file_path,
    load_config_file,
    save_config_file,
)
from gitmoji_commit.git import GitError, get_repo_root

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage gitmoji-commit configuration in ~/.gitmoji-commit/",
    add_completion=False,
    no_args_is_help=True,
)

SETTING_KEYS = tuple(Settings.model_fields)


def _check_key(key: str) -> None:
    if key not in SETTING_KEYS:
        typer.echo(f"Unknown setting: {key}", err=True)
        typer.echo(f"Valid settings: {', '.join(SETTING_KEYS)}")
        raise typer.Exit(1)


def _load() -> dict:
    try:
        return load_config_file()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show the values stored in the config file."""
    config = _load()

    typer.echo(f"Current gitmoji-commit configuration ({get_config_file_path()}):")
    typer.echo()
    for key in SETTING_KEYS:
        typer.echo(f"  {key}: {config.get(key, 'not set')}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help=f"Setting name ({', '.join(SETTING_KEYS)})"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a value in the config file.

    A repo_path is stored as the root of the repository it points into.
    """
    _check_key(key)
    config = _load()

    if key == "repo_path":
        try:
            value = str(get_repo_root(Path(value).expanduser().resolve()))
        except GitError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    try:
        settings = Settings(**{key: value})
    except ValidationError as e:
        typer.echo(f"Invalid value for {key}: {e.errors()[0]['msg']}", err=True)
        raise typer.Exit(1)

    config[key] = getattr(settings, key)
    path = save_config_file(config)
    typer.echo(f"✓ {key} set to {config[key]} in {path}")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help=f"Setting name ({', '.join(SETTING_KEYS)})"),
) -> None:
    """Remove a value from the config file."""
    _check_key(key)
    config = _load()

    if key not in config:
        typer.echo(f"{key} is not set")
        return

    del config[key]
    save_config_file(config)
    typer.echo(f"✓ {key} removed")
