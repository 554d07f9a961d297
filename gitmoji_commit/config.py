"""Configuration management for gitmoji_commit.

Handles user-level configuration stored in ~/.gitmoji-commit/config.yaml:
- repo_path: Default repository for tools that accept a repo_path
- log_level: Log level for stderr logging
- log_format: "pretty" or "json"

Environment variables override the file:
- GITMOJI_COMMIT_CONFIG: Alternative config file path
- GITMOJI_COMMIT_REPO, GITMOJI_COMMIT_LOG_LEVEL, GITMOJI_COMMIT_LOG_FORMAT
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from gitmoji_commit.exceptions import GitmojiCommitError


class ConfigError(GitmojiCommitError):
    """Raised when there's an error with the configuration."""

    pass


_CONFIG_DIR = Path.home() / ".gitmoji-commit"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("pretty", "json")

ENV_OVERRIDES = {
    "GITMOJI_COMMIT_REPO": "repo_path",
    "GITMOJI_COMMIT_LOG_LEVEL": "log_level",
    "GITMOJI_COMMIT_LOG_FORMAT": "log_format",
}


class Settings(BaseModel):
    """Runtime settings for the server and CLI."""

    repo_path: Optional[str] = None
    log_level: str = "WARNING"
    log_format: str = "pretty"

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        """Normalize and check the log level name."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("log_format")
    @classmethod
    def log_format_must_be_known(cls, v: str) -> str:
        """Normalize and check the log format."""
        v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v

    @field_validator("repo_path", mode="before")
    @classmethod
    def empty_repo_path_is_none(cls, v):
        """Treat an empty repo_path as unset."""
        if v is None or not str(v).strip():
            return None
        return str(v)


def get_config_file_path() -> Path:
    """Get path to the config.yaml file.

    Returns:
        $GITMOJI_COMMIT_CONFIG if set, else ~/.gitmoji-commit/config.yaml
    """
    override = os.environ.get("GITMOJI_COMMIT_CONFIG")
    if override:
        return Path(override).expanduser()
    return _CONFIG_DIR / "config.yaml"


def load_config_file(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """Load raw configuration values from a YAML file.

    Args:
        config_file: Path to the file. Defaults to get_config_file_path().

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        ConfigError: If the file cannot be read or is not a mapping.
    """
    if config_file is None:
        config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_config_file(config: Dict[str, Any], config_file: Optional[Path] = None) -> Path:
    """Save configuration values to a YAML file.

    Args:
        config: Configuration dictionary to save.
        config_file: Path to the file. Defaults to get_config_file_path().

    Returns:
        The path written.
    """
    if config_file is None:
        config_file = get_config_file_path()

    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    return config_file


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from the config file and environment.

    Args:
        config_file: Path to the config file. Defaults to get_config_file_path().

    Returns:
        Validated Settings.

    Raises:
        ConfigError: If the file is unreadable or a value is invalid.
    """
    values = load_config_file(config_file)

    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            values[key] = value

    try:
        return Settings(**{k: v for k, v in values.items() if k in Settings.model_fields})
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
