"""Tests for gitmoji_commit.config module."""

import pytest
from pydantic import ValidationError

from gitmoji_commit.config import (
    ConfigError,
    Settings,
    get_config_file_path,
    load_config_file,
    load_settings,
    save_config_file,
)


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()
        assert settings.repo_path is None
        assert settings.log_level == "WARNING"
        assert settings.log_format == "pretty"

    def test_log_level_normalized(self):
        """Test log level names are case-insensitive."""
        assert Settings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        """Test an unknown log level."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_log_format_normalized(self):
        """Test log format is case-insensitive."""
        assert Settings(log_format="JSON").log_format == "json"

    def test_unknown_log_format_rejected(self):
        """Test an unknown log format."""
        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_empty_repo_path_is_none(self):
        """Test an empty repo_path is treated as unset."""
        assert Settings(repo_path="  ").repo_path is None


class TestConfigFilePath:
    """Tests for get_config_file_path function."""

    def test_env_override(self, tmp_path):
        """Test GITMOJI_COMMIT_CONFIG points at the file."""
        assert get_config_file_path() == tmp_path / "config.yaml"

    def test_default_location(self, monkeypatch):
        """Test the default is under the home directory."""
        monkeypatch.delenv("GITMOJI_COMMIT_CONFIG")
        path = get_config_file_path()
        assert path.name == "config.yaml"
        assert path.parent.name == ".gitmoji-commit"


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_missing_file_is_empty(self, temp_dir):
        """Test a missing file gives no values."""
        assert load_config_file(temp_dir / "absent.yaml") == {}

    def test_empty_file_is_empty(self, temp_dir):
        """Test an empty file gives no values."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text("")
        assert load_config_file(config_file) == {}

    def test_reads_values(self, temp_dir):
        """Test values are read from YAML."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text("repo_path: /work/app\nlog_level: info\n")
        assert load_config_file(config_file) == {"repo_path": "/work/app", "log_level": "info"}

    def test_malformed_yaml(self, temp_dir):
        """Test malformed YAML raises ConfigError."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text("log_level: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(config_file)
        assert "Failed to load config" in str(exc_info.value)

    def test_non_mapping(self, temp_dir):
        """Test a YAML list is rejected."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(config_file)
        assert "must contain a mapping" in str(exc_info.value)


class TestSaveConfigFile:
    """Tests for save_config_file function."""

    def test_creates_parent_dirs(self, temp_dir):
        """Test the file and its directory are created."""
        config_file = temp_dir / "nested" / "config.yaml"
        written = save_config_file({"log_format": "json"}, config_file)
        assert written == config_file
        assert load_config_file(config_file) == {"log_format": "json"}

    def test_default_path(self, tmp_path):
        """Test saving to the configured default location."""
        save_config_file({"repo_path": "/srv/repo"})
        assert (tmp_path / "config.yaml").exists()


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_defaults_without_file(self):
        """Test settings without a config file."""
        assert load_settings() == Settings()

    def test_file_values(self, tmp_path):
        """Test values from the config file are applied."""
        (tmp_path / "config.yaml").write_text("repo_path: /work/app\nlog_format: json\n")
        settings = load_settings()
        assert settings.repo_path == "/work/app"
        assert settings.log_format == "json"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Test environment variables take precedence over the file."""
        (tmp_path / "config.yaml").write_text("repo_path: /work/app\nlog_level: ERROR\n")
        monkeypatch.setenv("GITMOJI_COMMIT_REPO", "/other/repo")
        monkeypatch.setenv("GITMOJI_COMMIT_LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.repo_path == "/other/repo"
        assert settings.log_level == "DEBUG"

    def test_empty_env_var_ignored(self, tmp_path, monkeypatch):
        """Test an empty environment variable does not override."""
        (tmp_path / "config.yaml").write_text("log_format: json\n")
        monkeypatch.setenv("GITMOJI_COMMIT_LOG_FORMAT", "")
        assert load_settings().log_format == "json"

    def test_unknown_keys_ignored(self, tmp_path):
        """Test keys that are not settings are ignored."""
        (tmp_path / "config.yaml").write_text("theme: dark\n")
        assert load_settings() == Settings()

    def test_invalid_value(self, tmp_path):
        """Test an invalid value raises ConfigError."""
        (tmp_path / "config.yaml").write_text("log_level: LOUD\n")
        with pytest.raises(ConfigError) as exc_info:
            load_settings()
        assert "Invalid configuration" in str(exc_info.value)

    def test_explicit_file(self, temp_dir):
        """Test loading from an explicit path."""
        config_file = temp_dir / "custom.yaml"
        config_file.write_text("log_level: info\n")
        assert load_settings(config_file).log_level == "INFO"
