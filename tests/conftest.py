"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gitmoji_commit.message import CommitFields


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config loading at an empty temp location and clear env overrides."""
    monkeypatch.setenv("GITMOJI_COMMIT_CONFIG", str(tmp_path / "config.yaml"))
    for var in ("GITMOJI_COMMIT_REPO", "GITMOJI_COMMIT_LOG_LEVEL", "GITMOJI_COMMIT_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_fields():
    """Sample commit fields from the OAuth2 scenario."""
    return CommitFields(
        type="feat",
        scope="auth",
        title="add OAuth2 authentication",
        description="Implemented OAuth2 flow.",
        breaking=False,
    )


@pytest.fixture
def sample_numstat():
    """Sample `git diff --staged --numstat -z` output."""
    return "".join([
        "120\t4\tsrc/auth/login.ts\0",
        "30\t8\tsrc/auth/session.ts\0",
        "-\t-\tassets/logo.png\0",
    ])


@pytest.fixture
def sample_porcelain():
    """Sample `git status --porcelain=v1 -z` output with staged and unstaged entries."""
    return "".join([
        "M  src/auth/login.ts\0",
        "A  src/auth/session.ts\0",
        "A  assets/logo.png\0",
        "A  src/auth/empty.ts\0",
        " M README.md\0",
        "?? notes.txt\0",
    ])


@pytest.fixture
def git_output():
    """Factory for fake subprocess.run results."""
    def _make(stdout: str = "", returncode: int = 0):
        result = MagicMock()
        result.stdout = stdout
        result.returncode = returncode
        return result
    return _make


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
