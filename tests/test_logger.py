"""Tests for gitmoji_commit.logger module."""

import json
import logging

from gitmoji_commit.logger import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_to_stderr(self, capsys):
        """Test JSON records go to stderr, never stdout."""
        configure_logging("INFO", "json")

        get_logger("gitmoji_commit.test").info("Created commit", commit="abc1234")

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip().splitlines()[-1])
        assert record["event"] == "Created commit"
        assert record["commit"] == "abc1234"
        assert record["level"] == "info"
        assert record["logger"] == "gitmoji_commit.test"

    def test_level_filters(self, capsys):
        """Test records below the level are dropped."""
        configure_logging("WARNING", "json")

        get_logger("gitmoji_commit.test").info("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_exception_rendered_in_json(self, capsys):
        """Test exception info is included in JSON output."""
        configure_logging("ERROR", "json")

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            get_logger("gitmoji_commit.test").exception("Tool crashed")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert "RuntimeError: boom" in record["exception"]

    def test_pretty_format(self, capsys):
        """Test console rendering."""
        configure_logging("DEBUG", "pretty")

        get_logger("gitmoji_commit.test").debug("Running git command", args=["status"])

        assert "Running git command" in capsys.readouterr().err

    def test_mcp_logger_quieted(self):
        """Test the MCP SDK logger is kept at WARNING or above."""
        configure_logging("DEBUG", "pretty")
        assert logging.getLogger("mcp").level == logging.WARNING
