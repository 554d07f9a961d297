"""Tests for gitmoji_commit.server module."""

import asyncio

from mcp.shared.memory import create_connected_server_and_client_session

from gitmoji_commit.commit_types import COMMIT_TYPES
from gitmoji_commit.config import Settings
from gitmoji_commit.server import SERVER_NAME, _forward, create_server, run_server


def _list_tools(server):
    return {tool.name: tool for tool in asyncio.run(server.list_tools())}


def _call_tool(name, arguments, settings=None):
    """Call a tool through an in-memory client session."""
    async def _run():
        server = create_server(settings)
        async with create_connected_server_and_client_session(server) as session:
            return await session.call_tool(name, arguments)

    return asyncio.run(_run())


class TestCreateServer:
    """Tests for create_server function."""

    def test_server_name(self):
        """Test the server identifies itself."""
        assert create_server().name == SERVER_NAME

    def test_registers_four_tools(self):
        """Test the tool names exposed to clients."""
        tools = _list_tools(create_server())
        assert set(tools) == {
            "git_format_message",
            "git_validate_message",
            "git_suggest_type",
            "git_commit",
        }

    def test_required_arguments(self):
        """Test only type and title are required for formatting and committing."""
        tools = _list_tools(create_server())

        assert set(tools["git_format_message"].inputSchema["required"]) == {"type", "title"}
        assert set(tools["git_commit"].inputSchema["required"]) == {"type", "title"}
        assert tools["git_validate_message"].inputSchema["required"] == ["message"]
        assert "required" not in tools["git_suggest_type"].inputSchema

    def test_type_is_closed_choice(self):
        """Test the type argument lists the registered types."""
        tools = _list_tools(create_server())

        for name in ("git_format_message", "git_commit"):
            type_schema = tools[name].inputSchema["properties"]["type"]
            assert type_schema["enum"] == list(COMMIT_TYPES)
            assert type_schema["type"] == "string"

    def test_descriptions_list_types(self):
        """Test the type choices appear in the tool description."""
        tools = _list_tools(create_server())
        assert "a11y" in tools["git_commit"].description
        assert "feat" in tools["git_format_message"].description


class TestForward:
    """Tests for _forward function."""

    def test_returns_text(self):
        """Test a successful tool call returns its text."""
        result = _forward(
            "git_format_message",
            {"type": "fix", "title": "handle null token", "scope": None},
            Settings(),
        )
        assert result.isError is False
        assert result.content[0].text == (
            "Formatted commit message:\n\n\U0001F41B fix: handle null token"
        )

    def test_error_result(self):
        """Test error results keep the dispatcher text and set isError."""
        result = _forward("git_format_message", {"type": "wip", "title": "draft"}, Settings())
        assert result.isError is True
        assert result.content[0].text == "Error: Invalid commit type: wip"

    def test_passes_settings(self, mocker):
        """Test the settings reach the dispatcher."""
        mock_dispatch = mocker.patch("gitmoji_commit.server.dispatch")
        mock_dispatch.return_value.is_error = False
        mock_dispatch.return_value.text = "ok"
        settings = Settings(repo_path="/work/app")

        assert _forward("git_suggest_type", {"repo_path": None}, settings).content[0].text == "ok"
        mock_dispatch.assert_called_once_with("git_suggest_type", {}, settings)


class TestCallTool:
    """Tests for tool calls over an MCP client session."""

    def test_format_message(self):
        """Test a successful call returns the formatted message."""
        result = _call_tool(
            "git_format_message",
            {"type": "feat", "scope": "auth", "title": "add OAuth2 authentication"},
        )

        assert result.isError is False
        assert result.content[0].text == (
            "Formatted commit message:\n\n✨ feat(auth): add OAuth2 authentication"
        )

    def test_unknown_type_error_text(self):
        """Test errors reach the client as the uniform error text."""
        result = _call_tool("git_format_message", {"type": "wip", "title": "draft"})

        assert result.isError is True
        assert len(result.content) == 1
        assert result.content[0].text == "Error: Invalid commit type: wip"

    def test_validate_issues_are_not_errors(self):
        """Test an invalid message is a normal result."""
        result = _call_tool("git_validate_message", {"message": "\U0001F6A7 wip: half done"})

        assert result.isError is False
        assert result.content[0].text.startswith("❌ Commit message has issues:")

    def test_commit_without_staged_changes(self, mocker):
        """Test the commit tool reports an empty index as an error."""
        mocker.patch("gitmoji_commit.tools.has_staged_changes", return_value=False)

        result = _call_tool("git_commit", {"type": "feat", "title": "add login"})

        assert result.isError is True
        assert result.content[0].text == (
            "Error: No staged changes found. Please stage your changes first with git add."
        )


class TestRunServer:
    """Tests for run_server function."""

    def test_runs_stdio(self, mocker):
        """Test the server is started on the stdio transport."""
        mock_run = mocker.patch("mcp.server.fastmcp.FastMCP.run")

        run_server(Settings())

        mock_run.assert_called_once_with(transport="stdio")
