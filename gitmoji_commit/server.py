"""MCP server exposing the gitmoji commit tools over stdio."""

from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from gitmoji_commit.commit_types import COMMIT_TYPES
from gitmoji_commit.config import Settings
from gitmoji_commit.logger import get_logger
from gitmoji_commit.tools import TYPE_CHOICES, dispatch


logger = get_logger(__name__)

SERVER_NAME = "gitmoji-commit-mcp"

TYPE_HELP = f"The commit type ({TYPE_CHOICES})"
SCOPE_HELP = "Optional scope (e.g., #123, auth, api)"
TITLE_HELP = "Brief description in imperative mood (50 chars max)"

# Advertised as a closed choice; unknown types still reach the dispatcher,
# which reports them in the uniform error format
CommitTypeArg = Annotated[
    str,
    Field(description=TYPE_HELP, json_schema_extra={"enum": list(COMMIT_TYPES)}),
]


def _forward(name: str, arguments: dict[str, Any], settings: Settings) -> CallToolResult:
    """Run a tool through the dispatcher and wrap its text as a tool result.

    Arguments left as None are dropped so the request models apply their
    defaults. Error results are returned with isError set, so clients see
    the dispatcher's text unchanged.
    """
    arguments = {k: v for k, v in arguments.items() if v is not None}
    result = dispatch(name, arguments, settings)
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def create_server(settings: Optional[Settings] = None) -> FastMCP:
    """Build the MCP server with the four gitmoji tools registered.

    Args:
        settings: Runtime settings. Defaults to Settings().

    Returns:
        The configured FastMCP server.
    """
    if settings is None:
        settings = Settings()

    server = FastMCP(SERVER_NAME)

    @server.tool(
        name="git_format_message",
        description=(
            "Format a commit message according to the git-emoji-commit convention. "
            "Takes commit parameters and returns a properly formatted message with emoji. "
            f"type: {TYPE_HELP}. scope: {SCOPE_HELP}. title: {TITLE_HELP}. "
            "description: Optional detailed explanation. "
            "breaking: Whether this is a breaking change."
        ),
    )
    def git_format_message(
        type: CommitTypeArg,
        title: str,
        scope: Optional[str] = None,
        description: Optional[str] = None,
        breaking: bool = False,
    ) -> CallToolResult:
        return _forward(
            "git_format_message",
            {
                "type": type,
                "title": title,
                "scope": scope,
                "description": description,
                "breaking": breaking,
            },
            settings,
        )

    @server.tool(
        name="git_validate_message",
        description=(
            "Validate a commit message against the git-emoji-commit convention. "
            "Returns validation results with any issues or warnings."
        ),
    )
    def git_validate_message(message: str) -> CallToolResult:
        return _forward("git_validate_message", {"message": message}, settings)

    @server.tool(
        name="git_suggest_type",
        description=(
            "Analyze staged git changes and suggest an appropriate commit type. "
            "Returns suggested type with reasoning. "
            "repo_path: Optional path to the git repository."
        ),
    )
    def git_suggest_type(repo_path: Optional[str] = None) -> CallToolResult:
        return _forward("git_suggest_type", {"repo_path": repo_path}, settings)

    @server.tool(
        name="git_commit",
        description=(
            "Create a git commit following the emoji-commit convention. "
            "Validates staged changes exist, formats the message, and creates the commit. "
            f"type: {TYPE_HELP}. scope: {SCOPE_HELP}. title: {TITLE_HELP}. "
            "description: Optional detailed explanation. "
            "breaking: Whether this is a breaking change. "
            "repo_path: Optional path to the git repository."
        ),
    )
    def git_commit(
        type: CommitTypeArg,
        title: str,
        scope: Optional[str] = None,
        description: Optional[str] = None,
        breaking: bool = False,
        repo_path: Optional[str] = None,
    ) -> CallToolResult:
        return _forward(
            "git_commit",
            {
                "type": type,
                "title": title,
                "scope": scope,
                "description": description,
                "breaking": breaking,
                "repo_path": repo_path,
            },
            settings,
        )

    return server


def run_server(settings: Optional[Settings] = None) -> None:
    """Serve the tools over stdio until the client disconnects."""
    server = create_server(settings)
    logger.info("Gitmoji Commit MCP Server running on stdio")
    server.run(transport="stdio")
