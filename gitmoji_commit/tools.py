"""Tool dispatcher for gitmoji_commit.

Exposes the message codec, the type classifier and commit creation as
four named tools. Raw argument mappings are validated into request
models before they reach the codec, results are rendered as text, and
every error is returned as an error result instead of being raised.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from gitmoji_commit.classifier import suggest_commit_type
from gitmoji_commit.commit_types import COMMIT_TYPES, lookup
from gitmoji_commit.config import Settings
from gitmoji_commit.exceptions import (
    ArgumentError,
    GitmojiCommitError,
    InvalidMessageError,
    NoStagedChangesError,
    UnknownToolError,
)
from gitmoji_commit.git import create_commit, get_staged_stats, has_staged_changes
from gitmoji_commit.logger import get_logger
from gitmoji_commit.message import (
    CommitFields,
    format_commit_message,
    validate_commit_message,
)


logger = get_logger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Text payload of a tool call and whether it is an error."""

    text: str
    is_error: bool = False


# ============================================================
# REQUEST MODELS
# ============================================================


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")


class FormatMessageArgs(_ToolArgs):
    """Arguments for git_format_message."""

    type: str
    title: str
    scope: Optional[str] = None
    description: Optional[str] = None
    breaking: bool = False

    @field_validator("breaking", mode="before")
    @classmethod
    def none_is_not_breaking(cls, v):
        """Treat an explicit null as false."""
        return False if v is None else v

    def to_fields(self) -> CommitFields:
        return CommitFields(
            type=self.type,
            scope=self.scope,
            title=self.title,
            description=self.description,
            breaking=self.breaking,
        )


class ValidateMessageArgs(_ToolArgs):
    """Arguments for git_validate_message."""

    message: Optional[str] = None


class SuggestTypeArgs(_ToolArgs):
    """Arguments for git_suggest_type."""

    repo_path: Optional[str] = None


class CommitArgs(FormatMessageArgs):
    """Arguments for git_commit."""

    repo_path: Optional[str] = None


def _parse_args(model: type[BaseModel], arguments: Optional[Mapping[str, Any]]):
    """Validate a raw argument mapping into a request model.

    Raises:
        ArgumentError: If the arguments are missing or have the wrong types.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ArgumentError("Tool arguments must be an object")

    try:
        return model.model_validate(dict(arguments))
    except ValidationError as e:
        problems = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "arguments"
            problems.append(f"{location}: {error['msg']}")
        raise ArgumentError("Invalid arguments: " + "; ".join(problems)) from e


def _numbered(items: list[str]) -> str:
    return "".join(f"{i}. {item}\n" for i, item in enumerate(items, start=1))


def _repo_path(requested: Optional[str], settings: Settings) -> Optional[str]:
    return requested or settings.repo_path


# ============================================================
# HANDLERS
# ============================================================


def format_message_tool(arguments: Mapping[str, Any], settings: Settings) -> str:
    """Format a commit message from its fields."""
    args = _parse_args(FormatMessageArgs, arguments)
    message = format_commit_message(args.to_fields())
    return f"Formatted commit message:\n\n{message}"


def validate_message_tool(arguments: Mapping[str, Any], settings: Settings) -> str:
    """Validate a commit message and report issues and warnings."""
    args = _parse_args(ValidateMessageArgs, arguments)
    if not args.message:
        raise ArgumentError("Message is required")

    outcome = validate_commit_message(args.message)

    if outcome.valid:
        text = "✅ Commit message is valid!\n"
    else:
        text = "❌ Commit message has issues:\n\n" + _numbered(outcome.issues)

    if outcome.warnings:
        text += "\n⚠️  Warnings:\n" + _numbered(outcome.warnings)

    return text


def suggest_type_tool(arguments: Mapping[str, Any], settings: Settings) -> str:
    """Suggest a commit type from the staged changes."""
    args = _parse_args(SuggestTypeArgs, arguments)
    stats = get_staged_stats(_repo_path(args.repo_path, settings))
    suggestion = suggest_commit_type(stats)

    return (
        f"Suggested commit type: {suggestion.emoji} {suggestion.type}\n"
        f"\n"
        f"Confidence: {suggestion.confidence.value}\n"
        f"Reason: {suggestion.reason}\n"
        f"\n"
        f"Type description: {lookup(suggestion.type).description}"
    )


def commit_tool(arguments: Mapping[str, Any], settings: Settings) -> str:
    """Format, validate and commit the staged changes."""
    args = _parse_args(CommitArgs, arguments)
    repo_path = _repo_path(args.repo_path, settings)

    if not has_staged_changes(repo_path):
        raise NoStagedChangesError(
            "No staged changes found. Please stage your changes first with git add."
        )

    message = format_commit_message(args.to_fields())

    outcome = validate_commit_message(message)
    if not outcome.valid:
        raise InvalidMessageError(outcome.issues)

    commit_hash = create_commit(message, repo_path)

    text = f"✅ Commit created successfully!\n\nCommit hash: {commit_hash}\n\nMessage:\n{message}"
    if outcome.warnings:
        text += "\n\n⚠️  Warnings:\n" + _numbered(outcome.warnings)

    return text


ToolHandler = Callable[[Mapping[str, Any], Settings], str]

TOOL_HANDLERS: Mapping[str, ToolHandler] = {
    "git_format_message": format_message_tool,
    "git_validate_message": validate_message_tool,
    "git_suggest_type": suggest_type_tool,
    "git_commit": commit_tool,
}

TOOL_NAMES = tuple(TOOL_HANDLERS)

TYPE_CHOICES = ", ".join(COMMIT_TYPES)


def get_handler(name: str) -> ToolHandler:
    """Get the handler for a tool name.

    Raises:
        UnknownToolError: If the name is not a known tool.
    """
    try:
        return TOOL_HANDLERS[name]
    except KeyError:
        raise UnknownToolError(name) from None


def dispatch(
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> ToolResult:
    """Run a tool by name.

    Errors never propagate: package errors and unexpected exceptions alike
    come back as a ToolResult with is_error set.

    Args:
        name: Tool name (e.g. "git_commit").
        arguments: Raw argument mapping from the caller.
        settings: Runtime settings. Defaults to Settings().

    Returns:
        ToolResult with the rendered text.
    """
    if settings is None:
        settings = Settings()

    logger.debug("Tool call", tool=name)
    try:
        handler = get_handler(name)
        return ToolResult(text=handler(arguments, settings))
    except GitmojiCommitError as e:
        logger.warning("Tool failed", tool=name, error=str(e), error_type=type(e).__name__)
        return ToolResult(text=f"Error: {e}", is_error=True)
    except Exception as e:
        logger.exception("Tool crashed", tool=name)
        return ToolResult(text=f"Error: {e}", is_error=True)
