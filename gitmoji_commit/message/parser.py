"""Commit message parsing."""

from typing import Optional

from gitmoji_commit.exceptions import MalformedMessageError
from gitmoji_commit.message.models import EMOJI_PATTERN, HEADER_PATTERN, CommitFields


def parse_commit_message(message: str) -> Optional[CommitFields]:
    """Split a gitmoji commit message into its fields.

    Only the header grammar is checked. The type is not looked up in the
    registry and the emoji is not compared with it.

    Args:
        message: The full commit message.

    Returns:
        CommitFields, or None if the header does not match the grammar.
    """
    lines = message.split("\n")

    emoji_match = EMOJI_PATTERN.match(lines[0])
    if not emoji_match:
        return None

    header_match = HEADER_PATTERN.match(lines[0][emoji_match.end():])
    if not header_match:
        return None

    commit_type, scope, breaking, title = header_match.groups()

    description = None
    if len(lines) > 2:
        description = "\n".join(lines[2:]).strip() or None

    return CommitFields(
        type=commit_type,
        scope=scope[1:-1] if scope else None,
        title=title,
        description=description,
        breaking=breaking == "!",
    )


def parse_commit_message_strict(message: str) -> CommitFields:
    """Parse a commit message, raising if the header is malformed.

    Raises:
        MalformedMessageError: If the header does not match the grammar.
    """
    fields = parse_commit_message(message)
    if fields is None:
        first_line = message.split("\n")[0]
        raise MalformedMessageError(
            f"Cannot parse commit header: {first_line!r}. "
            "Expected: <emoji> <type>(<scope>): <title>"
        )
    return fields
