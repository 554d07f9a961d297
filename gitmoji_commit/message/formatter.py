"""Commit message formatting.

Contains:
- format_commit_message: Render CommitFields into a gitmoji commit message
- wrap_text: Greedy word wrap for description text
"""

from gitmoji_commit.commit_types import lookup
from gitmoji_commit.message.models import BREAKING_CHANGE_MARKER, CommitFields


def format_commit_message(fields: CommitFields) -> str:
    """Render commit fields into the gitmoji message format.

    The header is ``<emoji> <type>[(<scope>)][!]: <title>``, followed by a
    blank line and the description when one is given.

    A breaking change with a description that lacks a ``BREAKING CHANGE:``
    footer gets an empty ``BREAKING CHANGE: `` footer appended. Without a
    description no footer is added.

    Args:
        fields: The commit fields.

    Returns:
        The formatted commit message.

    Raises:
        UnknownTypeError: If fields.type is not a registered type.

    Example output:
        ✨ feat(auth): add OAuth2 authentication

        Implemented OAuth2 flow.
    """
    emoji = lookup(fields.type).emoji
    scope = f"({fields.scope})" if fields.scope else ""
    marker = "!" if fields.breaking else ""

    message = f"{emoji} {fields.type}{scope}{marker}: {fields.title}"

    if fields.description:
        message += "\n\n" + fields.description

    if (
        fields.breaking
        and fields.description
        and BREAKING_CHANGE_MARKER not in fields.description
    ):
        message += f"\n\n{BREAKING_CHANGE_MARKER} "

    return message


def wrap_text(text: str, width: int = 72) -> str:
    """Wrap text to the given width.

    Words are split on single spaces and packed greedily. A word longer
    than width is put on its own line and never broken.

    Args:
        text: Text to wrap.
        width: Maximum line width.

    Returns:
        Wrapped text.
    """
    lines = []
    current = ""

    for word in text.split(" "):
        if len(current) + len(word) + 1 <= width:
            current += (" " if current else "") + word
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)

    return "\n".join(lines)
