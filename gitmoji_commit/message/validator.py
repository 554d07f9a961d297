"""Commit message validation.

Checks a message against the gitmoji header grammar and the usual git
message conventions. Structural problems are reported as issues; style
problems are reported as warnings.
"""

import re

from gitmoji_commit.commit_types import COMMIT_TYPES
from gitmoji_commit.message.models import (
    EMOJI_PATTERN,
    HEADER_PATTERN,
    ValidationOutcome,
)


MAX_TITLE_LENGTH = 50
MAX_BODY_LINE_LENGTH = 72

NON_IMPERATIVE_PREFIXES = ["added", "adds", "fixed", "fixes", "updated", "updates"]


def _imperative_stem(word: str) -> str:
    """Strip the past-tense or third-person suffix from a prefix word."""
    word = re.sub(r"s?ed$", "", word)
    word = re.sub(r"es$", "", word)
    return re.sub(r"s$", "", word)


def _check_title(title: str, warnings: list[str]) -> None:
    """Collect style warnings for the title."""
    if len(title) > MAX_TITLE_LENGTH:
        warnings.append(
            f"Title is {len(title)} characters (recommended max: {MAX_TITLE_LENGTH})"
        )

    first = title[:1]
    if first and first == first.upper() and first != first.lower():
        warnings.append("Title should start with lowercase letter")

    if title.endswith("."):
        warnings.append("Title should not end with a period")

    title_lower = title.lower()
    for prefix in NON_IMPERATIVE_PREFIXES:
        if title_lower.startswith(prefix):
            warnings.append(
                f'Use imperative mood: "{prefix}" should be "{_imperative_stem(prefix)}"'
            )
            break


def validate_commit_message(message: str) -> ValidationOutcome:
    """Validate a commit message.

    Empty messages, a missing emoji and a malformed header stop validation
    immediately. Otherwise the type, emoji and title are checked and every
    problem found is reported.

    Args:
        message: The full commit message.

    Returns:
        ValidationOutcome with issues and warnings.
    """
    issues: list[str] = []
    warnings: list[str] = []

    if not message or not message.strip():
        issues.append("Commit message cannot be empty")
        return ValidationOutcome(issues=issues)

    lines = message.split("\n")
    first_line = lines[0]

    emoji_match = EMOJI_PATTERN.match(first_line)
    if not emoji_match:
        issues.append("Commit message must start with an emoji")
        return ValidationOutcome(issues=issues)

    emoji = emoji_match.group(1)
    rest_of_line = first_line[len(emoji) + 1:]

    header_match = HEADER_PATTERN.match(rest_of_line)
    if not header_match:
        issues.append("Invalid commit format. Expected: <emoji> <type>(<scope>): <title>")
        return ValidationOutcome(issues=issues)

    commit_type, _scope, _breaking, title = header_match.groups()

    type_info = COMMIT_TYPES.get(commit_type)
    if type_info is None:
        issues.append(f"Invalid commit type: {commit_type}")
    elif emoji != type_info.emoji:
        issues.append(
            f"Emoji {emoji} doesn't match type {commit_type}. Expected {type_info.emoji}"
        )

    if not title:
        issues.append("Title cannot be empty")

    _check_title(title, warnings)

    if len(lines) > 1:
        if lines[1] != "":
            warnings.append("Second line should be blank (separate title from description)")

        for index, line in enumerate(lines[2:], start=2):
            if len(line) > MAX_BODY_LINE_LENGTH:
                warnings.append(
                    f"Line {index + 1} is {len(line)} characters "
                    f"(recommended max: {MAX_BODY_LINE_LENGTH})"
                )

    return ValidationOutcome(issues=issues, warnings=warnings or None)
