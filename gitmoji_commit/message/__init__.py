"""Gitmoji commit message codec.

This package provides:
- models: CommitFields, ValidationOutcome, header regexes
- formatter: format_commit_message, wrap_text
- validator: validate_commit_message
- parser: parse_commit_message, parse_commit_message_strict
"""

from gitmoji_commit.message.models import (
    BREAKING_CHANGE_MARKER,
    CommitFields,
    ValidationOutcome,
)
from gitmoji_commit.message.formatter import format_commit_message, wrap_text
from gitmoji_commit.message.validator import validate_commit_message
from gitmoji_commit.message.parser import (
    parse_commit_message,
    parse_commit_message_strict,
)


__all__ = [
    "BREAKING_CHANGE_MARKER",
    "CommitFields",
    "ValidationOutcome",
    "format_commit_message",
    "wrap_text",
    "validate_commit_message",
    "parse_commit_message",
    "parse_commit_message_strict",
]
