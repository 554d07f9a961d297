"""Data models for gitmoji_commit message handling.

Contains:
- CommitFields: Pydantic model for the parts of a commit message
- ValidationOutcome: Result of validating a commit message
- EMOJI_PATTERN / HEADER_PATTERN: Regexes shared by the validator and parser
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict


# Leading emoji token followed by whitespace
EMOJI_PATTERN = re.compile(r"^(\S+)\s+")

# type, optional (scope), optional ! marker, then the title
HEADER_PATTERN = re.compile(r"^([a-z][a-z0-9]*)(\([^)]+\))?(!)?:\s+(.+)$")

BREAKING_CHANGE_MARKER = "BREAKING CHANGE:"


class CommitFields(BaseModel):
    """The parts of a gitmoji commit message.

    The type is not checked against the registry here; parsing returns
    fields for unregistered types and formatting rejects them.

    Attributes:
        type: Commit type identifier (feat, fix, docs, etc.).
        scope: Optional scope (e.g. auth, api, #123).
        title: Short summary in imperative mood.
        description: Optional body text.
        breaking: Whether this is a breaking change.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    scope: Optional[str] = None
    title: str
    description: Optional[str] = None
    breaking: bool = False


@dataclass
class ValidationOutcome:
    """Result of validating a commit message.

    Issues block acceptance; warnings are advisory. ``warnings`` is None
    when there are none.
    """

    issues: list[str] = field(default_factory=list)
    warnings: Optional[list[str]] = None

    @property
    def valid(self) -> bool:
        return not self.issues
