"""Registry of gitmoji commit types.

Contains:
- TypeInfo: Emoji, title and description for a commit type
- PRIMARY_TYPES / EXTENDED_TYPES: Ordered type identifiers
- COMMIT_TYPES: Read-only mapping of type identifier to TypeInfo
- lookup: Get the TypeInfo for a type identifier
- is_commit_type: Check whether an identifier is registered

The emoji glyphs are part of the wire format and must not change.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from gitmoji_commit.exceptions import UnknownTypeError


@dataclass(frozen=True)
class TypeInfo:
    """Metadata for a commit type."""

    emoji: str
    title: str
    description: str


PRIMARY_TYPES = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
)

EXTENDED_TYPES = (
    "security",
    "deprecate",
    "breaking",
    "i18n",
    "a11y",
    "deps",
)

COMMIT_TYPES: Mapping[str, TypeInfo] = MappingProxyType({
    # Primary types
    "feat": TypeInfo(
        emoji="✨",
        title="Features",
        description="A new feature",
    ),
    "fix": TypeInfo(
        emoji="🐛",
        title="Bug Fixes",
        description="A bug fix",
    ),
    "docs": TypeInfo(
        emoji="📝",
        title="Documentation",
        description="Documentation only changes",
    ),
    "style": TypeInfo(
        emoji="🎨",
        title="Styles",
        description="Changes that do not affect code meaning (whitespace, formatting, missing semi-colons, etc.)",
    ),
    "refactor": TypeInfo(
        emoji="♻️",
        title="Code Refactoring",
        description="A code change that neither fixes a bug nor adds a feature",
    ),
    "perf": TypeInfo(
        emoji="⚡",
        title="Performance Improvements",
        description="A code change that improves performance",
    ),
    "test": TypeInfo(
        emoji="🧪",
        title="Tests",
        description="Adding missing tests or correcting existing tests",
    ),
    "build": TypeInfo(
        emoji="📦",
        title="Builds",
        description="Changes that affect the build system or external dependencies (npm, maven, gradle, etc.)",
    ),
    "ci": TypeInfo(
        emoji="👷",
        title="Continuous Integration",
        description="Changes to CI configuration files and scripts (GitHub Actions, GitLab CI, Jenkins, etc.)",
    ),
    "chore": TypeInfo(
        emoji="🔧",
        title="Chores",
        description="Other changes that don't modify src or test files (maintenance tasks, config updates, etc.)",
    ),
    "revert": TypeInfo(
        emoji="⏪",
        title="Reverts",
        description="Reverts a previous commit",
    ),
    # Extended types
    "security": TypeInfo(
        emoji="🔒",
        title="Security Fixes",
        description="Security vulnerability fixes or improvements",
    ),
    "deprecate": TypeInfo(
        emoji="⚠️",
        title="Deprecations",
        description="Mark features/APIs as deprecated",
    ),
    "breaking": TypeInfo(
        emoji="💥",
        title="Breaking Changes",
        description="Changes that break backward compatibility",
    ),
    "i18n": TypeInfo(
        emoji="🌐",
        title="Internationalization",
        description="Translations and localization changes",
    ),
    "a11y": TypeInfo(
        emoji="♿",
        title="Accessibility",
        description="Accessibility improvements",
    ),
    "deps": TypeInfo(
        emoji="⬆️",
        title="Dependencies",
        description="Dependency updates (when not using automated tools)",
    ),
})


def is_commit_type(commit_type: str) -> bool:
    """Return True if commit_type is a registered type identifier."""
    return commit_type in COMMIT_TYPES


def lookup(commit_type: str) -> TypeInfo:
    """Get the metadata for a commit type.

    Args:
        commit_type: The type identifier (e.g. "feat").

    Returns:
        The TypeInfo for the type.

    Raises:
        UnknownTypeError: If the type is not registered.
    """
    try:
        return COMMIT_TYPES[commit_type]
    except KeyError:
        raise UnknownTypeError(commit_type) from None
