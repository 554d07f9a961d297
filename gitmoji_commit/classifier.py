"""Commit type suggestion from staged change statistics.

Contains:
- ChangeStats: Line counts and file paths of a staged change set
- Confidence: Confidence level of a suggestion
- Suggestion: A suggested commit type with its justification
- suggest_commit_type: Classify a change set into a commit type
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from gitmoji_commit.commit_types import lookup
from gitmoji_commit.exceptions import NoStagedChangesError


@dataclass(frozen=True)
class ChangeStats:
    """Aggregate statistics about the staged changes."""

    additions: int = 0
    deletions: int = 0
    files: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.additions < 0 or self.deletions < 0:
            raise ValueError("Line counts cannot be negative")
        # Accept any iterable of paths
        object.__setattr__(self, "files", frozenset(self.files))


class Confidence(Enum):
    """How confident a suggestion is."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Suggestion:
    """A suggested commit type."""

    type: str
    emoji: str
    reason: str
    confidence: Confidence


DOC_PATTERN = re.compile(r"\.(md|txt|rst|adoc)$", re.IGNORECASE)
DOC_MARKERS = ("README", "docs/")

TEST_PATTERN = re.compile(r"\.(test|spec)\.(ts|js|tsx|jsx)$", re.IGNORECASE)
TEST_MARKERS = ("__tests__/", "test/", "tests/")

CI_PATTERN = re.compile(r"\.(yml|yaml)$", re.IGNORECASE)
CI_MARKERS = (".github/", ".gitlab/", "jenkins", "circle")

# Dependency manifests and lock files, matched against the whole path
BUILD_PATTERN = re.compile(
    r"^(package\.json|package-lock\.json|yarn\.lock|pnpm-lock\.yaml|Gemfile\.lock"
    r"|requirements\.txt|pom\.xml|build\.gradle|Cargo\.toml|go\.mod|go\.sum)$",
    re.IGNORECASE,
)
DEPS_PATTERN = re.compile(r"lock|package\.json", re.IGNORECASE)

CONFIG_PATTERN = re.compile(
    r"\.(config|conf|cfg|ini|env|rc)(\.(ts|js|json|yaml|yml))?$",
    re.IGNORECASE,
)


def _is_doc_file(path: str) -> bool:
    return bool(DOC_PATTERN.search(path)) or any(m in path for m in DOC_MARKERS)


def _is_test_file(path: str) -> bool:
    return bool(TEST_PATTERN.search(path)) or any(m in path for m in TEST_MARKERS)


def _is_ci_file(path: str) -> bool:
    return bool(CI_PATTERN.search(path)) and any(m in path for m in CI_MARKERS)


def _is_config_file(path: str) -> bool:
    return bool(CONFIG_PATTERN.search(path)) or path.startswith(".")


def _suggest(commit_type: str, reason: str, confidence: Confidence) -> Suggestion:
    return Suggestion(
        type=commit_type,
        emoji=lookup(commit_type).emoji,
        reason=reason,
        confidence=confidence,
    )


def _suggest_from_files(files: Iterable[str]) -> Optional[Suggestion]:
    """Match the file list against the file-category rules, in order."""
    files = list(files)

    if all(_is_doc_file(f) for f in files):
        return _suggest("docs", "All changes are to documentation files", Confidence.HIGH)

    if all(_is_test_file(f) for f in files):
        return _suggest("test", "All changes are to test files", Confidence.HIGH)

    if all(_is_ci_file(f) for f in files):
        return _suggest("ci", "All changes are to CI/CD configuration files", Confidence.HIGH)

    build_files = [f for f in files if BUILD_PATTERN.match(f)]
    if build_files:
        if any(DEPS_PATTERN.search(f) for f in build_files):
            return _suggest("deps", "Changes to dependency files detected", Confidence.HIGH)
        return _suggest("build", "Changes to build configuration detected", Confidence.HIGH)

    if all(_is_config_file(f) for f in files):
        return _suggest("chore", "All changes are to configuration files", Confidence.HIGH)

    return None


def _suggest_from_volume(additions: int, deletions: int) -> Suggestion:
    """Guess the commit type from the ratio of added to deleted lines."""
    if deletions > 0:
        ratio = additions / deletions
    else:
        ratio = 10 if additions > 0 else 0
    total = additions + deletions

    # More additions than deletions suggests new feature
    if ratio > 2 and additions > 50:
        return _suggest(
            "feat",
            f"Significant additions ({additions} lines added vs {deletions} deleted) "
            "suggest new feature",
            Confidence.MEDIUM,
        )

    if 0.7 < ratio < 1.3 and total > 100:
        return _suggest(
            "refactor",
            f"Balanced changes ({additions} added, {deletions} deleted) suggest refactoring",
            Confidence.MEDIUM,
        )

    if total < 50:
        return _suggest("fix", "Small changes suggest bug fix", Confidence.LOW)

    return _suggest(
        "feat",
        "Unable to determine specific type, defaulting to feature",
        Confidence.LOW,
    )


def suggest_commit_type(stats: ChangeStats) -> Suggestion:
    """Suggest a commit type for a staged change set.

    File-category rules are tried first (docs, test, ci, deps/build,
    chore), then the additions/deletions volume decides.

    Args:
        stats: Statistics of the staged changes.

    Returns:
        The suggested type with confidence and reason.

    Raises:
        NoStagedChangesError: If no files are staged.
    """
    if not stats.files:
        raise NoStagedChangesError("No staged changes found")

    suggestion = _suggest_from_files(stats.files)
    if suggestion is not None:
        return suggestion

    return _suggest_from_volume(stats.additions, stats.deletions)
