"""Exception classes for gitmoji_commit.

Contains:
- GitmojiCommitError: Base exception for all package errors
- UnknownTypeError: Raised when a commit type is not in the registry
- MalformedMessageError: Raised when a commit message cannot be decomposed
- InvalidMessageError: Raised when a formatted message fails validation
- ArgumentError: Raised when tool arguments fail boundary validation
- UnknownToolError: Raised when an unknown tool name is dispatched
- GitError: Raised when a git operation fails, carrying the underlying cause
- NoStagedChangesError: Raised when there are no staged changes
"""

from typing import Optional


class GitmojiCommitError(Exception):
    """Base exception for gitmoji_commit errors."""

    pass


class GitError(GitmojiCommitError):
    """Raised when a git operation fails.

    Attributes:
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NoStagedChangesError(GitmojiCommitError):
    """Raised when there are no staged changes."""

    pass


class UnknownTypeError(GitmojiCommitError):
    """Raised when a commit type is not one of the registered types."""

    def __init__(self, commit_type: str):
        super().__init__(f"Invalid commit type: {commit_type}")
        self.commit_type = commit_type


class MalformedMessageError(GitmojiCommitError):
    """Raised when a commit message does not follow the header grammar."""

    pass


class InvalidMessageError(GitmojiCommitError):
    """Raised when a formatted commit message fails validation.

    Attributes:
        issues: The blocking validation issues.
    """

    def __init__(self, issues: list[str]):
        super().__init__("Invalid commit message:\n" + "\n".join(issues))
        self.issues = list(issues)


class ArgumentError(GitmojiCommitError):
    """Raised when raw tool arguments cannot be coerced into a request."""

    pass


class UnknownToolError(GitmojiCommitError):
    """Raised when a tool name is not one of the known tools."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name
