"""Git commit creation."""

from gitmoji_commit.exceptions import GitError
from gitmoji_commit.git.runner import RepoPath, _run_git_command
from gitmoji_commit.logger import get_logger


logger = get_logger(__name__)


def create_commit(message: str, repo_path: RepoPath = None) -> str:
    """Create a commit from the staged changes.

    The message is passed on stdin so that it is not subject to shell or
    argument-length limits.

    Args:
        message: The full commit message.
        repo_path: Directory inside the repository.

    Returns:
        The hash of the new commit.

    Raises:
        GitError: If the commit fails or its hash cannot be read.
    """
    try:
        _run_git_command(["commit", "-F", "-"], repo_path, input_text=message)
    except GitError as e:
        raise GitError(f"Failed to create commit: {e}", cause=e) from e

    try:
        commit_hash = _run_git_command(["rev-parse", "HEAD"], repo_path)
    except GitError as e:
        raise GitError(f"Commit created but its hash could not be read: {e}", cause=e) from e

    logger.info("Created commit", commit=commit_hash)
    return commit_hash
