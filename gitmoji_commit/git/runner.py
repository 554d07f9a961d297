"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of a git repository
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from gitmoji_commit.exceptions import GitError
from gitmoji_commit.logger import get_logger


logger = get_logger(__name__)

RepoPath = Optional[Union[str, Path]]


def _run_git_command(
    args: list[str],
    repo_path: RepoPath = None,
    input_text: Optional[str] = None,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        repo_path: Directory to run git in. Defaults to the current directory.
        input_text: Text to pass to git on stdin.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running git command", args=args, repo_path=str(repo_path) if repo_path else None)
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            cwd=repo_path,
            input=input_text,
        )
        return result.stdout.rstrip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}", cause=e) from e
    except FileNotFoundError as e:
        if repo_path and not Path(repo_path).exists():
            raise GitError(f"Repository path does not exist: {repo_path}", cause=e) from e
        raise GitError("Git is not installed or not in PATH.", cause=e) from e
    except NotADirectoryError as e:
        raise GitError(f"Repository path is not a directory: {repo_path}", cause=e) from e
    except OSError as e:
        raise GitError(f"Failed to run git: {e}", cause=e) from e


def get_repo_root(repo_path: RepoPath = None) -> Path:
    """Get the root directory of a git repository.

    Args:
        repo_path: A directory inside the repository. Defaults to the current directory.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], repo_path)
        return Path(root)
    except GitError as e:
        raise GitError(
            "Not in a git repository. Please run this command from within a git repo.",
            cause=e,
        ) from e
