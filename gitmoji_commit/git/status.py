"""Git status utilities.

Contains:
- get_staged_files: Get the paths staged in the index, from porcelain status
- has_staged_changes: Check if anything is staged for commit
- _parse_porcelain: Parse NUL-separated `git status --porcelain=v1 -z` output
"""

from gitmoji_commit.exceptions import GitError
from gitmoji_commit.git.runner import RepoPath, _run_git_command


# Paths are reported verbatim (no quoting or octal escapes) and NUL-terminated
STATUS_ARGS = ["-c", "core.quotepath=off", "status", "--porcelain=v1", "-z"]


def _parse_porcelain(output: str) -> list[tuple[str, str]]:
    """Parse porcelain v1 status entries.

    Each entry is ``XY <path>``. Renamed and copied entries are followed by
    a separate field holding the original path, which is skipped.

    Args:
        output: The `git status --porcelain=v1 -z` output.

    Returns:
        List of (status, path) tuples, status being the two-column code.
    """
    entries = []
    fields = output.split("\0")
    i = 0

    while i < len(fields):
        entry = fields[i]
        i += 1
        # Skip empty fields and anything too short to hold a path
        if len(entry) < 4:
            continue
        status = entry[:2]
        entries.append((status, entry[3:]))
        if "R" in status or "C" in status:
            i += 1

    return entries


def get_staged_files(repo_path: RepoPath = None) -> list[str]:
    """Get the files with staged changes.

    The porcelain format uses two columns:
    - First column: staged status (index)
    - Second column: worktree status

    We only include entries where the first column indicates a staged change.

    Args:
        repo_path: Directory inside the repository.

    Returns:
        List of staged file paths.
    """
    output = _run_git_command(STATUS_ARGS, repo_path)

    return [
        path
        for status, path in _parse_porcelain(output)
        if status[0] not in (" ", "?", "!")
    ]


def has_staged_changes(repo_path: RepoPath = None) -> bool:
    """Check if there are staged changes.

    Args:
        repo_path: Directory inside the repository.

    Returns:
        True if at least one file is staged.

    Raises:
        GitError: If git status cannot be read.
    """
    try:
        return len(get_staged_files(repo_path)) > 0
    except GitError as e:
        raise GitError(f"Failed to check git status: {e}", cause=e) from e
