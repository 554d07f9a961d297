"""Git diff statistics.

Contains:
- get_staged_stats: Get line counts and paths of the staged changes
- _parse_numstat: Parse NUL-separated `git diff --numstat -z` output
"""

from gitmoji_commit.classifier import ChangeStats
from gitmoji_commit.exceptions import GitError
from gitmoji_commit.git.runner import RepoPath, _run_git_command
from gitmoji_commit.git.status import get_staged_files


NUMSTAT_ARGS = ["-c", "core.quotepath=off", "diff", "--staged", "--numstat", "-z"]


def _parse_numstat(output: str) -> tuple[int, int, list[str]]:
    """Parse numstat output into totals and file paths.

    Each record is ``<added>\\t<deleted>\\t<path>`` terminated by NUL. For a
    rename the path is empty and the old and new paths follow as two more
    NUL-terminated fields; the new path is kept. Binary files report ``-``
    for both counts and are counted as zero.

    Args:
        output: The `git diff --numstat -z` output.

    Returns:
        Tuple of (additions, deletions, files).
    """
    additions = 0
    deletions = 0
    files = []

    fields = output.split("\0")
    i = 0

    while i < len(fields):
        record = fields[i]
        i += 1
        parts = record.split("\t", 2)
        if len(parts) < 3:
            continue
        added, deleted, path = parts
        if not path:
            # Rename: old path, then new path
            if i + 1 >= len(fields):
                break
            path = fields[i + 1]
            i += 2
        additions += int(added) if added.isdigit() else 0
        deletions += int(deleted) if deleted.isdigit() else 0
        files.append(path)

    return additions, deletions, files


def get_staged_stats(repo_path: RepoPath = None) -> ChangeStats:
    """Get statistics about the staged changes.

    Paths come from both the numstat output and the porcelain status so
    that staged files without line changes (e.g. empty new files) are
    included.

    Args:
        repo_path: Directory inside the repository.

    Returns:
        ChangeStats for the staged changes.

    Raises:
        GitError: If git fails.
    """
    try:
        numstat = _run_git_command(NUMSTAT_ARGS, repo_path)
        staged_files = get_staged_files(repo_path)
    except GitError as e:
        raise GitError(f"Failed to get staged diff: {e}", cause=e) from e

    additions, deletions, files = _parse_numstat(numstat)

    # Merge and deduplicate, keeping numstat order first
    all_files = list(dict.fromkeys(files + staged_files))

    return ChangeStats(additions=additions, deletions=deletions, files=frozenset(all_files))
