"""Git collaborator for gitmoji_commit.

This package wraps the git command line with:
- runner: _run_git_command, get_repo_root
- status: get_staged_files, has_staged_changes
- diff: get_staged_stats, _parse_numstat
- commit: create_commit
"""

# Exceptions
from gitmoji_commit.exceptions import (
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from gitmoji_commit.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Status utilities
from gitmoji_commit.git.status import (
    get_staged_files,
    has_staged_changes,
)

# Diff statistics
from gitmoji_commit.git.diff import (
    get_staged_stats,
    _parse_numstat,
)

# Commit creation
from gitmoji_commit.git.commit import create_commit


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Status
    "get_staged_files",
    "has_staged_changes",
    # Diff
    "get_staged_stats",
    "_parse_numstat",
    # Commit
    "create_commit",
]
