"""Git Operations Package"""

from gtc.git.repository import (
    GitClient,
    GitError,
    RepositoryError,
    NotARepositoryError,
    GitUnavailableError,
    CommitError,
    CommitLaunchError,
    CommitExitError,
)

__all__ = [
    "GitClient",
    "GitError",
    "RepositoryError",
    "NotARepositoryError",
    "GitUnavailableError",
    "CommitError",
    "CommitLaunchError",
    "CommitExitError",
]
