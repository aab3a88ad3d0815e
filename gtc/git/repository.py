"""Git Client - Repository check and commit."""

import subprocess
from typing import Callable

from gtc.errors import GtcError


class GitError(GtcError):
    """Raised when git operations fail."""
    pass


class RepositoryError(GitError):
    """Raised when the working directory cannot be used for a commit."""
    pass


class NotARepositoryError(RepositoryError):
    def __init__(self):
        super().__init__("This directory is not a repository. Run gtc inside a git working tree.")


class GitUnavailableError(RepositoryError):
    def __init__(self):
        super().__init__("Could not run git. Check that git is installed and in PATH.")


class CommitError(GitError):
    """Raised when 'git commit' does not succeed.

    git prints its own explanation (nothing to commit, hook rejection, ...)
    straight to the terminal, so the message stays generic.
    """
    pass


class CommitLaunchError(CommitError):
    def __init__(self):
        super().__init__("git commit failed: could not run git")


class CommitExitError(CommitError):
    def __init__(self, returncode: int):
        self.returncode = returncode
        super().__init__(f"git commit failed (exit status {returncode})")


class GitClient:
    """Runs the two git commands gtc needs.

    Args:
        runner: Callable with the signature of subprocess.run. Tests pass a
            fake that records the argv and returns a CompletedProcess.
    """

    GIT_BINARY = "git"

    def __init__(self, runner: Callable[..., subprocess.CompletedProcess] = subprocess.run, binary: str | None = None):
        self._run = runner
        self.binary = binary or self.GIT_BINARY

    def ensure_repository(self) -> None:
        """Fail fast if we're not inside a git working tree.

        Both output streams are discarded; only the exit status is used.
        """
        try:
            result = self._run(
                [self.binary, 'rev-parse', '--is-inside-work-tree'],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise GitUnavailableError() from e

        if result.returncode != 0:
            raise NotARepositoryError()

    def commit(self, message: str) -> None:
        """Record staged changes with message, passed to git as a single argument."""
        try:
            result = self._run([self.binary, 'commit', '-m', message])
        except OSError as e:
            raise CommitLaunchError() from e

        if result.returncode != 0:
            raise CommitExitError(result.returncode)
