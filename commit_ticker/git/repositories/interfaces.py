"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from commit_ticker.git.domain.value_objects import RawDiff


class GitRepository(ABC):
    """Interface for Git repository operations."""

    @abstractmethod
    def get_staged_diff(self, repo_path: Path) -> RawDiff:
        """
        Get the diff of the changes staged for the next commit.

        Args:
            repo_path: Path to the git repository

        Returns:
            RawDiff containing the staged diff content
        """
        ...

    @abstractmethod
    def commit(self, repo_path: Path, message: str) -> None:
        """
        Record the staged changes as a new commit.

        Args:
            repo_path: Path to the git repository
            message: The full commit message
        """
        ...
