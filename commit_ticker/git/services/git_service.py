"""Git service for coordinating Git operations."""

from pathlib import Path

from commit_ticker.git.domain.value_objects import DiffFragment, RawDiff
from commit_ticker.git.repositories.interfaces import GitRepository
from commit_ticker.git.services.diff_splitter_service import DiffSplitterService


class GitService:
    """Service for Git operations."""

    def __init__(
        self,
        git_repository: GitRepository,
        diff_splitter: DiffSplitterService | None = None,
    ) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
            diff_splitter: Service used to split diffs by file. Defaults to DiffSplitterService()
        """
        self._git_repository = git_repository
        self._diff_splitter = diff_splitter or DiffSplitterService()

    def get_staged_diff(self, repo_path: Path) -> RawDiff:
        """
        Get the staged diff of a repository.

        Args:
            repo_path: Path to the git repository

        Returns:
            RawDiff containing the staged changes
        """
        return self._git_repository.get_staged_diff(repo_path)

    def get_staged_fragments(self, repo_path: Path) -> tuple[DiffFragment, ...]:
        """
        Get the staged changes of a repository split by file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Tuple of per-file fragments, empty when nothing is staged
        """
        raw_diff = self.get_staged_diff(repo_path)
        if raw_diff.is_empty:
            return ()
        return self._diff_splitter.split(raw_diff)

    def commit(self, repo_path: Path, message: str) -> None:
        """
        Commit the staged changes with the given message.

        Args:
            repo_path: Path to the git repository
            message: The commit message

        Raises:
            ValueError: If the message is empty
        """
        if not message.strip():
            raise ValueError("Commit message cannot be empty")
        self._git_repository.commit(repo_path, message)
