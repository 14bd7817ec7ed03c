"""Concrete implementation of Git repository operations."""

import subprocess
from pathlib import Path

from commit_ticker.git.domain.value_objects import RawDiff
from commit_ticker.git.repositories.interfaces import GitRepository


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands."""

    def get_staged_diff(self, repo_path: Path) -> RawDiff:
        """
        Get the diff of the changes staged for the next commit.

        Args:
            repo_path: Path to the git repository

        Returns:
            RawDiff containing the staged diff content

        Raises:
            RuntimeError: If git fails to produce the diff
        """
        try:
            result = subprocess.run(
                ["git", "diff", "--staged", "--no-color", "--no-ext-diff"],
                cwd=repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
            return RawDiff(diff_content=result.stdout)
        except subprocess.CalledProcessError as e:
            raise RuntimeError(
                f"Failed to get staged diff: {e.stderr.strip() if e.stderr else str(e)}"
            ) from e

    def commit(self, repo_path: Path, message: str) -> None:
        """
        Record the staged changes as a new commit.

        Args:
            repo_path: Path to the git repository
            message: The full commit message

        Raises:
            RuntimeError: If git refuses the commit
        """
        try:
            subprocess.run(
                ["git", "commit", "-m", message],
                cwd=repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise RuntimeError(
                f"Failed to commit: {e.stderr.strip() if e.stderr else str(e)}"
            ) from e
