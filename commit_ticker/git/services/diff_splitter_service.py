"""Service for splitting a raw diff into per-file fragments."""

import logging
import re

from commit_ticker.git.domain.value_objects import DiffFragment, RawDiff

logger = logging.getLogger(__name__)


class DiffSplitterService:
    """Service for splitting git diff output by file.

    The input is expected to follow the diff format described in
    https://git-scm.com/docs/git-diff, where every file starts with a
    ``diff --git a/<path> b/<path>`` header line.
    """

    FILE_HEADER_PREFIX = "diff --git "

    _NEW_PATH_PATTERN: re.Pattern[str] = re.compile(r"^\+\+\+ (?:b/)?(?P<path>.+)$", re.MULTILINE)
    _OLD_PATH_PATTERN: re.Pattern[str] = re.compile(r"^--- (?:a/)?(?P<path>.+)$", re.MULTILINE)
    _HEADER_PATTERN: re.Pattern[str] = re.compile(r"^diff --git a/.+ b/(?P<path>.+)$", re.MULTILINE)

    def split(self, raw_diff: RawDiff) -> tuple[DiffFragment, ...]:
        """
        Split a diff into one fragment per changed file.

        Args:
            raw_diff: The diff to split

        Returns:
            Tuple of fragments in the order the files appear in the diff.
            Chunks whose file name cannot be determined are dropped.
        """
        fragments: list[DiffFragment] = []
        for chunk in self._split_chunks(raw_diff.diff_content):
            file_name = self.file_name_from_diff(chunk)
            if file_name is None:
                logger.debug("dropping diff chunk without a file name")
                continue
            fragments.append(DiffFragment(file_name=file_name, diff_text=chunk))
        return tuple(fragments)

    def file_name_from_diff(self, file_diff: str) -> str | None:
        """
        Extract the file path from a single-file diff.

        Args:
            file_diff: Diff text of one file

        Returns:
            The path of the file, or None if the diff carries no file header
        """
        new_path = self._NEW_PATH_PATTERN.search(file_diff)
        if new_path and new_path.group("path").strip() != "/dev/null":
            return new_path.group("path").strip()

        # Deleted files only name the old side
        old_path = self._OLD_PATH_PATTERN.search(file_diff)
        if old_path and old_path.group("path").strip() != "/dev/null":
            return old_path.group("path").strip()

        header = self._HEADER_PATTERN.search(file_diff)
        if header:
            return header.group("path").strip()

        return None

    def _split_chunks(self, diff_content: str) -> list[str]:
        chunks: list[str] = []
        current: list[str] = []
        for line in diff_content.splitlines(keepends=True):
            if line.startswith(self.FILE_HEADER_PREFIX) and current:
                chunks.append("".join(current))
                current = []
            current.append(line)
        if current:
            chunks.append("".join(current))
        return [chunk for chunk in chunks if chunk.strip()]
