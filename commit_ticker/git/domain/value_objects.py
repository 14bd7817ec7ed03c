"""Value objects for Git domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawDiff:
    """Undivided diff output for a set of changes."""

    diff_content: str

    @property
    def is_empty(self) -> bool:
        return not self.diff_content.strip()


@dataclass(frozen=True)
class DiffFragment:
    """Diff of a single changed file.

    Attributes:
        file_name: Path of the file relative to the repository root
        diff_text: The verbatim diff chunk for this file, headers included
    """

    file_name: str
    diff_text: str
