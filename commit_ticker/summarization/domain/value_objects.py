"""Value objects for Summarization domain."""

from dataclasses import dataclass, field
from enum import Enum

from commit_ticker.summarization.prompts import (
    DEFAULT_COMMIT_SUMMARY_PROMPT,
    DEFAULT_COMMIT_TITLE_PROMPT,
    DEFAULT_CONVENTIONAL_COMMIT_PREFIX_PROMPT,
    DEFAULT_FILE_DIFF_PROMPT,
    DEFAULT_TRANSLATION_PROMPT,
)


class ConventionalCommitType(str, Enum):
    """Closed set of conventional commit types accepted as a message prefix."""

    BUILD = "build"
    CHORE = "chore"
    CI = "ci"
    DOCS = "docs"
    FEAT = "feat"
    FIX = "fix"
    PERF = "perf"
    REFACTOR = "refactor"
    STYLE = "style"
    TEST = "test"

    @classmethod
    def parse(cls, text: str) -> "ConventionalCommitType | None":
        """
        Match a completion against the known types.

        Args:
            text: Raw completion text

        Returns:
            The matching type after lower-casing and trimming, or None when
            the text is not exactly one of the known types
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


class Language(str, Enum):
    """Output language of the commit message."""

    EN = "en"
    ZH_CN = "zh-cn"
    ZH_TW = "zh-tw"
    JA = "ja"
    KO = "ko"
    FR = "fr"
    DE = "de"
    ES = "es"
    PT = "pt"
    RU = "ru"
    IT = "it"

    @classmethod
    def from_code(cls, code: str | None) -> "Language":
        """Resolve a language code, falling back to English for unknown codes."""
        if not code:
            return cls.EN
        try:
            return cls(code.strip().lower().replace("_", "-"))
        except ValueError:
            return cls.EN

    @property
    def display_name(self) -> str:
        return _LANGUAGE_NAMES[self]


_LANGUAGE_NAMES: dict[Language, str] = {
    Language.EN: "English",
    Language.ZH_CN: "Simplified Chinese",
    Language.ZH_TW: "Traditional Chinese",
    Language.JA: "Japanese",
    Language.KO: "Korean",
    Language.FR: "French",
    Language.DE: "German",
    Language.ES: "Spanish",
    Language.PT: "Portuguese",
    Language.RU: "Russian",
    Language.IT: "Italian",
}


@dataclass(frozen=True)
class FileSummary:
    """Summary of one changed file.

    Attributes:
        file_name: Path of the summarized file
        summary_text: The summary, empty when summarization failed
    """

    file_name: str
    summary_text: str


@dataclass(frozen=True)
class CompositionResult:
    """Title, body and classification derived from the file summaries."""

    title: str
    body: str
    prefix: ConventionalCommitType | None = None


@dataclass(frozen=True)
class PromptTemplates:
    """Jinja2 templates used for each completion request."""

    file_diff: str = DEFAULT_FILE_DIFF_PROMPT
    commit_title: str = DEFAULT_COMMIT_TITLE_PROMPT
    commit_summary: str = DEFAULT_COMMIT_SUMMARY_PROMPT
    conventional_commit_prefix: str = DEFAULT_CONVENTIONAL_COMMIT_PREFIX_PROMPT
    translation: str = DEFAULT_TRANSLATION_PROMPT


@dataclass(frozen=True)
class SummarizationConfig:
    """Settings for one commit message generation run.

    Attributes:
        file_ignore: Substrings of file names to leave out of summarization
        prompts: Templates for each completion request
        emit_classification: Whether to ask for a conventional commit type
        classification_format: Template rendered with ``prefix`` and put in
            front of the message; empty means no visible prefix
        show_per_file_summary: Whether to append the per-file summaries
        output_language: Language the final message is translated into
    """

    file_ignore: tuple[str, ...] = ()
    prompts: PromptTemplates = field(default_factory=PromptTemplates)
    emit_classification: bool = True
    classification_format: str = ""
    show_per_file_summary: bool = False
    output_language: Language = Language.EN

    def is_ignored(self, file_name: str) -> bool:
        """Check whether a file name contains any ignore-list entry."""
        return any(ignore in file_name for ignore in self.file_ignore)
