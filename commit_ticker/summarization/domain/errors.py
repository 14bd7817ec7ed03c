"""Errors raised by the summarization domain."""


class PromptRenderError(ValueError):
    """Raised when a prompt template is malformed or references an unbound variable."""


class CompletionError(RuntimeError):
    """Raised when the LLM fails to produce a completion."""


class CommitMessageGenerationError(RuntimeError):
    """Base class for failures that abort commit message generation."""


class CompositionError(CommitMessageGenerationError):
    """Raised when generating the title, body or prefix fails.

    Attributes:
        operation: Name of the failed sub-operation ("title", "body" or "prefix")
    """

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Failed to generate commit {operation}: {reason}")
        self.operation = operation


class TranslationError(CommitMessageGenerationError):
    """Raised when translating the commit message fails."""


class PrefixFormatError(CommitMessageGenerationError):
    """Raised when the conventional commit prefix format cannot be rendered."""
