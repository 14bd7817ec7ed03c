"""Service for assembling the final commit message text."""

from collections.abc import Iterable, Sequence

from commit_ticker.summarization.domain.errors import PrefixFormatError, PromptRenderError
from commit_ticker.summarization.domain.value_objects import (
    CompositionResult,
    ConventionalCommitType,
    FileSummary,
    SummarizationConfig,
)
from commit_ticker.summarization.repositories.interfaces import PromptRenderer


def split_lines(text: str) -> list[str]:
    """Split text into lines on "\\n" or "\\r\\n", without a trailing empty line."""
    *lines, tail = text.split("\n")
    lines = [line.removesuffix("\r") for line in lines]
    if tail:
        lines.append(tail)
    return lines


def dedupe_consecutive_lines(lines: Iterable[str]) -> list[str]:
    """Drop lines equal to the line right before them; non-adjacent repeats stay."""
    deduped: list[str] = []
    for line in lines:
        if deduped and deduped[-1] == line:
            continue
        deduped.append(line)
    return deduped


class MessageAssemblyService:
    """Service combining summaries and composition results into message text."""

    def __init__(self, prompt_renderer: PromptRenderer, config: SummarizationConfig) -> None:
        """
        Initialize MessageAssemblyService.

        Args:
            prompt_renderer: Renderer for the conventional commit prefix format
            config: Summarization settings
        """
        self._prompt_renderer = prompt_renderer
        self._config = config

    @staticmethod
    def aggregate(summaries: Iterable[FileSummary]) -> str:
        """
        Join the file summaries into the block used for composition.

        Empty summaries keep their ``[file_name]`` header.

        Args:
            summaries: File summaries in the order they should appear

        Returns:
            The aggregated summary text
        """
        return "\n".join(
            f"[{summary.file_name}]\n{summary.summary_text}" for summary in summaries
        )

    def assemble(self, composition: CompositionResult, summaries: Sequence[FileSummary]) -> str:
        """
        Build the commit message from the title, body and file summaries.

        Args:
            composition: Generated title and body
            summaries: File summaries, appended when show_per_file_summary is set

        Returns:
            The message text with consecutive duplicate lines removed
        """
        message = f"{composition.title}\n\n{composition.body}\n\n"

        if self._config.show_per_file_summary:
            for summary in summaries:
                if summary.summary_text:
                    message += f"[{summary.file_name}]\n{summary.summary_text}\n"

        return "\n".join(dedupe_consecutive_lines(split_lines(message)))

    def apply_prefix(self, message: str, prefix: ConventionalCommitType | None) -> str:
        """
        Put the formatted conventional commit prefix in front of the message.

        Args:
            message: The (already translated) commit message
            prefix: Conventional commit type, or None for no prefix

        Returns:
            The message, prefixed when a type was produced

        Raises:
            PrefixFormatError: If the prefix format template cannot be rendered
        """
        if prefix is None:
            return message

        try:
            formatted_prefix = self._prompt_renderer.render(
                self._config.classification_format, {"prefix": prefix.value}
            )
        except PromptRenderError as e:
            raise PrefixFormatError(f"Failed to format commit prefix: {str(e)}") from e
        return formatted_prefix + message
