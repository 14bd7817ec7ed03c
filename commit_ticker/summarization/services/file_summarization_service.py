"""Service for summarizing the diff of each changed file."""

import asyncio
import logging
from collections.abc import Iterable

from commit_ticker.git.domain.value_objects import DiffFragment
from commit_ticker.summarization.domain.value_objects import FileSummary, SummarizationConfig
from commit_ticker.summarization.repositories.interfaces import (
    CompletionClient,
    PromptRenderer,
)

logger = logging.getLogger(__name__)


class FileSummarizationService:
    """Service for per-file diff summarization.

    A failed summary never aborts the run: it is logged and recorded as an
    empty summary so that every non-ignored file still yields one entry.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        prompt_renderer: PromptRenderer,
        config: SummarizationConfig,
    ) -> None:
        """
        Initialize FileSummarizationService.

        Args:
            completion_client: Client used to complete the per-file prompts
            prompt_renderer: Renderer for the file diff template
            config: Summarization settings (ignore list and templates)
        """
        self._completion_client = completion_client
        self._prompt_renderer = prompt_renderer
        self._config = config

    async def summarize(self, fragment: DiffFragment, commit_message: str) -> FileSummary | None:
        """
        Summarize the diff of one file.

        Args:
            fragment: The file's diff
            commit_message: Commit message given for context, possibly empty

        Returns:
            The file summary, with an empty text if summarization failed, or
            None if the file matches the ignore list
        """
        if self._config.is_ignored(fragment.file_name):
            logger.warning("skipping %s due to file_ignore setting", fragment.file_name)
            return None

        logger.debug("summarizing file: %s", fragment.file_name)
        try:
            prompt = self._prompt_renderer.render(
                self._config.prompts.file_diff,
                {"file_diff": fragment.diff_text, "commit_message": commit_message},
            )
            logger.debug("diff_summary prompt: %s", prompt)
            summary_text = await self._completion_client.complete(prompt)
        except Exception as e:
            logger.warning("failed to summarize %s: %s", fragment.file_name, e)
            summary_text = ""

        return FileSummary(file_name=fragment.file_name, summary_text=summary_text)

    async def summarize_all(
        self, fragments: Iterable[DiffFragment], commit_message: str
    ) -> tuple[FileSummary, ...]:
        """
        Summarize all fragments concurrently.

        Args:
            fragments: Per-file diffs with unique file names
            commit_message: Commit message given for context, possibly empty

        Returns:
            One summary per non-ignored fragment, sorted by file name
        """
        results = await asyncio.gather(
            *(self.summarize(fragment, commit_message) for fragment in fragments)
        )
        summaries = [summary for summary in results if summary is not None]
        return tuple(sorted(summaries, key=lambda summary: summary.file_name))
