"""Summarization service for orchestrating commit message generation."""

import logging
from collections.abc import Sequence

from commit_ticker.git.domain.value_objects import DiffFragment, RawDiff
from commit_ticker.git.services.diff_splitter_service import DiffSplitterService
from commit_ticker.summarization.domain.value_objects import SummarizationConfig
from commit_ticker.summarization.repositories.interfaces import (
    CompletionClient,
    PromptRenderer,
)
from commit_ticker.summarization.repositories.prompt_renderer import Jinja2PromptRenderer
from commit_ticker.summarization.services.composition_service import CompositionService
from commit_ticker.summarization.services.file_summarization_service import (
    FileSummarizationService,
)
from commit_ticker.summarization.services.message_assembly_service import (
    MessageAssemblyService,
)
from commit_ticker.summarization.services.translation_service import TranslationService

logger = logging.getLogger(__name__)


class SummarizationService:
    """Service for orchestrating commit message generation.

    Files are summarized concurrently, the summaries are aggregated and used
    to compose a title, a body and a conventional commit type concurrently,
    and the result is assembled, translated and prefixed.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        config: SummarizationConfig | None = None,
        prompt_renderer: PromptRenderer | None = None,
        diff_splitter: DiffSplitterService | None = None,
    ) -> None:
        """
        Initialize SummarizationService.

        Args:
            completion_client: Client used for every completion request
            config: Summarization settings. Defaults to SummarizationConfig()
            prompt_renderer: Template renderer. Defaults to Jinja2PromptRenderer()
            diff_splitter: Splitter for raw diffs. Defaults to DiffSplitterService()
        """
        self._config = config or SummarizationConfig()
        prompt_renderer = prompt_renderer or Jinja2PromptRenderer()
        self._diff_splitter = diff_splitter or DiffSplitterService()
        self._file_summarization_service = FileSummarizationService(
            completion_client, prompt_renderer, self._config
        )
        self._composition_service = CompositionService(
            completion_client, prompt_renderer, self._config
        )
        self._message_assembly_service = MessageAssemblyService(prompt_renderer, self._config)
        self._translation_service = TranslationService(
            completion_client, prompt_renderer, self._config
        )

    async def generate_commit_message(
        self, fragments: Sequence[DiffFragment], commit_message: str = ""
    ) -> str:
        """
        Generate a commit message for a set of per-file diffs.

        Args:
            fragments: One diff fragment per changed file
            commit_message: Message written by the user, used as context

        Returns:
            The final commit message

        Raises:
            CompositionError: If generating the title, body or prefix fails
            TranslationError: If translating the message fails
            PrefixFormatError: If the prefix format cannot be rendered
        """
        logger.info("summarizing %d changed file(s)", len(fragments))
        summaries = await self._file_summarization_service.summarize_all(
            fragments, commit_message
        )

        summary_points = self._message_assembly_service.aggregate(summaries)

        logger.info("composing commit message")
        composition = await self._composition_service.compose(summary_points, commit_message)

        message = self._message_assembly_service.assemble(composition, summaries)
        message = await self._translation_service.translate(message)
        return self._message_assembly_service.apply_prefix(message, composition.prefix)

    async def generate_commit_message_for_diff(
        self, raw_diff: RawDiff, commit_message: str = ""
    ) -> str:
        """
        Generate a commit message for an undivided diff.

        Args:
            raw_diff: Diff covering all changed files
            commit_message: Message written by the user, used as context

        Returns:
            The final commit message
        """
        fragments = self._diff_splitter.split(raw_diff)
        return await self.generate_commit_message(fragments, commit_message)
