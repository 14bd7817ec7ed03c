"""Service for deriving the commit title, body and type from file summaries."""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from commit_ticker.summarization.domain.errors import CompositionError
from commit_ticker.summarization.domain.value_objects import (
    CompositionResult,
    ConventionalCommitType,
    SummarizationConfig,
)
from commit_ticker.summarization.repositories.interfaces import (
    CompletionClient,
    PromptRenderer,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CompositionService:
    """Service composing the commit title, body and conventional commit type."""

    def __init__(
        self,
        completion_client: CompletionClient,
        prompt_renderer: PromptRenderer,
        config: SummarizationConfig,
    ) -> None:
        """
        Initialize CompositionService.

        Args:
            completion_client: Client used to complete the composition prompts
            prompt_renderer: Renderer for the title, body and prefix templates
            config: Summarization settings
        """
        self._completion_client = completion_client
        self._prompt_renderer = prompt_renderer
        self._config = config

    async def compose(self, summary_points: str, commit_message: str) -> CompositionResult:
        """
        Generate the title, body and prefix concurrently.

        The three requests are joined as one unit: if any of them fails the
        others are cancelled and no partial result is produced.

        Args:
            summary_points: The aggregated file summaries
            commit_message: Commit message given for context, possibly empty

        Returns:
            CompositionResult holding all three parts

        Raises:
            CompositionError: If any of the three requests fails
        """
        try:
            async with asyncio.TaskGroup() as group:
                title_task = group.create_task(
                    self._run("title", self.title(summary_points, commit_message))
                )
                body_task = group.create_task(
                    self._run("body", self.body(summary_points, commit_message))
                )
                prefix_task = group.create_task(self._run("prefix", self.prefix(summary_points)))
        except ExceptionGroup as group_error:
            first_error = group_error.exceptions[0]
            logger.debug("composition failed: %s", first_error)
            raise first_error

        return CompositionResult(
            title=title_task.result(),
            body=body_task.result(),
            prefix=prefix_task.result(),
        )

    async def title(self, summary_points: str, commit_message: str) -> str:
        """Generate a single-line imperative title."""
        prompt = self._prompt_renderer.render(
            self._config.prompts.commit_title,
            {"summary_points": summary_points, "commit_message": commit_message},
        )
        logger.debug("commit_title prompt: %s", prompt)
        return await self._completion_client.complete(prompt)

    async def body(self, summary_points: str, commit_message: str) -> str:
        """Generate the bullet list body."""
        prompt = self._prompt_renderer.render(
            self._config.prompts.commit_summary,
            {"summary_points": summary_points, "commit_message": commit_message},
        )
        logger.debug("commit_summary prompt: %s", prompt)
        return await self._completion_client.complete(prompt)

    async def prefix(self, summary_points: str) -> ConventionalCommitType | None:
        """
        Classify the change as a conventional commit type.

        Returns:
            The type, or None if classification is disabled or the model
            answered with anything other than a known type
        """
        if not self._config.emit_classification:
            return None

        prompt = self._prompt_renderer.render(
            self._config.prompts.conventional_commit_prefix,
            {"summary_points": summary_points},
        )
        completion = await self._completion_client.complete(prompt)
        commit_type = ConventionalCommitType.parse(completion)
        if commit_type is None:
            logger.info("discarding unrecognized commit type: %r", completion)
        return commit_type

    @staticmethod
    async def _run(operation: str, coroutine: Awaitable[T]) -> T:
        try:
            return await coroutine
        except Exception as e:
            raise CompositionError(operation, str(e)) from e
