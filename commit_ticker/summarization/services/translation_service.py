"""Service for translating the commit message."""

import logging

from commit_ticker.summarization.domain.errors import TranslationError
from commit_ticker.summarization.domain.value_objects import Language, SummarizationConfig
from commit_ticker.summarization.repositories.interfaces import (
    CompletionClient,
    PromptRenderer,
)

logger = logging.getLogger(__name__)


class TranslationService:
    """Service translating the commit message into the configured language."""

    def __init__(
        self,
        completion_client: CompletionClient,
        prompt_renderer: PromptRenderer,
        config: SummarizationConfig,
    ) -> None:
        self._completion_client = completion_client
        self._prompt_renderer = prompt_renderer
        self._config = config

    async def translate(self, message: str) -> str:
        """
        Translate a commit message.

        Args:
            message: The assembled commit message

        Returns:
            The message unchanged for English output, otherwise the
            translation as returned by the model

        Raises:
            TranslationError: If rendering the prompt or the completion fails
        """
        language = self._config.output_language
        if language is Language.EN:
            return message

        logger.debug("translating commit message to %s", language.display_name)
        try:
            prompt = self._prompt_renderer.render(
                self._config.prompts.translation,
                {"commit_message": message, "output_language": language.display_name},
            )
            return await self._completion_client.complete(prompt)
        except Exception as e:
            raise TranslationError(
                f"Failed to translate commit message to {language.display_name}: {str(e)}"
            ) from e
