"""Base class for LangChain-based completion clients."""

import logging
from abc import ABC
from typing import TYPE_CHECKING, Any

from langchain_core.messages import HumanMessage

from commit_ticker.summarization.domain.errors import CompletionError
from commit_ticker.summarization.repositories.interfaces import CompletionClient

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel

logger = logging.getLogger(__name__)


class BaseLangChainCompletionClient(CompletionClient, ABC):
    """Base class for completion clients backed by a LangChain chat model."""

    def __init__(self) -> None:
        """Initialize the base client with common configuration."""
        self._llm: BaseChatModel  # Set by subclasses

    async def complete(self, prompt: str) -> str:
        """
        Complete a prompt with the chat model.

        Args:
            prompt: The fully rendered prompt

        Returns:
            The text of the model response

        Raises:
            CompletionError: If the LLM API call fails
        """
        try:
            response = await self._llm.ainvoke([HumanMessage(content=prompt)])
            return self._content_to_text(response.content)
        except Exception as e:
            raise CompletionError(f"Failed to complete prompt: {str(e)}") from e

    @staticmethod
    def _content_to_text(content: Any) -> str:
        """Flatten the different response content types into plain text."""
        if isinstance(content, str):
            return content
        elif isinstance(content, list):
            # Content blocks, e.g. [{"type": "text", "text": "..."}]
            return "".join(
                item if isinstance(item, str) else str(item.get("text", ""))
                for item in content
            )
        else:
            return str(content)
