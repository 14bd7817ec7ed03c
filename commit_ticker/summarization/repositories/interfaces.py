"""Repository interfaces for LLM completion and prompt rendering."""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class CompletionClient(ABC):
    """Interface for LLM text completion.

    Implementations must be safe to call concurrently from several tasks.
    """

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Complete a prompt.

        Args:
            prompt: The fully rendered prompt

        Returns:
            The completion text

        Raises:
            CompletionError: If the LLM call fails
        """
        ...


class PromptRenderer(ABC):
    """Interface for rendering prompt templates."""

    @abstractmethod
    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """
        Render a template with named string variables.

        Args:
            template: Template source
            variables: Values for the variables the template references;
                unreferenced entries are ignored

        Returns:
            The rendered prompt

        Raises:
            PromptRenderError: If the template is malformed or references a
                variable that is not provided
        """
        ...
