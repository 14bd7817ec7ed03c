"""Concrete implementations of LLM completion using LangChain."""

import os

from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from commit_ticker.summarization.repositories.base_langchain_client import (
    BaseLangChainCompletionClient,
)


class LangChainClaudeClient(BaseLangChainCompletionClient):
    """LangChain implementation using Claude for completions."""

    def __init__(self, model_name: str | None = None) -> None:
        """
        Initialize the Claude client with API key from environment.

        Args:
            model_name: Optional model name override. Defaults to ANTHROPIC_MODEL
                or claude-3-5-sonnet-latest
        """
        api_key = os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            raise ValueError(
                "ANTHROPIC_API_KEY environment variable is required. "
                "Please set it in a .env file or as an environment variable. "
                "See .env.example for reference."
            )

        model = model_name or os.getenv("ANTHROPIC_MODEL", "claude-3-5-sonnet-latest")

        super().__init__()
        self._llm = ChatAnthropic(  # type: ignore[call-arg]
            model_name=model,
            temperature=0.3,
        )


class LangChainOpenAIClient(BaseLangChainCompletionClient):
    """LangChain implementation using OpenAI for completions."""

    def __init__(self, model_name: str | None = None) -> None:
        """
        Initialize the OpenAI client with API key from environment.

        Args:
            model_name: Optional model name override. Defaults to OPENAI_MODEL
                or gpt-4o-mini
        """
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY environment variable is required. "
                "Please set it in a .env file or as an environment variable. "
                "See .env.example for reference."
            )

        model = model_name or os.getenv("OPENAI_MODEL", "gpt-4o-mini")

        super().__init__()
        self._llm = ChatOpenAI(  # type: ignore[call-arg]
            model_name=model,
            temperature=0.3,
        )
