"""Factory for creating completion client instances."""

import os

from commit_ticker.summarization.repositories.implementations import (
    LangChainClaudeClient,
    LangChainOpenAIClient,
)
from commit_ticker.summarization.repositories.interfaces import CompletionClient
from commit_ticker.summarization.repositories.settings import load_env_file


def create_completion_client(
    provider: str | None = None, model_name: str | None = None
) -> CompletionClient:
    """
    Create a completion client based on configuration.

    Args:
        provider: Optional provider override. If not provided, uses LLM_PROVIDER.
        model_name: Optional model name override. If not provided, uses the
                   model-specific env vars.

    Returns:
        Completion client instance (Claude or OpenAI)

    Raises:
        ValueError: If the provider is invalid or required API keys are missing
    """
    load_env_file()

    provider = (provider or os.getenv("LLM_PROVIDER", "anthropic")).lower()

    if provider == "anthropic" or provider == "claude":
        return LangChainClaudeClient(model_name=model_name)
    elif provider == "openai" or provider == "gpt":
        return LangChainOpenAIClient(model_name=model_name)
    else:
        raise ValueError(
            f"Invalid LLM_PROVIDER: {provider}. "
            "Supported values: 'anthropic', 'claude', 'openai', 'gpt'"
        )
