"""Loading of summarization settings from the environment."""

import os
from pathlib import Path

from dotenv import load_dotenv

from commit_ticker.summarization.domain.value_objects import (
    Language,
    PromptTemplates,
    SummarizationConfig,
)

ENV_PREFIX = "COMMIT_TICKER_"
DEFAULT_PREFIX_FORMAT = "{{ prefix }}: "

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

# PromptTemplates field -> environment variable holding an override file path
_PROMPT_FILE_VARIABLES: dict[str, str] = {
    "file_diff": f"{ENV_PREFIX}PROMPT_FILE_DIFF_FILE",
    "commit_title": f"{ENV_PREFIX}PROMPT_COMMIT_TITLE_FILE",
    "commit_summary": f"{ENV_PREFIX}PROMPT_COMMIT_SUMMARY_FILE",
    "conventional_commit_prefix": f"{ENV_PREFIX}PROMPT_CONVENTIONAL_COMMIT_PREFIX_FILE",
    "translation": f"{ENV_PREFIX}PROMPT_TRANSLATION_FILE",
}


def load_env_file(env_file: Path | None = None) -> None:
    """Load environment variables from .env file."""
    if env_file is not None:
        load_dotenv(env_file)
        return

    # Try to find .env file in project root (parent of commit_ticker package)
    project_root = Path(__file__).parent.parent.parent.parent
    default_env_file = project_root / ".env"
    if default_env_file.exists():
        load_dotenv(default_env_file)
    else:
        # Fallback: try current directory
        load_dotenv()


def load_summarization_config(env_file: Path | None = None) -> SummarizationConfig:
    """
    Build the summarization settings from environment variables.

    Args:
        env_file: Optional .env file to load before reading the environment

    Returns:
        SummarizationConfig populated from COMMIT_TICKER_* variables

    Raises:
        ValueError: If a boolean variable holds an unrecognized value
        FileNotFoundError: If a prompt override file does not exist
        RuntimeError: If a prompt override file cannot be read
    """
    load_env_file(env_file)

    return SummarizationConfig(
        file_ignore=_parse_list(os.getenv(f"{ENV_PREFIX}FILE_IGNORE", "")),
        prompts=_load_prompt_templates(),
        emit_classification=_parse_bool(f"{ENV_PREFIX}CONVENTIONAL_COMMIT", default=True),
        classification_format=os.getenv(f"{ENV_PREFIX}PREFIX_FORMAT", DEFAULT_PREFIX_FORMAT),
        show_per_file_summary=_parse_bool(f"{ENV_PREFIX}SHOW_PER_FILE_SUMMARY", default=False),
        output_language=Language.from_code(os.getenv(f"{ENV_PREFIX}LANG")),
    )


def _parse_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")


def _load_prompt_templates() -> PromptTemplates:
    overrides: dict[str, str] = {}
    for field_name, variable in _PROMPT_FILE_VARIABLES.items():
        template_path = os.getenv(variable)
        if template_path:
            overrides[field_name] = _read_template(Path(template_path))
    return PromptTemplates(**overrides)


def _read_template(template_path: Path) -> str:
    """
    Read a prompt template override from file.

    Raises:
        FileNotFoundError: If the template file does not exist.
        RuntimeError: If the template file cannot be read.
    """
    try:
        return template_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Prompt template file not found: {template_path}") from None
    except Exception as e:
        raise RuntimeError(f"Failed to read prompt template file: {template_path}: {e}") from e
