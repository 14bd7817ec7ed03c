#!/usr/bin/env python3
"""
Script to generate a commit message for the staged changes of a repository:
- Repository path (optional, defaults to the current directory)
- --message / --message-file: commit message used as context
- --commit: commit the staged changes with the generated message
"""

import argparse
import asyncio
import dataclasses
import logging
import sys
from pathlib import Path

from commit_ticker.git.repositories.implementations import GitRepositoryImpl
from commit_ticker.git.services.git_service import GitService
from commit_ticker.summarization.domain.errors import CommitMessageGenerationError
from commit_ticker.summarization.domain.value_objects import Language, SummarizationConfig
from commit_ticker.summarization.repositories.factory import create_completion_client
from commit_ticker.summarization.repositories.settings import load_summarization_config
from commit_ticker.summarization.services.summarization_service import (
    SummarizationService,
)


def is_git_repository(repo_path: Path) -> bool:
    """Check if the given path is a git repository."""
    return (repo_path / ".git").exists()


def apply_overrides(config: SummarizationConfig, args: argparse.Namespace) -> SummarizationConfig:
    """Apply command-line flags on top of the environment configuration."""
    overrides: dict[str, object] = {}
    if args.lang is not None:
        overrides["output_language"] = Language.from_code(args.lang)
    if args.show_per_file_summary:
        overrides["show_per_file_summary"] = True
    if args.no_conventional_commit:
        overrides["emit_classification"] = False
    if args.ignore:
        overrides["file_ignore"] = config.file_ignore + tuple(args.ignore)
    return dataclasses.replace(config, **overrides)


def read_message_context(args: argparse.Namespace) -> str:
    """Get the user's commit message, if any, to give the model context."""
    if args.message is not None:
        return args.message
    if args.message_file is not None and args.message_file.exists():
        # Skip the comment lines git puts in the template
        lines = args.message_file.read_text(encoding="utf-8").splitlines()
        return "\n".join(line for line in lines if not line.startswith("#")).strip()
    return ""


def main() -> None:
    """Main function to parse arguments, read the staged diff and generate a message."""
    parser = argparse.ArgumentParser(
        description="Generate a commit message for staged changes using AI-powered summaries"
    )
    parser.add_argument(
        "repo_path",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Path to the git repository directory (default: current directory)",
    )
    parser.add_argument(
        "--message",
        "-m",
        type=str,
        default=None,
        help="Commit message written so far, used as context",
    )
    parser.add_argument(
        "--message-file",
        type=Path,
        default=None,
        help=(
            "Commit message file (prepare-commit-msg hook mode). Its content is used "
            "as context and the generated message is written in front of it"
        ),
    )
    parser.add_argument(
        "--lang",
        type=str,
        default=None,
        help=f"Output language code ({', '.join(language.value for language in Language)})",
    )
    parser.add_argument(
        "--show-per-file-summary",
        action="store_true",
        help="Append the summary of every file to the message",
    )
    parser.add_argument(
        "--no-conventional-commit",
        action="store_true",
        help="Do not prefix the message with a conventional commit type",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        help="Skip files whose path contains this text (repeatable)",
    )
    parser.add_argument(
        "--provider",
        type=str,
        default=None,
        help="LLM provider: anthropic or openai (default: LLM_PROVIDER or anthropic)",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model name override",
    )
    parser.add_argument(
        "--commit",
        action="store_true",
        help="Commit the staged changes with the generated message",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not is_git_repository(args.repo_path):
        print(f"✗ Path is not a git repository: {args.repo_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = apply_overrides(load_summarization_config(), args)
        completion_client = create_completion_client(
            provider=args.provider, model_name=args.model
        )
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        print(
            "  Hint: Set ANTHROPIC_API_KEY or OPENAI_API_KEY in .env file or environment",
            file=sys.stderr,
        )
        sys.exit(1)
    except (FileNotFoundError, RuntimeError) as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    git_service = GitService(GitRepositoryImpl())

    try:
        fragments = git_service.get_staged_fragments(args.repo_path)
        if not fragments:
            print("✗ No staged changes", file=sys.stderr)
            sys.exit(1)

        summarization_service = SummarizationService(completion_client, config)
        message = asyncio.run(
            summarization_service.generate_commit_message(
                fragments, read_message_context(args)
            )
        )
    except CommitMessageGenerationError as e:
        print(f"✗ Failed to generate commit message: {e}", file=sys.stderr)
        sys.exit(1)
    except RuntimeError as e:
        print(f"✗ Failed to read staged changes: {e}", file=sys.stderr)
        sys.exit(1)

    if args.message_file is not None:
        existing = (
            args.message_file.read_text(encoding="utf-8") if args.message_file.exists() else ""
        )
        args.message_file.write_text(f"{message}\n{existing}", encoding="utf-8")
    elif args.commit:
        try:
            git_service.commit(args.repo_path, message)
        except (ValueError, RuntimeError) as e:
            print(f"✗ Failed to commit: {e}", file=sys.stderr)
            sys.exit(1)
        print("✓ Committed with generated message")
    else:
        print(message)

    sys.exit(0)


if __name__ == "__main__":
    main()
