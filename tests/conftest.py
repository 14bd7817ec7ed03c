import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest

from commit_ticker.git.domain.value_objects import RawDiff
from commit_ticker.git.repositories.interfaces import GitRepository
from commit_ticker.summarization.domain.errors import CompletionError
from commit_ticker.summarization.domain.value_objects import PromptTemplates
from commit_ticker.summarization.repositories.interfaces import CompletionClient

# Short templates whose first word tells the fake client which request it got.
TEST_PROMPTS = PromptTemplates(
    file_diff="FILE {{ file_diff }}|{{ commit_message }}",
    commit_title="TITLE {{ summary_points }}|{{ commit_message }}",
    commit_summary="BODY {{ summary_points }}{% if commit_message %}|{{ commit_message }}{% endif %}",
    conventional_commit_prefix="PREFIX {{ summary_points }}",
    translation="TRANSLATE {{ output_language }}|{{ commit_message }}",
)


class FakeCompletionClient(CompletionClient):
    """Completion client answering from a callable and recording every prompt."""

    def __init__(self, responder: Callable[[str], str]) -> None:
        self._responder = responder
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        await asyncio.sleep(0)
        return self._responder(prompt)

    def prompts_starting_with(self, kind: str) -> list[str]:
        return [prompt for prompt in self.prompts if prompt.startswith(kind)]


def scripted_responder(
    responses: dict[str, str], failures: tuple[str, ...] = ()
) -> Callable[[str], str]:
    """Answer by the prompt's first word; raise for kinds listed in failures."""

    def respond(prompt: str) -> str:
        for kind in failures:
            if prompt.startswith(kind):
                raise CompletionError(f"{kind} request failed")
        kind = prompt.split(" ", 1)[0]
        return responses.get(kind, "")

    return respond


class FakeGitRepository(GitRepository):
    def __init__(self, diff_content: str = "") -> None:
        self.diff_content = diff_content
        self.commits: list[tuple[Path, str]] = []

    def get_staged_diff(self, repo_path: Path) -> RawDiff:
        return RawDiff(diff_content=self.diff_content)

    def commit(self, repo_path: Path, message: str) -> None:
        self.commits.append((repo_path, message))


@pytest.fixture
def default_responses() -> dict[str, str]:
    return {
        "FILE": "- summarized",
        "TITLE": "Add feature",
        "BODY": "- Add a feature",
        "PREFIX": "feat",
        "TRANSLATE": "translated",
    }
