import argparse
import sys
from pathlib import Path

import generate_commit_message
import pytest
from conftest import TEST_PROMPTS, FakeCompletionClient, FakeGitRepository, scripted_responder

from commit_ticker.summarization.domain.value_objects import Language, SummarizationConfig

STAGED = """diff --git a/lib.rs b/lib.rs
--- a/lib.rs
+++ b/lib.rs
+fn x() {}
"""


def _namespace(**values) -> argparse.Namespace:
    defaults = {
        "lang": None,
        "show_per_file_summary": False,
        "no_conventional_commit": False,
        "ignore": [],
        "message": None,
        "message_file": None,
    }
    return argparse.Namespace(**{**defaults, **values})


def test_apply_overrides_only_changes_given_flags() -> None:
    config = SummarizationConfig(file_ignore=("lock",))

    updated = generate_commit_message.apply_overrides(
        config, _namespace(lang="fr", no_conventional_commit=True, ignore=["dist/"])
    )

    assert updated.output_language is Language.FR
    assert updated.emit_classification is False
    assert updated.file_ignore == ("lock", "dist/")
    assert updated.show_per_file_summary is False


def test_read_message_context_prefers_message_flag(tmp_path: Path) -> None:
    message_file = tmp_path / "COMMIT_EDITMSG"
    message_file.write_text("from file\n", encoding="utf-8")

    assert generate_commit_message.read_message_context(
        _namespace(message="from flag", message_file=message_file)
    ) == "from flag"
    assert generate_commit_message.read_message_context(
        _namespace(message_file=message_file)
    ) == "from file"
    assert generate_commit_message.read_message_context(_namespace()) == ""


def test_read_message_context_skips_template_comments(tmp_path: Path) -> None:
    message_file = tmp_path / "COMMIT_EDITMSG"
    message_file.write_text(
        "Fix login\n# Please enter the commit message for your changes.\n#\n", encoding="utf-8"
    )

    assert generate_commit_message.read_message_context(
        _namespace(message_file=message_file)
    ) == "Fix login"

    message_file.write_text("\n# On branch main\n# Changes to be committed:\n", encoding="utf-8")

    assert generate_commit_message.read_message_context(
        _namespace(message_file=message_file)
    ) == ""


@pytest.fixture
def failures() -> tuple[str, ...]:
    return ()


@pytest.fixture
def fake_dependencies(
    monkeypatch: pytest.MonkeyPatch, default_responses, failures, tmp_path: Path
):
    (tmp_path / ".git").mkdir()
    repository = FakeGitRepository(STAGED)
    client = FakeCompletionClient(scripted_responder(default_responses, failures))
    monkeypatch.setattr(generate_commit_message, "GitRepositoryImpl", lambda: repository)
    monkeypatch.setattr(
        generate_commit_message,
        "create_completion_client",
        lambda provider=None, model_name=None: client,
    )
    monkeypatch.setattr(
        generate_commit_message,
        "load_summarization_config",
        lambda: SummarizationConfig(prompts=TEST_PROMPTS, classification_format="{{ prefix }}: "),
    )
    return repository


def _run_main(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["commit-ticker", *args])
    with pytest.raises(SystemExit) as exc_info:
        generate_commit_message.main()
    return exc_info.value.code


def test_main_prints_generated_message(
    monkeypatch: pytest.MonkeyPatch, capsys, fake_dependencies, tmp_path: Path
) -> None:
    assert _run_main(monkeypatch, str(tmp_path)) == 0

    assert capsys.readouterr().out == "feat: Add feature\n\n- Add a feature\n\n"


def test_main_commits_when_requested(
    monkeypatch: pytest.MonkeyPatch, fake_dependencies, tmp_path: Path
) -> None:
    assert _run_main(monkeypatch, str(tmp_path), "--commit") == 0

    assert fake_dependencies.commits == [(tmp_path, "feat: Add feature\n\n- Add a feature\n")]


def test_main_writes_message_file_in_hook_mode(
    monkeypatch: pytest.MonkeyPatch, fake_dependencies, tmp_path: Path
) -> None:
    message_file = tmp_path / "COMMIT_EDITMSG"
    message_file.write_text("# comment\n", encoding="utf-8")

    assert _run_main(monkeypatch, str(tmp_path), "--message-file", str(message_file)) == 0

    assert message_file.read_text(encoding="utf-8") == (
        "feat: Add feature\n\n- Add a feature\n\n# comment\n"
    )


def test_main_fails_without_staged_changes(
    monkeypatch: pytest.MonkeyPatch, capsys, fake_dependencies, tmp_path: Path
) -> None:
    fake_dependencies.diff_content = ""

    assert _run_main(monkeypatch, str(tmp_path)) == 1
    assert "No staged changes" in capsys.readouterr().err


@pytest.mark.parametrize("failures", [("TITLE",)])
def test_main_reports_generation_failure(
    monkeypatch: pytest.MonkeyPatch, capsys, fake_dependencies, tmp_path: Path
) -> None:
    assert _run_main(monkeypatch, str(tmp_path), "--commit") == 1

    assert "Failed to generate commit message" in capsys.readouterr().err
    assert fake_dependencies.commits == []


def test_main_rejects_non_repository(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    assert _run_main(monkeypatch, str(tmp_path / "missing")) == 1
