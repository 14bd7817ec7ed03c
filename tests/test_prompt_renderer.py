import pytest

from commit_ticker.summarization.domain.errors import PromptRenderError
from commit_ticker.summarization.domain.value_objects import PromptTemplates
from commit_ticker.summarization.repositories.prompt_renderer import Jinja2PromptRenderer


def test_render_substitutes_variables_and_ignores_extras() -> None:
    rendered = Jinja2PromptRenderer().render(
        "Summary: {{ summary_points }}", {"summary_points": "- x", "unused": "y"}
    )

    assert rendered == "Summary: - x"


def test_render_does_not_escape_code() -> None:
    rendered = Jinja2PromptRenderer().render("{{ file_diff }}", {"file_diff": "<a> & 'b'"})

    assert rendered == "<a> & 'b'"


def test_conditional_block_depends_on_variable() -> None:
    template = "start{% if commit_message %} [{{ commit_message }}]{% endif %}"
    renderer = Jinja2PromptRenderer()

    assert renderer.render(template, {"commit_message": ""}) == "start"
    assert renderer.render(template, {"commit_message": "wip"}) == "start [wip]"


def test_missing_variable_raises() -> None:
    with pytest.raises(PromptRenderError):
        Jinja2PromptRenderer().render("{{ commit_message }}", {})


def test_malformed_template_raises() -> None:
    with pytest.raises(PromptRenderError):
        Jinja2PromptRenderer().render("{% if x %}never closed", {"x": "1"})


def test_default_templates_render_with_their_variables() -> None:
    renderer = Jinja2PromptRenderer()
    templates = PromptTemplates()

    file_prompt = renderer.render(
        templates.file_diff, {"file_diff": "+ fn x() {}", "commit_message": ""}
    )
    body_prompt = renderer.render(
        templates.commit_summary, {"summary_points": "[a]\n- x", "commit_message": ""}
    )
    translation_prompt = renderer.render(
        templates.translation, {"commit_message": "Add X", "output_language": "German"}
    )

    assert "+ fn x() {}" in file_prompt
    assert "CONSIDER THE FOLLOWING COMMIT MESSAGE" not in body_prompt
    assert "German" in translation_prompt
    assert renderer.render(
        templates.conventional_commit_prefix, {"summary_points": "[a]\n- x"}
    ).endswith("THE LABEL:")
