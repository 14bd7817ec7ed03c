"""Jinja2 implementation of prompt rendering."""

from collections.abc import Mapping

from jinja2 import Environment, StrictUndefined, TemplateError

from commit_ticker.summarization.domain.errors import PromptRenderError
from commit_ticker.summarization.repositories.interfaces import PromptRenderer


class Jinja2PromptRenderer(PromptRenderer):
    """Render prompt templates with Jinja2, failing on unbound variables."""

    def __init__(self) -> None:
        self._environment = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """
        Render a template with named string variables.

        Args:
            template: Jinja2 template source
            variables: Values for the variables the template references

        Returns:
            The rendered prompt

        Raises:
            PromptRenderError: If the template is malformed or references a
                variable that is not provided
        """
        try:
            return self._environment.from_string(template).render(**variables)
        except TemplateError as e:
            raise PromptRenderError(f"Failed to render prompt template: {e}") from e
