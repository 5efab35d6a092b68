"""Rendering of the code templates with Jinja2."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from excel_schema_codegen.core.exceptions import TemplateRenderError

_ATTRIBUTE_AFTER_BRACE = re.compile(r"\{\n\s*\[")
_BLANK_AFTER_ATTRIBUTE = re.compile(r"\]\n\s*\n")
_BLANKS_BEFORE_ATTRIBUTE = re.compile(r"\n\n *\n *\[")
_BLANK_RUN = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")


def remove_redundant_lines(text: str) -> str:
    """Collapse the blank lines that template whitespace leaves behind."""
    text = text.replace("\r\n", "\n")
    text = _ATTRIBUTE_AFTER_BRACE.sub("{\n    [", text)
    while _BLANK_AFTER_ATTRIBUTE.search(text):
        text = _BLANK_AFTER_ATTRIBUTE.sub("]\n", text)
    while _BLANKS_BEFORE_ATTRIBUTE.search(text):
        text = _BLANKS_BEFORE_ATTRIBUTE.sub("\n\n    [", text)
    return _BLANK_RUN.sub("\n\n", text)


class TemplateRenderer:
    """Renders named templates against a view.

    Templates come from the packaged ``templates`` directory unless a
    directory is given.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        loader: BaseLoader
        if templates_dir is not None:
            loader = FileSystemLoader(templates_dir)
        else:
            loader = PackageLoader("excel_schema_codegen", "templates")
        self.env = Environment(
            loader=loader,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(self, template_id: str, view: dict[str, Any]) -> str:
        """Render a template and clean up its blank lines.

        Raises:
            FileNotFoundError: If the template does not exist
            TemplateRenderError: If rendering fails
        """
        try:
            template = self.env.get_template(template_id)
        except TemplateNotFound as e:
            raise FileNotFoundError(f"Template not found: {template_id}") from e

        try:
            output = template.render(**view)
        except TemplateError as e:
            raise TemplateRenderError(template_id, e) from e
        return remove_redundant_lines(output)
