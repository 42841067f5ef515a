"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``create_ts/scaffolder/templates/`` directory and renders them with
project-specific context data.  JSON-with-comments templates (such as
``tsconfig.json.j2``) can be normalised into plain, pretty-printed JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import json5
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from create_ts.utils import format_json


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined context variables raise instead of
    rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"gitignore.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_json5(
        self,
        template_path: str,
        context: dict[str, Any],
        *,
        indent: int = 2,
        print_width: int = 80,
    ) -> str:
        """Render a JSON5 / JSON-with-comments template as formatted JSON.

        Comments and trailing commas in the template are dropped; keys are
        always emitted quoted.

        Raises:
            ValueError: If the rendered text is not valid JSON5.
        """
        text = self.render(template_path, context)
        data = json5.loads(text)
        return format_json(data, indent=indent, print_width=print_width)
