"""Tests for the Jinja2 TemplateRenderer (create_ts.scaffolder.templates).

Covers:
- Rendering the bundled gitignore and tsconfig templates
- JSON-with-comments normalisation (comments, trailing commas, key quoting)
- Strict handling of undefined variables and invalid JSON5
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from create_ts.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def custom_renderer(tmp_path: Path) -> TemplateRenderer:
    """Renderer over a temporary template directory."""
    (tmp_path / "loose.json5.j2").write_text(
        '{\n  // comment\n  a: {{ value }},\n  /* block */ "b": [1, 2,],\n}\n',
        encoding="utf-8",
    )
    (tmp_path / "broken.j2").write_text("{ nope", encoding="utf-8")
    return TemplateRenderer(tmp_path)


class TestBundledTemplates:
    def test_gitignore(self, renderer):
        text = renderer.render("gitignore.j2", {})
        lines = text.splitlines()
        assert "node_modules" in lines
        assert "dist" in lines
        assert "dist-ssr" in lines
        assert "*.local" in lines
        assert "*.log" in lines
        assert ".DS_Store" in lines
        assert "!.vscode/extensions.json" in lines
        assert text.endswith("\n")

    def test_tsconfig_raw_template_has_comments(self, renderer):
        text = renderer.render("tsconfig.json.j2", {"source_dir": "src"})
        assert "/* Bundler mode */" in text
        assert "/* Linting */" in text

    def test_tsconfig_normalised(self, renderer):
        text = renderer.render_json5("tsconfig.json.j2", {"source_dir": "src"})
        assert "/*" not in text
        data = json.loads(text)
        assert data["include"] == ["src"]
        options = data["compilerOptions"]
        assert options["target"] == "ES2020"
        assert options["module"] == "ESNext"
        assert options["moduleResolution"] == "bundler"
        assert options["lib"] == ["ES2020", "DOM", "DOM.Iterable"]
        assert options["strict"] is True

    def test_tsconfig_key_order_preserved(self, renderer):
        text = renderer.render_json5("tsconfig.json.j2", {"source_dir": "src"})
        assert list(json.loads(text)["compilerOptions"])[:3] == [
            "target",
            "useDefineForClassFields",
            "module",
        ]

    def test_tsconfig_source_dir_is_quoted(self, renderer):
        text = renderer.render_json5("tsconfig.json.j2", {"source_dir": 'we"ird'})
        assert json.loads(text)["include"] == ['we"ird']

    def test_missing_variable_raises(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("tsconfig.json.j2", {})

    def test_unknown_template(self, renderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("nope.j2", {})


class TestRenderJson5:
    def test_comments_and_trailing_commas_dropped(self, custom_renderer):
        text = custom_renderer.render_json5("loose.json5.j2", {"value": 1})
        assert text == '{\n  "a": 1,\n  "b": [1, 2]\n}\n'

    def test_width_and_indent_forwarded(self, custom_renderer):
        text = custom_renderer.render_json5(
            "loose.json5.j2", {"value": 1}, indent=4, print_width=20
        )
        assert text == '{\n    "a": 1,\n    "b": [1, 2]\n}\n'

    def test_invalid_json5_raises(self, custom_renderer):
        with pytest.raises(ValueError):
            custom_renderer.render_json5("broken.j2", {})
