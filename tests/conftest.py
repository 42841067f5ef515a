"""Shared pytest fixtures for the create-ts-starter test suite.

Provides reusable fixtures for:
- Recording Rich consoles (plain text, wide enough to avoid wrapping)
- Prompters driven by scripted answers
- Empty parent directories for generated projects
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from create_ts.config import ScaffoldConfig
from create_ts.prompter import Prompter


# ---------------------------------------------------------------------------
# Consoles & prompters
# ---------------------------------------------------------------------------

def _recording_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def recording_console() -> Console:
    """Console writing plain text into an in-memory buffer (``console.file``)."""
    return _recording_console()


@pytest.fixture
def make_prompter() -> Callable[[str], Prompter]:
    """Factory building a Prompter that reads *answers* line by line.

    Questions go to ``prompter.console.file`` and validation errors to
    ``prompter.err_console.file``.
    """

    def _make(answers: str) -> Prompter:
        return Prompter(
            stream=io.StringIO(answers),
            console=_recording_console(),
            err_console=_recording_console(),
        )

    return _make


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def parent_dir(tmp_path: Path) -> Path:
    """Empty directory that generated projects are created in."""
    parent = tmp_path / "workspace"
    parent.mkdir()
    yield parent


@pytest.fixture
def default_config() -> ScaffoldConfig:
    return ScaffoldConfig()
