"""Main scaffolding orchestrator.

Resolves the project name to a target directory, creates it, and writes the
TypeScript starter layout (``package.json``, ``tsconfig.json``, ``src/`` and
``.gitignore``) with all four writes issued concurrently.
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from create_ts.config import ScaffoldConfig
from create_ts.prompter import Prompter
from create_ts.utils import format_json, print_success, print_summary_table

from .templates import TemplateRenderer


NAME_QUESTION = "What would you like to name your project?"

# Answering with this token scaffolds into the current directory itself.
CURRENT_DIR_TOKEN = "."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ProjectNameError(ValueError):
    """Raised when a project name is not a single, simple path segment."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Must use simple project name, given: {json.dumps(name)}")


# ---------------------------------------------------------------------------
# Target resolution
# ---------------------------------------------------------------------------


class ProjectTarget(BaseModel):
    """Where a project will be created."""

    name: str = Field(..., description="Project name, also the directory name")
    parent: Path = Field(..., description="Directory that will contain the project")
    directory: Path = Field(..., description="Absolute, normalised project directory")
    existing_ok: bool = Field(
        default=False, description="Whether the directory may already exist (current-directory mode)"
    )


def resolve_target(parent: str | Path, name: str) -> ProjectTarget:
    """Derive and validate the project directory for *name* under *parent*.

    A name of ``"."`` means "use the current directory": its base name becomes
    the project name and its container becomes the parent.

    The joined path is normalised lexically (symlinks are not followed) and
    its final segment must equal the name, which rejects separators, ``..``,
    absolute paths and empty names.

    Raises:
        ProjectNameError: If the name does not survive the round trip.
    """
    parent_path = Path(os.path.abspath(parent))
    existing_ok = name == CURRENT_DIR_TOKEN

    if existing_ok:
        name = parent_path.name
        parent_path = parent_path.parent

    directory = Path(os.path.normpath(os.path.abspath(parent_path / name)))

    if not name or directory.name != name:
        raise ProjectNameError(name)

    return ProjectTarget(
        name=name, parent=parent_path, directory=directory, existing_ok=existing_ok
    )


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes the TypeScript starter layout into a fresh directory.

    Generated entries:
    - ``package.json`` with a ``tsc`` build script and a typescript dev dependency
    - ``tsconfig.json`` targeting ES2020 with bundler resolution and strict linting
    - an empty source directory (``src/``)
    - ``.gitignore`` covering logs, ``node_modules``, build output and editor files
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, target: ProjectTarget) -> Path:
        """Create ``target.directory`` and populate it.

        The directory is created non-recursively, so a missing parent raises
        ``FileNotFoundError`` and an existing directory ``FileExistsError``
        (unless ``target.existing_ok``).  The four writes then run
        concurrently.  None of them replaces an existing entry; the first
        failure propagates and entries already written are left in place.

        Returns:
            Path to the generated project root.
        """
        root = target.directory
        await asyncio.to_thread(root.mkdir, exist_ok=target.existing_ok)

        context = self._build_context(target)

        await asyncio.gather(
            self._write_manifest(root, context),
            self._write_tsconfig(root, context),
            asyncio.to_thread((root / self.config.source_dir).mkdir),
            self._write_gitignore(root, context),
        )

        return root

    def build_manifest(self, name: str) -> dict[str, Any]:
        """Return the ``package.json`` content for project *name*."""
        return {
            "name": name,
            "private": True,
            "version": self.config.package_version,
            "type": "module",
            "scripts": {
                "build": "tsc",
            },
            "devDependencies": {
                "typescript": self.config.typescript_version,
            },
        }

    # -- Context building --------------------------------------------------

    def _build_context(self, target: ProjectTarget) -> dict[str, Any]:
        """Build the Jinja2 template context."""
        return {
            "project_name": target.name,
            "source_dir": self.config.source_dir,
        }

    # -- Writers -----------------------------------------------------------

    async def _write_manifest(self, root: Path, ctx: dict[str, Any]) -> Path:
        content = format_json(
            self.build_manifest(ctx["project_name"]),
            indent=self.config.indent,
            print_width=self.config.print_width,
        )
        out = root / "package.json"
        await asyncio.to_thread(_write_new_file, out, content)
        return out

    async def _write_tsconfig(self, root: Path, ctx: dict[str, Any]) -> Path:
        content = self.renderer.render_json5(
            "tsconfig.json.j2",
            ctx,
            indent=self.config.indent,
            print_width=self.config.print_width,
        )
        out = root / "tsconfig.json"
        await asyncio.to_thread(_write_new_file, out, content)
        return out

    async def _write_gitignore(self, root: Path, ctx: dict[str, Any]) -> Path:
        content = self.renderer.render("gitignore.j2", ctx)
        out = root / ".gitignore"
        await asyncio.to_thread(_write_new_file, out, content)
        return out


# ---------------------------------------------------------------------------
# Interactive entry point
# ---------------------------------------------------------------------------


async def create_project(
    prompter: Prompter,
    cwd: str | Path | None = None,
    config: ScaffoldConfig | None = None,
    generator: ProjectGenerator | None = None,
) -> Path:
    """Ask for a project name and scaffold the project.

    Args:
        prompter: Open prompt session used for the name question and output.
        cwd: Directory the project is created in. Defaults to ``Path.cwd()``.
        config: Scaffold settings. Defaults to :class:`ScaffoldConfig`.
        generator: Generator to use. Built from *config* when omitted.

    Returns:
        Path to the generated project root.

    Raises:
        ProjectNameError: Before anything is created, for an invalid name.
        OSError: Any filesystem failure while creating the project.
    """
    config = config or (generator.config if generator else ScaffoldConfig())
    generator = generator or ProjectGenerator(config)
    parent = Path(cwd) if cwd is not None else Path.cwd()

    name = await asyncio.to_thread(
        prompter.ask_string, NAME_QUESTION, config.default_project_name
    )
    target = resolve_target(parent, name)

    project_root = await generator.generate(target)

    out = prompter.console
    print_success(f"Project created at {project_root}", target=out)
    print_summary_table(
        {
            "package.json": "package manifest",
            "tsconfig.json": "compiler configuration",
            f"{config.source_dir}/": "source directory",
            ".gitignore": "ignore file",
        },
        title=target.name,
        target=out,
    )
    out.print("Next steps:", markup=False)
    # Scaffolding into the current directory needs no cd.
    if project_root != Path(os.path.abspath(parent)):
        out.print(f"  cd {target.name}", markup=False)
    out.print("  npm install", markup=False)
    out.print("  npm run build", markup=False)

    return project_root


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_new_file(path: Path, content: str) -> None:
    """Write *content* to *path*, failing with ``FileExistsError`` if it exists."""
    with path.open("x", encoding="utf-8") as handle:
        handle.write(content)
