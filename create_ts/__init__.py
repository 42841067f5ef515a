"""create-ts-starter -- interactive TypeScript project scaffolder.

Asks for a project name, creates a directory for it and writes a small,
fixed TypeScript starter layout (``package.json``, ``tsconfig.json``,
``.gitignore`` and an empty ``src/``).

Quick usage::

    from create_ts import Prompter, create_project

    with Prompter() as prompter:
        project_path = asyncio.run(create_project(prompter))
"""

from create_ts.config import ScaffoldConfig
from create_ts.prompter import Prompter
from create_ts.scaffolder import (
    ProjectGenerator,
    ProjectNameError,
    ProjectTarget,
    create_project,
    resolve_target,
)

__all__ = [
    "ProjectGenerator",
    "ProjectNameError",
    "ProjectTarget",
    "Prompter",
    "ScaffoldConfig",
    "create_project",
    "resolve_target",
]

__version__ = "0.1.0"
