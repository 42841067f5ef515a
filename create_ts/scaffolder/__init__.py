"""create-ts-starter scaffolder -- writes the TypeScript starter layout.

Quick usage::

    from create_ts.scaffolder import ProjectGenerator, resolve_target

    target = resolve_target(Path.cwd(), "my-project")
    project_path = await ProjectGenerator().generate(target)
"""

from create_ts.scaffolder.generator import (
    ProjectGenerator,
    ProjectNameError,
    ProjectTarget,
    create_project,
    resolve_target,
)
from create_ts.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "ProjectNameError",
    "ProjectTarget",
    "TemplateRenderer",
    "create_project",
    "resolve_target",
]
