"""create-ts-starter configuration.

Typed defaults for the scaffolder. The values mirror the fixed TypeScript
starter layout; Pydantic v2 validates them at construction time and handles
the JSON round-trip used by ``create-ts --config``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """Tuneable values used when scaffolding a project.

    Instances are typically created once by the CLI entry point and then
    passed to :func:`create_ts.scaffolder.create_project`.
    """

    default_project_name: str = Field(
        default="my-project", description="Answer used when the name prompt is left empty"
    )
    package_version: str = Field(default="0.0.1", description="Initial ``version`` in package.json")
    typescript_version: str = Field(
        default="^5.2.2", description="Version range pinned for the typescript dev dependency"
    )
    source_dir: str = Field(default="src", description="Source directory created and included by tsc")
    indent: int = Field(default=2, ge=1, description="Spaces per indentation level in JSON output")
    print_width: int = Field(
        default=80, ge=20, description="Line width under which short arrays stay on one line"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON.

        Raises:
            FileNotFoundError: If *path* does not exist.
            pydantic.ValidationError: If the file content is invalid.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)
