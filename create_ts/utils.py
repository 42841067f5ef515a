"""Shared utility functions for create-ts-starter.

Provides the prettier-style JSON formatter used for generated config files
and the Rich-based console helpers used for user-facing output.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# JSON formatting
# ---------------------------------------------------------------------------


def format_json(data: Any, indent: int = 2, print_width: int = 80) -> str:
    """Serialise *data* as pretty-printed JSON text.

    Objects always break one member per line.  Arrays made only of scalars
    stay on a single line when that line fits within *print_width*, which
    matches the layout editors and prettier produce for ``tsconfig.json``::

        format_json({"include": ["src"]}) -> '{\\n  "include": ["src"]\\n}\\n'

    Args:
        data: JSON-serialisable value.
        indent: Spaces per nesting level.
        print_width: Maximum line length for inline arrays.

    Returns:
        The formatted text, terminated by a newline.
    """
    return _format_value(data, 0, 0, indent, print_width) + "\n"


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def _format_value(value: Any, level: int, column: int, indent: int, width: int) -> str:
    """Format *value* whose first character lands at *column*."""
    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = " " * (indent * (level + 1))
        members = []
        for key, item in value.items():
            prefix = f"{pad}{json.dumps(str(key), ensure_ascii=False)}: "
            members.append(
                prefix + _format_value(item, level + 1, len(prefix), indent, width)
            )
        return "{\n" + ",\n".join(members) + "\n" + " " * (indent * level) + "}"

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        if all(_is_scalar(item) for item in value):
            inline = "[" + ", ".join(json.dumps(item, ensure_ascii=False) for item in value) + "]"
            # Trailing comma after the closing bracket counts against the width.
            if column + len(inline) + 1 <= width:
                return inline
        pad = " " * (indent * (level + 1))
        items = [
            pad + _format_value(item, level + 1, len(pad), indent, width) for item in value
        ]
        return "[\n" + ",\n".join(items) + "\n" + " " * (indent * level) + "]"

    return json.dumps(value, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(
    data: dict[str, str], title: str = "Summary", *, target: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        target: Console to print on. Defaults to the module console.
    """
    out = target or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_success(message: str, *, target: Console | None = None) -> None:
    """Print a green success message."""
    (target or console).print(
        f"[bold green]{escape(message)}[/bold green]", emoji=False, highlight=False, soft_wrap=True
    )


def print_error(message: str, *, target: Console | None = None) -> None:
    """Print a red error message (stderr by default)."""
    (target or err_console).print(
        f"[bold red]{escape(message)}[/bold red]", emoji=False, highlight=False, soft_wrap=True
    )
