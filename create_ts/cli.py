"""CLI entry point for ``create-ts`` and ``python -m create_ts``.

Usage::

    create-ts
    create-ts --config scaffold.json
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Sequence

from create_ts import __version__
from create_ts.config import ScaffoldConfig
from create_ts.prompter import Prompter
from create_ts.scaffolder import create_project


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-ts",
        description="Interactively scaffold a TypeScript starter project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-ts\n"
            "  create-ts --config scaffold.json\n"
            "\n"
            "Answer '.' to the name question to scaffold into the current directory.\n"
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with scaffold settings (see ScaffoldConfig)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Run the interactive scaffolder.

    Errors are not caught: they end the process with a traceback and a
    non-zero exit status.
    """
    args = build_parser().parse_args(argv)

    config = ScaffoldConfig.load(args.config) if args.config else ScaffoldConfig()

    with Prompter() as prompter:
        asyncio.run(create_project(prompter, config=config))


if __name__ == "__main__":
    main()
