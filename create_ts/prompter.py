"""Line-oriented terminal prompts.

The :class:`Prompter` owns nothing global: the input stream and the output
consoles are passed in, so tests (and embedding code) can drive it with an
``io.StringIO`` and a recording ``rich`` console.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import IO

from rich.console import Console

from create_ts.utils import print_error


class Prompter:
    """Ask free-form or enumerated questions over a line-based session.

    Args:
        stream: Object with a ``readline()`` method. Defaults to ``sys.stdin``.
        console: Console the questions are written to.
        err_console: Console validation errors are written to.
    """

    def __init__(
        self,
        stream: IO[str] | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self._closed = False

    # -- Session lifecycle -------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """End the session. The underlying stream is left open."""
        self._closed = True

    def __enter__(self) -> "Prompter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- Questions ---------------------------------------------------------

    def ask_string(self, question: str, default: str | None = None) -> str:
        """Ask *question* and return the stripped answer.

        An empty answer falls back to *default*, then to ``""``.

        Raises:
            RuntimeError: If the session has been closed.
            EOFError: If the input stream is exhausted.
        """
        if self._closed:
            raise RuntimeError("prompt session is closed")

        formatted = question
        if default:
            formatted = f"{formatted} ({default})"
        formatted += ": "

        line = self.console.input(formatted, markup=False, emoji=False, stream=self.stream)
        if not line:
            # readline() returns "" only at end of input; a bare Enter is "\n".
            raise EOFError("input stream closed while waiting for an answer")

        return line.strip() or default or ""

    def ask_enum(
        self,
        question: str,
        options: Iterable[str],
        default: str | None = None,
    ) -> str:
        """Ask until the answer matches one of *options*.

        Matching is case-insensitive and returns the option as spelled in
        *options*.  An answer equal to *default* is returned unchanged.

        Raises:
            ValueError: If *options* is empty. Nothing is written in that case.
        """
        choices = list(options)
        if not choices:
            raise ValueError("No option specified")

        listing = json.dumps(choices)
        formatted = f"{question} {listing}"
        normalized = [choice.lower() for choice in choices]

        while True:
            result = self.ask_string(formatted, default)

            if result == default:
                return default

            lowered = result.lower()
            if lowered in normalized:
                return choices[normalized.index(lowered)]

            print_error(
                f"Expected one of {listing} but received {json.dumps(result)}",
                target=self.err_console,
            )
