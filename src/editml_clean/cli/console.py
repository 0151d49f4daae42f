# topmark:header:start
#
#   project      : editml-clean
#   file         : console.py
#   file_relpath : src/editml_clean/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for internal tracing.

Only the cleaned document goes to stdout; every other message (errors, debug
issue lines) goes to stderr.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by the CLI."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def diagnostic(self, text: str) -> None:
        """Write an unstyled diagnostic line to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool | None): True forces ANSI colors, False disables them,
            None lets Click decide based on whether the stream is a terminal.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
    """

    enable_color: bool | None
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def diagnostic(self, text: str) -> None:
        """Write a diagnostic line to stderr, verbatim.

        Args:
            text (str): Diagnostic text; a newline is appended.
        """
        click.echo(text, file=self.err, color=False)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")
