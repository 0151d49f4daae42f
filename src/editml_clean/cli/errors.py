# topmark:header:start
#
#   project      : editml-clean
#   file         : errors.py
#   file_relpath : src/editml_clean/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Exceptions for the editml-clean CLI.

Fatal environment failures (cannot open, read, create or write a file) are raised
as `EditmlCleanError` subclasses. They travel up to Click's top-level boundary,
which prints the message on stderr and exits with the class's ``exit_code``; no
helper below that boundary terminates the process itself.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from editml_clean.core.exit_codes import ExitCode


class EditmlCleanError(click.ClickException):
    """Base class for all editml-clean CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class EditmlCleanFileNotFoundError(EditmlCleanError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class EditmlCleanPermissionDeniedError(EditmlCleanError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class EditmlCleanIOError(EditmlCleanError):
    """Error for I/O errors reading/writing files or streams."""

    exit_code = ExitCode.IO_ERROR


class EditmlCleanEncodingError(EditmlCleanError):
    """Error for input that is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class EditmlCleanUnexpectedError(EditmlCleanError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
