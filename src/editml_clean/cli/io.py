# topmark:header:start
#
#   project      : editml-clean
#   file         : io.py
#   file_relpath : src/editml_clean/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Input and output resolution for the CLI.

- Input: a named file or standard input, read fully and decoded as UTF-8.
- Output: a named file or standard output, receiving the clean text followed by
  exactly one newline.

Every failure here is fatal and raised as an `EditmlCleanError` carrying the
operation and the path; file handles are scoped with ``with`` so they are
released on every exit path.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, BinaryIO

from editml_clean.cli.errors import (
    EditmlCleanEncodingError,
    EditmlCleanError,
    EditmlCleanFileNotFoundError,
    EditmlCleanIOError,
    EditmlCleanPermissionDeniedError,
)
from editml_clean.config.logging import get_logger
from editml_clean.constants import INPUT_ENCODING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from editml_clean.config.logging import EditmlLogger

logger: EditmlLogger = get_logger(__name__)

STDIN_LABEL: str = "<stdin>"
STDOUT_LABEL: str = "<stdout>"


def _input_error(action: str, path: Path, exc: OSError) -> EditmlCleanError:
    reason: str = exc.strerror or str(exc)
    message: str = f"could not {action} input file '{path}': {reason}"
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return EditmlCleanFileNotFoundError(message)
    if isinstance(exc, PermissionError):
        return EditmlCleanPermissionDeniedError(message)
    return EditmlCleanIOError(message)


@contextmanager
def open_input(path: Path | None) -> Iterator[BinaryIO]:
    """Yield a binary stream for ``path``, or for standard input when None.

    A named file is closed when the block exits, however it exits. Standard
    input is never closed.

    Args:
        path (Path | None): The input file, or None for stdin.

    Yields:
        BinaryIO: The readable byte stream.

    Raises:
        EditmlCleanFileNotFoundError: If ``path`` is missing or is a directory.
        EditmlCleanPermissionDeniedError: If ``path`` is not readable.
        EditmlCleanIOError: On any other failure to open ``path``.
    """
    if path is None:
        logger.debug("reading input from %s", STDIN_LABEL)
        yield sys.stdin.buffer
        return

    try:
        handle: BinaryIO = open(path, "rb")  # noqa: SIM115 (closed in finally)
    except OSError as exc:
        raise _input_error("open", path, exc) from exc
    logger.debug("reading input from %s", path)
    try:
        yield handle
    finally:
        handle.close()


def read_input(path: Path | None) -> str:
    """Read and decode the whole input.

    Args:
        path (Path | None): The input file, or None for stdin.

    Returns:
        str: The decoded document.

    Raises:
        EditmlCleanEncodingError: If the input is not valid UTF-8.
        EditmlCleanIOError: If reading fails.
    """
    label: str = str(path) if path is not None else STDIN_LABEL
    with open_input(path) as stream:
        try:
            data: bytes = stream.read()
        except OSError as exc:
            raise EditmlCleanIOError(
                f"could not read input {label}: {exc.strerror or exc}"
            ) from exc
    try:
        return data.decode(INPUT_ENCODING)
    except UnicodeDecodeError as exc:
        raise EditmlCleanEncodingError(
            f"could not decode input {label} as {INPUT_ENCODING}: {exc}"
        ) from exc


def normalize_payload(text: str) -> str:
    """Return ``text`` terminated by exactly one newline.

    Trailing ``\\n`` and ``\\r\\n`` terminators are stripped first, so ``""``
    becomes ``"\\n"`` and ``"a\\n\\n"`` becomes ``"a\\n"``. A lone trailing ``\\r``
    is content and is kept.
    """
    while text.endswith("\n"):
        text = text[:-2] if text.endswith("\r\n") else text[:-1]
    return text + "\n"


def write_output(text: str, path: Path | None) -> int:
    """Write the clean text plus one newline to ``path`` or standard output.

    Args:
        text (str): The clean text.
        path (Path | None): Destination file, or None for stdout.

    Returns:
        int: Number of bytes written.

    Raises:
        EditmlCleanPermissionDeniedError: If ``path`` cannot be created for lack of permission.
        EditmlCleanIOError: If ``path`` cannot be created or written, or stdout fails.
    """
    payload: bytes = normalize_payload(text).encode(INPUT_ENCODING)

    if path is None:
        stream: BinaryIO = sys.stdout.buffer
        try:
            stream.write(payload)
            stream.flush()
        except OSError as exc:
            raise EditmlCleanIOError(
                f"could not write to {STDOUT_LABEL}: {exc.strerror or exc}"
            ) from exc
        logger.debug("wrote %d bytes to %s", len(payload), STDOUT_LABEL)
        return len(payload)

    try:
        with open(path, "wb") as handle:
            handle.write(payload)
    except PermissionError as exc:
        raise EditmlCleanPermissionDeniedError(
            f"could not create output file '{path}': {exc.strerror or exc}"
        ) from exc
    except OSError as exc:
        raise EditmlCleanIOError(
            f"could not write output file '{path}': {exc.strerror or exc}"
        ) from exc
    logger.debug("wrote %d bytes to %s", len(payload), path)
    return len(payload)
