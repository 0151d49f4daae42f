# topmark:header:start
#
#   project      : editml-clean
#   file         : model.py
#   file_relpath : src/editml_clean/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Immutable run configuration.

`RunConfig` captures everything the command line decides about a single run. It
is built once at startup and then passed explicitly to the code that needs it;
nothing in the package reads flags from module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

STDIN_PATH: str = "-"


@dataclass(frozen=True)
class RunConfig:
    """Configuration of a single editml-clean invocation.

    Attributes:
        debug: Emit one diagnostic line per issue on stderr.
        strict: Escalate warning-only runs to a distinct non-zero exit status.
        input_path: File to read, or ``None`` to read standard input.
        output_path: File to write, or ``None`` to write standard output.
    """

    debug: bool = False
    strict: bool = False
    input_path: Path | None = None
    output_path: Path | None = None

    @classmethod
    def from_cli(
        cls,
        *,
        debug: bool = False,
        strict: bool = False,
        input_path: str | None = None,
        output_short: str | None = None,
        output_long: str | None = None,
    ) -> RunConfig:
        """Build a configuration from raw command-line values.

        Empty strings are treated as "not given", and an input path of ``-``
        means standard input. When both ``-o`` and
        ``--output`` are supplied, ``--output`` wins.

        Args:
            debug (bool): Value of ``--debug``.
            strict (bool): Value of ``--strict``.
            input_path (str | None): Positional input path.
            output_short (str | None): Value of ``-o``.
            output_long (str | None): Value of ``--output``.

        Returns:
            RunConfig: The frozen configuration.
        """
        output: str | None = output_long or output_short or None
        return cls(
            debug=debug,
            strict=strict,
            input_path=Path(input_path) if input_path and input_path != STDIN_PATH else None,
            output_path=Path(output) if output else None,
        )

    @property
    def reads_stdin(self) -> bool:
        """Return True if input comes from standard input."""
        return self.input_path is None

    @property
    def writes_stdout(self) -> bool:
        """Return True if output goes to standard output."""
        return self.output_path is None
