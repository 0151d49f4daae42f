# topmark:header:start
#
#   project      : editml-clean
#   file         : exit_codes.py
#   file_relpath : src/editml_clean/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Exit codes for the editml-clean CLI.

editml-clean aligns its fatal-error codes with the BSD `sysexits` convention so
other tooling can interpret failures consistently. The content outcomes keep the
small codes: ``FAILURE=1`` when the markup engine reported an error and
``STRICT_WARNINGS=2`` when ``--strict`` escalated a warning-only run. Click's own
usage errors (which default to 2) are remapped to ``USAGE_ERROR`` so the strict
status stays unambiguous.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for editml-clean.

    Attributes:
        SUCCESS: Clean text was written (possibly with non-strict warnings).
        FAILURE: At least one error-severity issue; nothing was written.
        STRICT_WARNINGS: Only warnings, but ``--strict`` was given; nothing was written.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading or writing. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    STRICT_WARNINGS = 2

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM

    UNEXPECTED_ERROR = 255
