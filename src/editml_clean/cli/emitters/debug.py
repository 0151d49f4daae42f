# topmark:header:start
#
#   project      : editml-clean
#   file         : debug.py
#   file_relpath : src/editml_clean/cli/emitters/debug.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Debug reporter: one stderr line per issue when ``--debug`` is set.

Line format::

    [Error] unresolved move target 'x': no matching source (L3:C7)

The reporter is purely observational; it never influences the exit status or
the written payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from editml_clean.cli.console import ConsoleLike
    from editml_clean.diagnostic.model import Issue


def format_issue(issue: Issue) -> str:
    """Return the diagnostic line for ``issue`` (without newline)."""
    return f"[{issue.severity.label}] {issue.message} (L{issue.line}:C{issue.column})"


def emit_issues(issues: Iterable[Issue], console: ConsoleLike) -> int:
    """Write one diagnostic line per issue, preserving order.

    Args:
        issues (Iterable[Issue]): Merged issues of the run.
        console (ConsoleLike): Console whose diagnostic channel receives the lines.

    Returns:
        int: Number of lines emitted.
    """
    count = 0
    for issue in issues:
        console.diagnostic(format_issue(issue))
        count += 1
    return count
