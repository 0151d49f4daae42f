# topmark:header:start
#
#   project      : editml-clean
#   file         : model.py
#   file_relpath : src/editml_clean/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Core issue types and helpers.

The markup engine reports problems as `Issue` values. The pipeline never builds
or alters issues itself; it only relays them in order and summarizes them.

Sections:
    * Severity: WARNING or ERROR, with a display label.
    * Issue: immutable structured issue (severity + message + position).
    * IssueStats: aggregated per-severity counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class Severity(Enum):
    """Severity of an issue reported by the markup engine.

    ERROR suppresses output; WARNING only matters in strict mode.
    """

    WARNING = "warning"
    ERROR = "error"

    @property
    def label(self) -> str:
        """Return the capitalized label used in diagnostic lines."""
        return "Error" if self is Severity.ERROR else "Warning"


@dataclass(frozen=True)
class Issue:
    """A problem found while parsing or transforming a document.

    Attributes:
        severity: Warning or error.
        message: Human-readable description.
        line: 1-based line of the offending construct.
        column: 1-based column (in characters) of the offending construct.
    """

    severity: Severity
    message: str
    line: int
    column: int

    @property
    def is_error(self) -> bool:
        """Return True for error-severity issues."""
        return self.severity is Severity.ERROR


@dataclass(frozen=True)
class IssueStats:
    """Aggregated counts for issues by severity."""

    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of issues."""
        return self.n_warning + self.n_error

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return {"warning": self.n_warning, "error": self.n_error}


def compute_issue_stats(issues: Iterable[Issue]) -> IssueStats:
    """Return per-severity counts for a sequence of issues.

    Args:
        issues: The issues to count.

    Returns:
        Per-severity counts.
    """
    n_warn = 0
    n_err = 0
    for issue in issues:
        if issue.severity is Severity.ERROR:
            n_err += 1
        else:
            n_warn += 1
    return IssueStats(n_warning=n_warn, n_error=n_err)
