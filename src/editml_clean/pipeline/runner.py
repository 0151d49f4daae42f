# topmark:header:start
#
#   project      : editml-clean
#   file         : runner.py
#   file_relpath : src/editml_clean/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Run the two-phase parse-then-transform pipeline for one document.

`run` is pure with respect to its inputs: it performs no I/O and never exits
the process. The transform phase always runs, even when parsing reported
problems, so a degraded clean view is still produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from editml_clean.config.logging import get_logger
from editml_clean.diagnostic.model import compute_issue_stats
from editml_clean.engine import DEFAULT_ENGINE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from editml_clean.config.logging import EditmlLogger
    from editml_clean.diagnostic.model import Issue, IssueStats
    from editml_clean.engine.protocols import MarkupEngine

logger: EditmlLogger = get_logger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Outcome of a single pipeline run.

    Attributes:
        clean_text: The markup-free rendering from the transform phase.
        issues: Parse-phase issues followed by transform-phase issues, each in
            engine order.
    """

    clean_text: str
    issues: tuple[Issue, ...]

    def stats(self) -> IssueStats:
        """Return per-severity counts for the merged issues."""
        return compute_issue_stats(self.issues)


def merge_issues(
    parse_issues: Sequence[Issue], transform_issues: Sequence[Issue]
) -> tuple[Issue, ...]:
    """Concatenate phase issues, parse phase first; no sorting, no deduplication."""
    return (*parse_issues, *transform_issues)


def run(input_text: str, engine: MarkupEngine = DEFAULT_ENGINE) -> RunResult:
    """Parse and transform ``input_text`` with ``engine``.

    Args:
        input_text (str): The raw marked-up document.
        engine (MarkupEngine): The markup engine (defaults to the bundled EditML engine).

    Returns:
        RunResult: The clean text and the merged issues.
    """
    nodes, parse_issues = engine.parse(input_text)
    logger.trace("parse phase: %d issue(s)", len(parse_issues))
    clean_text, transform_issues = engine.transform_clean_view(nodes)
    logger.trace("transform phase: %d issue(s)", len(transform_issues))

    result = RunResult(clean_text=clean_text, issues=merge_issues(parse_issues, transform_issues))
    logger.debug("pipeline finished: %s", result.stats().to_dict())
    return result
