# topmark:header:start
#
#   project      : editml-clean
#   file         : policy.py
#   file_relpath : src/editml_clean/pipeline/policy.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Severity policy: classify a run and decide its exit status.

The precedence is strict: a single error anywhere wins over any number of
warnings, whether or not strict mode is enabled.

Outcome → exit status:

==================  ===========================  ==============
Outcome             Exit code                    Output written
==================  ===========================  ==============
``ERRORED``         ``FAILURE`` (1)              no
``STRICT_WARNED``   ``STRICT_WARNINGS`` (2)      no
``WARNED``          ``SUCCESS`` (0)              yes
``CLEAN``           ``SUCCESS`` (0)              yes
==================  ===========================  ==============
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from editml_clean.core.exit_codes import ExitCode
from editml_clean.diagnostic.model import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from editml_clean.diagnostic.model import Issue


class Outcome(str, Enum):
    """Classification of a run from its merged issues."""

    CLEAN = "clean"
    WARNED = "warned"
    STRICT_WARNED = "strict_warned"
    ERRORED = "errored"


_EXIT_CODES: dict[Outcome, ExitCode] = {
    Outcome.CLEAN: ExitCode.SUCCESS,
    Outcome.WARNED: ExitCode.SUCCESS,
    Outcome.STRICT_WARNED: ExitCode.STRICT_WARNINGS,
    Outcome.ERRORED: ExitCode.FAILURE,
}


def classify_outcome(issues: Iterable[Issue], *, strict: bool) -> Outcome:
    """Scan the merged issues once and classify the run.

    Args:
        issues (Iterable[Issue]): Merged issues of the run.
        strict (bool): Whether warnings are escalated.

    Returns:
        Outcome: The run classification.
    """
    has_warning = False
    for issue in issues:
        if issue.severity is Severity.ERROR:
            return Outcome.ERRORED
        has_warning = True
    if has_warning:
        return Outcome.STRICT_WARNED if strict else Outcome.WARNED
    return Outcome.CLEAN


def exit_code_for(outcome: Outcome) -> ExitCode:
    """Return the process exit code for an outcome."""
    return _EXIT_CODES[outcome]


def should_write(outcome: Outcome) -> bool:
    """Return True if the clean text may be written for this outcome."""
    return exit_code_for(outcome) == ExitCode.SUCCESS
