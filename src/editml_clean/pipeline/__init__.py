# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Processing pipeline and severity policy.

This layer has no CLI dependencies: it does not print, touch files or exit the
process. Presentation and process termination belong to `editml_clean.cli`.
"""

from __future__ import annotations

from editml_clean.pipeline.policy import Outcome, classify_outcome, exit_code_for, should_write
from editml_clean.pipeline.runner import RunResult, run

__all__ = [
    "Outcome",
    "RunResult",
    "classify_outcome",
    "exit_code_for",
    "run",
    "should_write",
]
