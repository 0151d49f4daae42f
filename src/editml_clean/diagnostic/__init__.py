# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Issue model shared by the markup engine and the processing pipeline."""

from __future__ import annotations

from editml_clean.diagnostic.model import Issue, IssueStats, Severity

__all__ = ["Issue", "IssueStats", "Severity"]
