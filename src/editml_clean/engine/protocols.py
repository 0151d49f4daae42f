# topmark:header:start
#
#   project      : editml-clean
#   file         : protocols.py
#   file_relpath : src/editml_clean/engine/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Structural interface of a markup engine.

The processing pipeline only relies on these two phases, so any object that
provides them (the bundled EditML engine, or a fake in tests) can be plugged in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from editml_clean.diagnostic.model import Issue


class MarkupEngine(Protocol):
    """Two-phase markup engine: parse, then transform to a clean view."""

    def parse(self, text: str) -> tuple[Sequence[Any], Sequence[Issue]]:
        """Parse marked-up text into nodes and parse-phase issues."""
        ...

    def transform_clean_view(self, nodes: Sequence[Any]) -> tuple[str, Sequence[Issue]]:
        """Render nodes as clean text and return transform-phase issues."""
        ...
