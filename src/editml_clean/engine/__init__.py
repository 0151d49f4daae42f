# topmark:header:start
#
#   project      : editml-clean
#   file         : __init__.py
#   file_relpath : src/editml_clean/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Bundled EditML markup engine.

`EditmlEngine` wires the parser and the clean-view transform behind the
`MarkupEngine` protocol consumed by `editml_clean.pipeline`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from editml_clean.engine.parser import parse
from editml_clean.engine.protocols import MarkupEngine
from editml_clean.engine.transform import transform_clean_view

if TYPE_CHECKING:
    from collections.abc import Sequence

    from editml_clean.diagnostic.model import Issue
    from editml_clean.engine.nodes import Node


class EditmlEngine:
    """The EditML engine shipped with editml-clean."""

    def parse(self, text: str) -> tuple[list[Node], list[Issue]]:
        """Parse ``text`` into nodes and parse-phase issues."""
        return parse(text)

    def transform_clean_view(self, nodes: Sequence[Node]) -> tuple[str, list[Issue]]:
        """Render ``nodes`` as clean text and return transform-phase issues."""
        return transform_clean_view(nodes)


DEFAULT_ENGINE: MarkupEngine = EditmlEngine()

__all__ = [
    "DEFAULT_ENGINE",
    "EditmlEngine",
    "MarkupEngine",
    "parse",
    "transform_clean_view",
]
