# topmark:header:start
#
#   project      : editml-clean
#   file         : transform.py
#   file_relpath : src/editml_clean/engine/transform.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Clean-view transform: render parsed EditML nodes as plain prose.

Insertions and highlights keep their text, deletions and comments vanish. Move
sources disappear from their original place and reappear at their target; copy
sources stay in place and are duplicated at every target. Targets may appear
before their source.

Issues are reported in two passes, each in document order:

1. source registration (duplicate ids),
2. rendering (unresolved targets, moves placed twice),

followed by warnings for sources that no target refers to.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from editml_clean.config.logging import get_logger
from editml_clean.diagnostic.model import Issue, Severity
from editml_clean.engine.nodes import (
    Comment,
    Deletion,
    DirectiveKind,
    Highlight,
    Insertion,
    Source,
    Target,
    Text,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from editml_clean.config.logging import EditmlLogger
    from editml_clean.engine.nodes import Node

logger: EditmlLogger = get_logger(__name__)

_SourceKey = tuple[DirectiveKind, str]


def _issue(severity: Severity, message: str, node: Source | Target) -> Issue:
    return Issue(severity, message, node.line, node.column)


def _register_sources(
    nodes: Sequence[Node], issues: list[Issue]
) -> dict[_SourceKey, Source]:
    sources: dict[_SourceKey, Source] = {}
    for node in nodes:
        if not isinstance(node, Source):
            continue
        key: _SourceKey = (node.kind, node.ident)
        if key in sources:
            first: Source = sources[key]
            issues.append(
                _issue(
                    Severity.ERROR,
                    f"duplicate {node.kind.value} source {node.ident!r} "
                    f"(first defined at L{first.line}:C{first.column})",
                    node,
                )
            )
            continue
        sources[key] = node
    return sources


def transform_clean_view(nodes: Sequence[Node]) -> tuple[str, list[Issue]]:
    """Render nodes as clean text.

    Args:
        nodes (Sequence[Node]): Nodes as returned by `editml_clean.engine.parser.parse`.

    Returns:
        tuple[str, list[Issue]]: The clean text and the transform issues.
    """
    issues: list[Issue] = []
    sources: dict[_SourceKey, Source] = _register_sources(nodes, issues)
    placed: Counter[_SourceKey] = Counter()
    parts: list[str] = []

    for node in nodes:
        if isinstance(node, (Text, Insertion, Highlight)):
            parts.append(node.text)
        elif isinstance(node, (Deletion, Comment)):
            continue
        elif isinstance(node, Source):
            if node.kind is DirectiveKind.COPY:
                parts.append(node.text)
        elif isinstance(node, Target):
            key: _SourceKey = (node.kind, node.ident)
            source: Source | None = sources.get(key)
            if source is None:
                issues.append(
                    _issue(
                        Severity.ERROR,
                        f"unresolved {node.kind.value} target {node.ident!r}: no matching source",
                        node,
                    )
                )
                continue
            if node.kind is DirectiveKind.MOVE and placed[key] > 0:
                issues.append(
                    _issue(
                        Severity.ERROR,
                        f"move source {node.ident!r} is placed more than once",
                        node,
                    )
                )
                continue
            placed[key] += 1
            parts.append(source.text)

    for key, source in sources.items():
        if placed[key]:
            continue
        if source.kind is DirectiveKind.MOVE:
            message = f"move source {source.ident!r} has no target; its text is dropped"
        else:
            message = f"copy source {source.ident!r} is never copied"
        issues.append(_issue(Severity.WARNING, message, source))

    logger.debug("transformed %d node(s) with %d issue(s)", len(nodes), len(issues))
    return "".join(parts), issues
