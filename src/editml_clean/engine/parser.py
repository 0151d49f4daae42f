# topmark:header:start
#
#   project      : editml-clean
#   file         : parser.py
#   file_relpath : src/editml_clean/engine/parser.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""EditML parser: turns marked-up text into a flat list of nodes.

Supported constructs:

* ``{+text+}`` insertion, ``{-text-}`` deletion, ``{>text<}`` comment and
  ``{=text=}`` highlight;
* ``{move~text~id}`` / ``{mv~text~id}`` and ``{copy~text~id}`` / ``{cp~text~id}``
  relocation sources;
* ``{move:id}`` / ``{mv:id}`` and ``{copy:id}`` / ``{cp:id}`` relocation targets.

A ``{`` that does not open one of these constructs is literal text. Problems are
reported as issues rather than raised: an unterminated construct is an error and
the remainder of the document is kept as literal text, so the transform phase
still receives a usable (if degraded) node list.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import TYPE_CHECKING, Final

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
    from editml_clean.config.logging import EditmlLogger
    from editml_clean.engine.nodes import Node

logger: EditmlLogger = get_logger(__name__)

_SpanNode = type[Insertion | Deletion | Comment | Highlight]

# opener char -> (closer, node class, display name)
_SPAN_MARKERS: Final[dict[str, tuple[str, _SpanNode, str]]] = {
    "+": ("+}", Insertion, "insertion"),
    "-": ("-}", Deletion, "deletion"),
    ">": ("<}", Comment, "comment"),
    "=": ("=}", Highlight, "highlight"),
}

_KEYWORDS: Final[dict[str, DirectiveKind]] = {
    "move": DirectiveKind.MOVE,
    "mv": DirectiveKind.MOVE,
    "copy": DirectiveKind.COPY,
    "cp": DirectiveKind.COPY,
}

_DIRECTIVE_RE: re.Pattern[str] = re.compile(r"\{(move|mv|copy|cp)([~:])")
# The id is the last ``~``-separated field before the closing brace.
_SOURCE_END_RE: re.Pattern[str] = re.compile(r"~([^~}]*)\}")
_IDENT_RE: re.Pattern[str] = re.compile(r"[A-Za-z0-9_.-]+")


class _LineIndex:
    """Map character offsets to 1-based (line, column) pairs."""

    def __init__(self, text: str) -> None:
        self._starts: list[int] = [0]
        self._starts.extend(i + 1 for i, ch in enumerate(text) if ch == "\n")

    def at(self, offset: int) -> tuple[int, int]:
        idx: int = bisect_right(self._starts, offset) - 1
        return idx + 1, offset - self._starts[idx] + 1


class _Parser:
    def __init__(self, text: str) -> None:
        self.text: str = text
        self.index: _LineIndex = _LineIndex(text)
        self.nodes: list[Node] = []
        self.issues: list[Issue] = []
        self._pending: list[str] = []
        self._pending_start: int = 0

    def parse(self) -> tuple[list[Node], list[Issue]]:
        text: str = self.text
        i: int = 0
        while i < len(text):
            brace: int = text.find("{", i)
            if brace < 0:
                self._literal(i, text[i:])
                break
            if brace > i:
                self._literal(i, text[i:brace])
            end: int | None = self._construct(brace)
            if end is None:
                self._literal(brace, "{")
                i = brace + 1
            else:
                i = end
        self._flush()
        return self.nodes, self.issues

    # --- helpers ---------------------------------------------------------------

    def _literal(self, offset: int, chunk: str) -> None:
        if not self._pending:
            self._pending_start = offset
        self._pending.append(chunk)

    def _flush(self) -> None:
        if self._pending:
            line, column = self.index.at(self._pending_start)
            self.nodes.append(Text("".join(self._pending), line, column))
            self._pending = []

    def _emit(self, offset: int, node_factory: type, *args: object) -> None:
        self._flush()
        line, column = self.index.at(offset)
        self.nodes.append(node_factory(*args, line=line, column=column))

    def _issue(self, severity: Severity, message: str, offset: int) -> None:
        line, column = self.index.at(offset)
        self.issues.append(Issue(severity, message, line, column))
        logger.trace("parse issue [%s] %s at L%d:C%d", severity.value, message, line, column)

    def _unterminated(self, start: int, name: str, closer: str) -> int:
        self._issue(Severity.ERROR, f"unterminated {name}: missing '{closer}'", start)
        self._literal(start, self.text[start:])
        return len(self.text)

    # --- constructs ------------------------------------------------------------

    def _construct(self, start: int) -> int | None:
        """Parse the construct opening at ``start``; return the offset after it.

        Returns None when the brace does not open a construct.
        """
        text: str = self.text
        span = _SPAN_MARKERS.get(text[start + 1 : start + 2])
        if span is not None:
            closer, node_cls, name = span
            body_start: int = start + 2
            end: int = text.find(closer, body_start)
            if end < 0:
                return self._unterminated(start, name, closer)
            body: str = text[body_start:end]
            if not body:
                self._issue(Severity.WARNING, f"empty {name}", start)
            self._emit(start, node_cls, body)
            return end + len(closer)

        match = _DIRECTIVE_RE.match(text, start)
        if match is None:
            return None
        kind: DirectiveKind = _KEYWORDS[match.group(1)]
        if match.group(2) == "~":
            return self._source(start, match.end(), kind)
        return self._target(start, match.end(), kind)

    def _source(self, start: int, body_start: int, kind: DirectiveKind) -> int:
        end_match = _SOURCE_END_RE.search(self.text, body_start)
        if end_match is None:
            return self._unterminated(start, f"{kind.value} source", "~id}")
        body: str = self.text[body_start : end_match.start()]
        ident: str = end_match.group(1)
        if not _IDENT_RE.fullmatch(ident):
            self._issue(Severity.ERROR, f"invalid {kind.value} id {ident!r}", start)
            self._literal(start, self.text[start : end_match.end()])
            return end_match.end()
        if not body:
            self._issue(Severity.WARNING, f"empty {kind.value} source {ident!r}", start)
        self._emit(start, Source, kind, body, ident)
        return end_match.end()

    def _target(self, start: int, body_start: int, kind: DirectiveKind) -> int:
        end: int = self.text.find("}", body_start)
        if end < 0:
            return self._unterminated(start, f"{kind.value} target", "}")
        ident: str = self.text[body_start:end]
        if not _IDENT_RE.fullmatch(ident):
            self._issue(Severity.ERROR, f"invalid {kind.value} id {ident!r}", start)
            self._literal(start, self.text[start : end + 1])
            return end + 1
        self._emit(start, Target, kind, ident)
        return end + 1


def parse(text: str) -> tuple[list[Node], list[Issue]]:
    """Parse EditML text into nodes.

    Args:
        text (str): The marked-up document.

    Returns:
        tuple[list[Node], list[Issue]]: The nodes in document order and the
        parse issues in document order.
    """
    nodes, issues = _Parser(text).parse()
    logger.debug("parsed %d node(s) with %d issue(s)", len(nodes), len(issues))
    return nodes, issues
