# topmark:header:start
#
#   project      : editml-clean
#   file         : nodes.py
#   file_relpath : src/editml_clean/engine/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 editml-clean contributors
#
# topmark:header:end

"""Document nodes produced by the EditML parser.

Every node remembers the 1-based line and column of its opening brace (or of its
first character for plain text) so later phases can report issues precisely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class DirectiveKind(Enum):
    """Kind of a relocation directive."""

    MOVE = "move"
    COPY = "copy"


@dataclass(frozen=True)
class Text:
    """Literal prose outside any markup."""

    text: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Insertion:
    """``{+text+}``: text added by the editor; kept in the clean view."""

    text: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Deletion:
    """``{-text-}``: text removed by the editor; dropped from the clean view."""

    text: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Comment:
    """``{>text<}``: editorial comment; dropped from the clean view."""

    text: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Highlight:
    """``{=text=}``: highlighted text; kept without the markers."""

    text: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Source:
    """``{move~text~id}`` or ``{copy~text~id}``: text to relocate or duplicate."""

    kind: DirectiveKind
    text: str
    ident: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Target:
    """``{move:id}`` or ``{copy:id}``: where a source's text is placed."""

    kind: DirectiveKind
    ident: str
    line: int = 1
    column: int = 1


Node = Union[Text, Insertion, Deletion, Comment, Highlight, Source, Target]
