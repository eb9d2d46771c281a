"""Output-model datatypes shared by the renderer and presentation sinks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleTag(Enum):
    """Semantic style of one output span; themes map tags to colors."""

    DEFAULT = "default"
    FOLDER = "folder"
    EXTENSION = "extension"
    TREE_MARKER = "tree_marker"
    PROMPT = "prompt"


@dataclass(frozen=True)
class StyledSpan:
    text: str
    style: StyleTag = StyleTag.DEFAULT


@dataclass(frozen=True)
class TreeLine:
    """One output line as styled spans.

    ``kind`` is ``"folder"`` or ``"file"`` for entry rows, ``"notice"`` for
    renderer annotations and ``"text"`` for header/summary rows.
    """

    spans: tuple[StyledSpan, ...]
    kind: str = "text"

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass
class TraversalCounts:
    """Counters threaded through one traversal."""

    folders: int = 0
    files: int = 0
    truncated: int = 0
    unreadable: int = 0
