"""Presentation sinks and the non-tree lines of a report.

Sinks turn ``TreeLine`` spans into text, applying a ``UITheme`` when colors
are enabled. Header, ignore-echo and summary rows are built here so the
driver only decides what to print and in which order.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from typing import TextIO

from .tree_model.types import StyledSpan, StyleTag, TraversalCounts, TreeLine
from .ui_theme import PLAIN_THEME, UITheme

PATH_SEPARATOR_RE = re.compile(r"[/\\]")


class ConsoleSink:
    """Write styled lines to a text stream through a theme."""

    def __init__(self, stream: TextIO, theme: UITheme = PLAIN_THEME) -> None:
        # Undecodable file names arrive as lone surrogates; show them escaped.
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="backslashreplace")
        self.stream = stream
        self.theme = theme

    def format_line(self, line: TreeLine) -> str:
        return "".join(self.theme.paint(span.text, span.style) for span in line.spans)

    def write_line(self, line: TreeLine) -> None:
        self.stream.write(self.format_line(line) + "\n")

    def write_lines(self, lines: Iterable[TreeLine]) -> None:
        for line in lines:
            self.write_line(line)

    def write_blank(self) -> None:
        self.stream.write("\n")

    def write_prompt(self, text: str) -> None:
        """Write ``text`` without a newline and flush so it shows before input."""
        self.stream.write(self.theme.paint(text, StyleTag.PROMPT))
        self.stream.flush()

    def write_message(self, text: str) -> None:
        self.stream.write(text + "\n")


def plain_text(lines: Iterable[TreeLine]) -> list[str]:
    """Return unstyled text of each line."""
    return [line.text for line in lines]


def root_display_name(path_text: str) -> str:
    """Return the last component of ``path_text``, or the text itself.

    Both ``/`` and ``\\`` separate components and trailing separators are
    ignored. Roots without a named component (``/``, ``C:\\``) are kept whole.
    """
    name = PATH_SEPARATOR_RE.split(path_text.rstrip("/\\"))[-1]
    if not name or name.endswith(":"):
        return path_text
    return name


def header_line(path_text: str) -> TreeLine:
    name = root_display_name(path_text)
    if not name.endswith(("/", "\\")):
        name += os.sep
    return TreeLine((StyledSpan(name, StyleTag.FOLDER),))


def ignore_echo_line(ignored_extensions: tuple[str, ...]) -> TreeLine:
    """Build ``(Ignoring extensions: .a, .b)`` with emphasized extensions."""
    return TreeLine(
        (
            StyledSpan("(Ignoring extensions: ", StyleTag.TREE_MARKER),
            StyledSpan(", ".join(ignored_extensions), StyleTag.EXTENSION),
            StyledSpan(")", StyleTag.TREE_MARKER),
        )
    )


def summary_lines(counts: TraversalCounts, max_depth: int | None = None) -> list[TreeLine]:
    lines = [
        TreeLine((StyledSpan(f"Folders: {counts.folders}", StyleTag.TREE_MARKER),)),
        TreeLine((StyledSpan(f"Files: {counts.files}", StyleTag.TREE_MARKER),)),
    ]
    if counts.truncated:
        noun = "folder" if counts.truncated == 1 else "folders"
        lines.append(
            TreeLine((StyledSpan(f"(max depth {max_depth} reached in {counts.truncated} {noun})"),))
        )
    return lines


__all__ = [
    "ConsoleSink",
    "plain_text",
    "root_display_name",
    "header_line",
    "ignore_echo_line",
    "summary_lines",
]
