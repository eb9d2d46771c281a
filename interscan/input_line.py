"""Parsing of the single prompt line into a root path and an ignore set.

The line grammar is ``<path-text> [--ignore[:] <ext-tokens...>]``. The
directive may appear anywhere; text before its first occurrence is the path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Longest match first: ``--ignore:`` wins over ``--ignore`` at the same position.
IGNORE_DIRECTIVE_RE = re.compile(r"--ignore:?", re.IGNORECASE)
EXTENSION_SEPARATORS = (",", "&")
QUOTE_CHARS = ("\"", "'")


@dataclass(frozen=True)
class ParsedInput:
    """Root path text plus normalized extensions to hide."""

    path_text: str
    ignored_extensions: tuple[str, ...] = ()


def sanitize_path(text: str) -> str:
    """Trim whitespace and strip one surrounding quote layer.

    Leading and trailing quotes are checked independently, so an unpaired
    quote on either end is removed as well.
    """
    cleaned = text.strip()
    if cleaned and cleaned[0] in QUOTE_CHARS:
        cleaned = cleaned[1:]
    if cleaned and cleaned[-1] in QUOTE_CHARS:
        cleaned = cleaned[:-1]
    return cleaned.strip()


def find_ignore_directive(line: str) -> tuple[int, int] | None:
    """Return ``(position, length)`` of the first ignore directive in ``line``."""
    match = IGNORE_DIRECTIVE_RE.search(line)
    if match is None:
        return None
    return match.start(), match.end() - match.start()


def parse_ignored_extensions(raw: str) -> tuple[str, ...]:
    """Normalize the text following an ignore directive into an ignore set.

    Whitespace, commas and ampersands separate tokens. Each token gains a
    leading dot when missing and is lowercased; the result is sorted and
    deduplicated.
    """
    text = raw.strip()
    if text.startswith(":"):
        text = text[1:]
    for separator in EXTENSION_SEPARATORS:
        text = text.replace(separator, " ")

    extensions: set[str] = set()
    for token in text.split():
        token = token.strip()
        if not token:
            continue
        if not token.startswith("."):
            token = "." + token
        extensions.add(token.lower())
    return tuple(sorted(extensions))


def split_input_line(line: str) -> ParsedInput:
    """Split a raw prompt line into sanitized path text and ignore set."""
    directive = find_ignore_directive(line)
    if directive is None:
        return ParsedInput(path_text=sanitize_path(line))

    position, length = directive
    return ParsedInput(
        path_text=sanitize_path(line[:position]),
        ignored_extensions=parse_ignored_extensions(line[position + length :]),
    )


__all__ = [
    "ParsedInput",
    "sanitize_path",
    "find_ignore_directive",
    "parse_ignored_extensions",
    "split_input_line",
]
