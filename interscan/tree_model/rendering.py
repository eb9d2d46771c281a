"""Depth-first rendering of a directory tree into styled lines.

Each visible entry becomes one ``TreeLine`` built from the accumulated prefix,
a branch marker and the entry name. Folders are bracketed and recursed into;
files are split at their final dot so the extension can be emphasized.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..file_tree_model import DirectoryEntry, list_directory_entries
from .types import StyledSpan, StyleTag, TraversalCounts, TreeLine

BRANCH = "|-->"
LAST_BRANCH = "#-->"
PREFIX_CONTINUE = "|    "
PREFIX_LAST = "     "
DEFAULT_MAX_DEPTH = 1000
UNREADABLE_MODES = ("silent", "mark")


def split_extension(name: str) -> tuple[str, str]:
    """Split ``name`` at its final dot into ``(stem, extension)``.

    Dotless names return an empty extension.
    """
    dot = name.rfind(".")
    if dot < 0:
        return name, ""
    return name[:dot], name[dot:]


def is_ignored_extension(name: str, ignored_extensions: tuple[str, ...] | frozenset[str]) -> bool:
    """Return whether the file ``name`` has an extension in the ignore set."""
    _stem, extension = split_extension(name)
    if not extension:
        return False
    return extension.lower() in ignored_extensions


def _notice_line(prefix: str, message: str) -> TreeLine:
    return TreeLine(
        (StyledSpan(prefix + LAST_BRANCH, StyleTag.TREE_MARKER), StyledSpan(message, StyleTag.DEFAULT)),
        kind="notice",
    )


def folder_line(prefix: str, name: str, is_last: bool) -> TreeLine:
    branch = LAST_BRANCH if is_last else BRANCH
    return TreeLine(
        (StyledSpan(prefix + branch, StyleTag.TREE_MARKER), StyledSpan(f"[{name}]", StyleTag.FOLDER)),
        kind="folder",
    )


def file_line(prefix: str, name: str, is_last: bool) -> TreeLine:
    branch = LAST_BRANCH if is_last else BRANCH
    stem, extension = split_extension(name)
    spans = [StyledSpan(prefix + branch, StyleTag.TREE_MARKER), StyledSpan(stem, StyleTag.DEFAULT)]
    if extension:
        spans.append(StyledSpan(extension, StyleTag.EXTENSION))
    return TreeLine(tuple(spans), kind="file")

# One pending level of the walk: remaining (index, entry) pairs, sibling
# count, prefix for those siblings and their depth.
_Level = tuple[Iterator[tuple[int, DirectoryEntry]], int, str, int]


def iter_tree_lines(
    directory: Path,
    ignored_extensions: tuple[str, ...],
    counts: TraversalCounts,
    prefix: str = "",
    max_depth: int = DEFAULT_MAX_DEPTH,
    unreadable_mode: str = "silent",
) -> Iterator[TreeLine]:
    """Yield one line per visible entry below ``directory``, depth-first.

    ``counts`` is updated as lines are produced. Files whose extension is in
    ``ignored_extensions`` are skipped without being counted. Directories
    deeper than ``max_depth`` are listed but not entered; a notice line marks
    the cut. Unreadable directories render as empty, or with a notice line
    when ``unreadable_mode`` is ``"mark"``.

    Pending levels live on an explicit stack, so tree depth never grows the
    interpreter call stack.
    """
    if unreadable_mode not in UNREADABLE_MODES:
        raise ValueError(f"unknown unreadable mode: {unreadable_mode!r}")

    ignored = frozenset(ignored_extensions)
    stack: list[_Level] = []

    def enter(path: Path, level_prefix: str, depth: int) -> TreeLine | None:
        """Push the listing of ``path``; return a notice when it is unreadable."""
        listing = list_directory_entries(path)
        if not listing.ok:
            counts.unreadable += 1
            if unreadable_mode == "mark":
                reason = listing.error.strerror or type(listing.error).__name__
                return _notice_line(level_prefix, f"(unreadable: {reason})")
            return None
        stack.append((iter(enumerate(listing.entries)), len(listing.entries), level_prefix, depth))
        return None

    notice = enter(directory, prefix, 1)
    if notice is not None:
        yield notice

    while stack:
        entries, total, level_prefix, depth = stack[-1]
        step = next(entries, None)
        if step is None:
            stack.pop()
            continue

        index, entry = step
        is_last = index == total - 1
        if entry.is_dir:
            counts.folders += 1
            yield folder_line(level_prefix, entry.name, is_last)
            child_prefix = level_prefix + (PREFIX_LAST if is_last else PREFIX_CONTINUE)
            if depth >= max_depth:
                counts.truncated += 1
                yield _notice_line(child_prefix, f"(max depth {max_depth} reached)")
                continue
            notice = enter(entry.path, child_prefix, depth + 1)
            if notice is not None:
                yield notice
            continue

        if is_ignored_extension(entry.name, ignored):
            continue
        counts.files += 1
        yield file_line(level_prefix, entry.name, is_last)


def render_tree(
    directory: Path,
    ignored_extensions: tuple[str, ...] = (),
    max_depth: int = DEFAULT_MAX_DEPTH,
    unreadable_mode: str = "silent",
) -> tuple[list[TreeLine], TraversalCounts]:
    """Render the whole tree below ``directory`` and return lines plus counts."""
    counts = TraversalCounts()
    lines = list(
        iter_tree_lines(
            directory,
            ignored_extensions,
            counts,
            max_depth=max_depth,
            unreadable_mode=unreadable_mode,
        )
    )
    return lines, counts
