"""Tree traversal and line rendering.

Defines the styled output model and the depth-first renderer that turns a
directory into branch-marked lines plus folder/file counts.
"""

from __future__ import annotations

from .rendering import (
    BRANCH,
    DEFAULT_MAX_DEPTH,
    LAST_BRANCH,
    UNREADABLE_MODES,
    file_line,
    folder_line,
    is_ignored_extension,
    iter_tree_lines,
    render_tree,
    split_extension,
)
from .types import StyledSpan, StyleTag, TraversalCounts, TreeLine

__all__ = [
    "BRANCH",
    "LAST_BRANCH",
    "DEFAULT_MAX_DEPTH",
    "UNREADABLE_MODES",
    "StyledSpan",
    "StyleTag",
    "TraversalCounts",
    "TreeLine",
    "file_line",
    "folder_line",
    "is_ignored_extension",
    "iter_tree_lines",
    "render_tree",
    "split_extension",
]
