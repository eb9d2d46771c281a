"""Filesystem scanning for directory listings."""

from __future__ import annotations

import os
from pathlib import Path

from .types import DirectoryEntry, DirectoryListing, EntryKind


def is_directory(path: Path) -> bool:
    """Return whether ``path`` names an existing directory (links followed)."""
    try:
        return path.is_dir()
    except OSError:
        return False


def entry_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive name order with original spelling as tie-breaker."""
    return name.lower(), name


def list_directory_entries(directory: Path) -> DirectoryListing:
    """List immediate children of ``directory`` in case-insensitive name order.

    Symlinks to directories count as directories. Children whose type cannot
    be queried are reported as files. When the directory itself cannot be
    scanned the listing is empty and carries the ``OSError``.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(
                    DirectoryEntry(
                        name=child.name,
                        path=Path(child.path),
                        kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
                    )
                )
    except OSError as exc:
        return DirectoryListing(error=exc)

    entries.sort(key=lambda item: entry_sort_key(item.name))
    return DirectoryListing(entries=tuple(entries))


__all__ = [
    "is_directory",
    "entry_sort_key",
    "list_directory_entries",
]
