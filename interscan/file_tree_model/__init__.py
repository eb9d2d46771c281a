"""Domain model for filesystem directory listings.

This package contains non-UI listing primitives:
- directory entry datatypes with a directory/file kind tag
- sorted, error-aware directory scanning
"""

from __future__ import annotations

from .types import DirectoryEntry, DirectoryListing, EntryKind
from .fs import entry_sort_key, is_directory, list_directory_entries

__all__ = [
    "DirectoryEntry",
    "DirectoryListing",
    "EntryKind",
    "entry_sort_key",
    "is_directory",
    "list_directory_entries",
]
