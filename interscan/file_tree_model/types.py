"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Kind tag of one directory child."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a listed directory."""

    name: str
    path: Path
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class DirectoryListing:
    """Sorted children of a directory, or the error that prevented listing.

    An empty ``entries`` tuple with ``error`` unset is a readable empty
    directory; a set ``error`` means the directory could not be scanned.
    """

    entries: tuple[DirectoryEntry, ...] = ()
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = [
    "EntryKind",
    "DirectoryEntry",
    "DirectoryListing",
]
