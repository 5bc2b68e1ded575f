"""Stage-tagged errors raised by the copy and lookup helpers."""

from __future__ import annotations

from typing import ClassVar


class FileUtilsError(Exception):
    """Base class for every failure raised by fileutils.

    Each subclass names the stage that failed. The underlying ``OSError`` is
    kept as ``cause`` (and chained as ``__cause__`` by the raiser). When the
    error travels up through ``copy_dir`` each level records the entry name,
    so ``str(err)`` narrates the full path chain, outermost first.
    """

    default_description: ClassVar[str] = "filesystem operation failed"

    def __init__(self, cause: OSError | None = None, *, description: str | None = None) -> None:
        self.cause = cause
        self.description = description or self.default_description
        self.entries: list[str] = []
        super().__init__(self.description)

    def within(self, entry_name: str) -> FileUtilsError:
        """Record that the failure happened while copying ``entry_name``."""
        self.entries.insert(0, entry_name)
        return self

    def __str__(self) -> str:
        parts = [f"copying {name}" for name in self.entries]
        parts.append(self.description)
        if self.cause is not None:
            parts.append(str(self.cause))
        return ": ".join(parts)


class OpenError(FileUtilsError):
    default_description = "opening the input file"


class CreateError(FileUtilsError):
    default_description = "creating the output file"


class CopyError(FileUtilsError):
    default_description = "copying the file content"


class SyncError(FileUtilsError):
    default_description = "flushing the output file to disk"


class StatError(FileUtilsError):
    default_description = "getting the file info for the input file"


class ChmodError(FileUtilsError):
    default_description = "copying permission to the output file"


class CloseError(FileUtilsError):
    default_description = "closing the output file"


class SourceNotADirectoryError(FileUtilsError, NotADirectoryError):
    """The directory copy source exists but is not a directory."""

    default_description = "source is not a directory"


class DestinationLookupError(FileUtilsError):
    default_description = "looking up the destination"


class MkdirError(FileUtilsError):
    default_description = "creating destination"


class ListDirError(FileUtilsError):
    default_description = "reading the directory listing for the input"
