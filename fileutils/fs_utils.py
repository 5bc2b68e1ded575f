"""Path helpers shared by the copy operations."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import ListDirError, StatError
from .types import DirEntry

if TYPE_CHECKING:
    from .types import StrPath

# stat outcomes that mean "nothing lives at this path"
_NOT_FOUND_ERRORS = (FileNotFoundError, NotADirectoryError)


def file_exists(path: StrPath, *, strict: bool = False) -> bool:
    """Report whether an entry exists at ``path``.

    Only a "not found" stat failure yields False. Any other failure (for
    example permission denied on a parent directory) is reported as True,
    which is the long-standing contract. Pass ``strict=True`` to get a
    StatError for those failures instead.
    """
    try:
        os.stat(path)
    except _NOT_FOUND_ERRORS:
        return False
    except OSError as err:
        if strict:
            raise StatError(err, description="getting the file info for the path") from err
        return True
    return True


def clean_path(path: StrPath) -> str:
    """Normalize redundant separators and ``.``/``..`` segments."""
    return os.path.normpath(os.fspath(path))


def list_entries(path: StrPath) -> list[DirEntry]:
    """List the immediate entries of a directory, sorted by name."""
    try:
        with os.scandir(path) as it:
            entries = [DirEntry(name=entry.name, is_dir=entry.is_dir(follow_symlinks=False)) for entry in it]
    except OSError as err:
        raise ListDirError(err) from err
    return sorted(entries, key=lambda entry: entry.name)
