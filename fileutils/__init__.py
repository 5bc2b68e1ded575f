"""Filesystem helpers: existence checks, file copies and recursive directory copies."""

from __future__ import annotations

from .dir_copy import copy_dir
from .errors import (
    ChmodError,
    CloseError,
    CopyError,
    CreateError,
    DestinationLookupError,
    FileUtilsError,
    ListDirError,
    MkdirError,
    OpenError,
    SourceNotADirectoryError,
    StatError,
    SyncError,
)
from .file_copy import copy_file
from .fs_utils import clean_path, file_exists, list_entries
from .logger import setup_logging
from .types import DirEntry, StrPath

__all__ = [
    # dir_copy
    "copy_dir",
    # errors
    "ChmodError",
    "CloseError",
    "CopyError",
    "CreateError",
    "DestinationLookupError",
    "FileUtilsError",
    "ListDirError",
    "MkdirError",
    "OpenError",
    "SourceNotADirectoryError",
    "StatError",
    "SyncError",
    # file_copy
    "copy_file",
    # fs_utils
    "clean_path",
    "file_exists",
    "list_entries",
    # logger
    "setup_logging",
    # types
    "DirEntry",
    "StrPath",
]
