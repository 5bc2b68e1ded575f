"""Recursive directory copy."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

from .errors import (
    ChmodError,
    DestinationLookupError,
    FileUtilsError,
    MkdirError,
    SourceNotADirectoryError,
    StatError,
)
from .file_copy import copy_file
from .fs_utils import clean_path, list_entries
from .logger import logger

if TYPE_CHECKING:
    from .types import StrPath


def copy_dir(src: StrPath, dest: StrPath) -> None:
    """Recursively copy the directory tree at ``src`` to ``dest``.

    Each destination directory takes the mode of its source directory and
    files go through copy_file. Entries already present in ``dest`` but
    absent from ``src`` are left alone.

    The first failing entry aborts the copy: remaining siblings are skipped,
    the error is tagged with the entry name at every level, and whatever was
    copied before the failure stays on disk.
    """
    src_path = clean_path(src)
    dest_path = clean_path(dest)

    try:
        src_info = os.stat(src_path)
    except OSError as err:
        raise StatError(err, description="getting the file info for the input") from err
    if not stat.S_ISDIR(src_info.st_mode):
        raise SourceNotADirectoryError()
    mode = stat.S_IMODE(src_info.st_mode)

    try:
        os.stat(dest_path)
        dest_existed = True
    except FileNotFoundError:
        dest_existed = False
    except OSError as err:
        raise DestinationLookupError(err) from err

    try:
        os.makedirs(dest_path, mode=mode, exist_ok=True)
    except OSError as err:
        raise MkdirError(err) from err

    if not dest_existed:
        # makedirs is subject to the umask
        try:
            os.chmod(dest_path, mode)
        except OSError as err:
            raise ChmodError(err, description="copying permission to the destination") from err

    logger.debug("Copying directory", src=src_path, dest=dest_path, mode=oct(mode))

    for entry in list_entries(src_path):
        src_entry_path = os.path.join(src_path, entry.name)
        dest_entry_path = os.path.join(dest_path, entry.name)
        logger.debug("Copying entry", src=src_path, entry=entry.name, is_dir=entry.is_dir)

        try:
            if entry.is_dir:
                copy_dir(src_entry_path, dest_entry_path)
            else:
                copy_file(src_entry_path, dest_entry_path)
        except FileUtilsError as err:
            err.within(entry.name)
            raise
