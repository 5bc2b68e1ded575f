"""Single-file copy with permission preservation."""

from __future__ import annotations

import contextlib
import os
import shutil
import stat
from typing import TYPE_CHECKING

from . import config
from .errors import ChmodError, CloseError, CopyError, CreateError, OpenError, StatError, SyncError
from .logger import logger

if TYPE_CHECKING:
    from typing import BinaryIO

    from .types import StrPath


def copy_file(src: StrPath, dest: StrPath) -> None:
    """Copy the bytes and permission bits of ``src`` to ``dest``.

    ``dest`` is created or truncated; its parent directory must exist. Each
    stage raises its own FileUtilsError subclass. A failure after the
    destination was created leaves whatever was written so far in place.
    """
    try:
        src_file = open(src, "rb")
    except OSError as err:
        raise OpenError(err) from err

    with src_file:
        try:
            dest_file = open(dest, "wb")
        except OSError as err:
            raise CreateError(err) from err

        try:
            mode = _write_contents(src, dest, src_file, dest_file)
        except BaseException:
            # A close failure here must not replace the stage error.
            with contextlib.suppress(OSError):
                dest_file.close()
            raise

        try:
            dest_file.close()
        except OSError as err:
            raise CloseError(err) from err

    logger.debug("Copied file", src=os.fspath(src), dest=os.fspath(dest), mode=oct(mode))


def _write_contents(src: StrPath, dest: StrPath, src_file: BinaryIO, dest_file: BinaryIO) -> int:
    """Run the copy, sync and chmod stages. Returns the applied mode."""
    try:
        shutil.copyfileobj(src_file, dest_file, config.COPY_BUFFER_SIZE)
        # BufferedWriter retries short writes; flush so the tail is written here.
        dest_file.flush()
    except OSError as err:
        raise CopyError(err) from err

    try:
        os.fsync(dest_file.fileno())
    except OSError as err:
        raise SyncError(err) from err

    try:
        mode = stat.S_IMODE(os.stat(src).st_mode)
    except OSError as err:
        raise StatError(err) from err

    try:
        os.chmod(dest, mode)
    except OSError as err:
        raise ChmodError(err) from err

    return mode
