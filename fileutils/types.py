"""fileutils domain types."""

from __future__ import annotations

import os
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict

StrPath: TypeAlias = str | os.PathLike[str]


class DirEntry(BaseModel):
    """One entry of a directory listing, as seen without following symlinks."""

    model_config = ConfigDict(frozen=True)

    name: str
    is_dir: bool
