"""Configuration constants and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_COPY_BUFFER_SIZE = 32 * 1024  # 32KiB
DEFAULT_LOG_LEVEL = "INFO"


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse the .env file in the working directory and return values for requested keys.

    Values are returned, never exported into os.environ.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text(encoding="utf-8")
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        key, sep, value = trimmed.partition("=")
        if not sep:
            continue
        key = key.strip()
        if key not in wanted:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def parse_buffer_size(raw: str | None) -> int:
    """Turn a configured buffer size into a positive int, falling back to the default."""
    if not raw:
        return DEFAULT_COPY_BUFFER_SIZE
    try:
        size = int(raw)
    except ValueError:
        return DEFAULT_COPY_BUFFER_SIZE
    return size if size > 0 else DEFAULT_COPY_BUFFER_SIZE


# Environment wins over .env.
_env_config = read_env_file(["FILEUTILS_COPY_BUFFER_SIZE", "FILEUTILS_LOG_LEVEL", "LOG_LEVEL"])

COPY_BUFFER_SIZE: int = parse_buffer_size(
    os.environ.get("FILEUTILS_COPY_BUFFER_SIZE") or _env_config.get("FILEUTILS_COPY_BUFFER_SIZE")
)

LOG_LEVEL: str = (
    os.environ.get("FILEUTILS_LOG_LEVEL")
    or _env_config.get("FILEUTILS_LOG_LEVEL")
    or os.environ.get("LOG_LEVEL")
    or _env_config.get("LOG_LEVEL")
    or DEFAULT_LOG_LEVEL
).upper()
