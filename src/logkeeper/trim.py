"""
Size-bounded trimming of log files.

A file over its byte budget loses whole lines from the front (oldest first)
until what is left fits, give or take one line. The rewrite goes to a
temporary file next to the original and is swapped in with ``os.replace``,
so a failure part-way through leaves the original untouched.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger

from .core.exceptions import LogFileError
from .core.types import PathLike

TEMP_SUFFIX = ".trim"


def _content_length(line: bytes) -> int:
    """Length of *line* without its terminator."""
    if line.endswith(b"\r\n"):
        return len(line) - 2
    if line.endswith(b"\n"):
        return len(line) - 1
    return len(line)


def retained_lines(lines: Iterable[bytes], total_size: int, max_size_bytes: int) -> Iterator[bytes]:
    """Yield the lines that survive trimming, terminators included.

    Leading lines are dropped while the running size is still above
    *max_size_bytes*; each drop subtracts the line's length without its
    terminator. Everything after that is kept verbatim, except a final line
    with no terminator, which is never kept.
    """
    remaining = total_size
    for line in lines:
        if remaining > max_size_bytes:
            remaining -= _content_length(line)
            continue
        if not line.endswith(b"\n"):
            # partial line at end of file
            break
        yield line


def trim_file(path: PathLike, max_size_bytes: int) -> bool:
    """Trim *path* so it holds roughly the newest *max_size_bytes* of lines.

    Args:
        path: Log file to trim. A missing file is left alone.
        max_size_bytes: Byte budget. Files at or under it are not touched.

    Returns:
        True if the file was rewritten, False if it was already within budget.

    Raises:
        LogFileError: If the file cannot be read or rewritten. The original
            content is preserved in that case.
    """
    if max_size_bytes < 0:
        raise ValueError(f"max_size_bytes must be >= 0, got {max_size_bytes}")

    path = Path(path)
    try:
        size = path.stat().st_size
    except FileNotFoundError:
        return False
    except OSError as e:
        raise LogFileError(f"Cannot stat {path}: {e}") from e

    if size <= max_size_bytes:
        return False

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=TEMP_SUFFIX, dir=path.parent)
    except OSError as e:
        raise LogFileError(f"Cannot create temporary file for {path}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as dst, open(path, "rb") as src:
            dst.writelines(retained_lines(src, size, max_size_bytes))
            dst.flush()
            os.fsync(dst.fileno())
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        _discard(tmp_name)
        raise LogFileError(f"Failed to trim {path}: {e}") from e
    except BaseException:
        _discard(tmp_name)
        raise

    logger.debug(f"Trimmed {path}: {size} -> {path.stat().st_size} bytes (budget {max_size_bytes})")
    return True


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass
