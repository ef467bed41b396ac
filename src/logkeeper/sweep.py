"""
Startup hygiene for a log directory.

Every ``*.log`` file in the directory is either deleted (older than the
expiration window) or trimmed to the size budget. Files left by earlier runs
are handled the same as any other: the sweep never needs a live sink and only
ever reads and rewrites, never appends. Temporary files from a trim that
was interrupted before its rename are removed.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from loguru import logger

from .core.exceptions import LogFileError
from .core.types import PathLike
from .trim import TEMP_SUFFIX, trim_file

LOG_SUFFIX = ".log"


@dataclass
class SweepReport:
    """What a sweep did to the directory."""

    deleted: list[Path] = field(default_factory=list)
    trimmed: list[Path] = field(default_factory=list)
    discarded: list[Path] = field(default_factory=list)

    @property
    def touched(self) -> int:
        return len(self.deleted) + len(self.trimmed) + len(self.discarded)


def is_expired(mtime: float, expiration: timedelta, now: float) -> bool:
    """Return True if a file last modified at *mtime* is past *expiration*.

    A zero or negative expiration expires everything, whatever the clock
    granularity of the filesystem.
    """
    if expiration <= timedelta(0):
        return True
    return now - mtime > expiration.total_seconds()


def is_trim_leftover(path: Path) -> bool:
    """Return True for a temporary ``.<name>.log.XXXX.trim`` file an interrupted trim left behind."""
    name = path.name
    return name.startswith(".") and name.endswith(TEMP_SUFFIX) and f"{LOG_SUFFIX}." in name


def sweep_directory(
    directory: PathLike,
    expiration: timedelta,
    max_file_size_bytes: int,
    now: float | None = None,
) -> SweepReport:
    """Delete expired ``.log`` files in *directory* and trim oversized ones.

    Age is checked first: an expired file is deleted even when it is within
    the size budget. Leftover ``.trim`` temporaries are removed first.
    Subdirectories and files with other suffixes are not touched.

    Args:
        directory: Directory to sweep. Must exist.
        expiration: Maximum age, measured from the last modification time.
        max_file_size_bytes: Budget passed to :func:`~logkeeper.trim.trim_file`.
        now: Reference time (epoch seconds). Defaults to ``time.time()``.

    Raises:
        LogFileError: If the directory cannot be listed or a file cannot be
            deleted or trimmed.
    """
    directory = Path(directory)
    now = time.time() if now is None else now
    report = SweepReport()

    try:
        entries = sorted(p for p in directory.iterdir() if p.is_file())
    except OSError as e:
        raise LogFileError(f"Cannot list log directory {directory}: {e}") from e

    for path in entries:
        if is_trim_leftover(path):
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise LogFileError(f"Cannot remove leftover trim file {path}: {e}") from e
            logger.info(f"Removed leftover trim file {path}")
            report.discarded.append(path)

    for path in (p for p in entries if p.suffix == LOG_SUFFIX):
        try:
            stat = path.stat()
        except FileNotFoundError:
            continue
        except OSError as e:
            raise LogFileError(f"Cannot stat {path}: {e}") from e

        if is_expired(stat.st_mtime, expiration, now):
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise LogFileError(f"Cannot delete expired log {path}: {e}") from e
            logger.info(f"Deleted expired log file {path}")
            report.deleted.append(path)
        elif stat.st_size > max_file_size_bytes and trim_file(path, max_file_size_bytes):
            report.trimmed.append(path)

    logger.debug(f"Swept {directory}: {len(report.deleted)} deleted, {len(report.trimmed)} trimmed")
    return report
