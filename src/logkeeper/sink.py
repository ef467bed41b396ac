"""
Append-only log file owned by a single sink.

Thread-safe: ``write()`` and ``close()`` are serialised through one lock, so
a close waits for in-flight writes and nothing is written once the close has
started. Size trimming happens only on close, never on the write path.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import IO

from loguru import logger

from .console import ConsoleWriter
from .core.exceptions import LogFileError, SinkClosedError
from .core.types import PathLike
from .levels import ConsoleMode, Level
from .trim import trim_file

DEFAULT_MAX_SIZE_BYTES = 5_000_000


class LogSink:
    """One open log file plus an optional console mirror."""

    def __init__(
        self,
        path: PathLike,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
        console: ConsoleMode = ConsoleMode.NONE,
        console_writer: ConsoleWriter | None = None,
        name: str | None = None,
    ):
        """
        Args:
            path: Log file, opened for appending and created if missing.
                The parent directory must already exist.
            max_size_bytes: Budget applied by the trim on close.
            console: Levels to echo to the console.
            console_writer: Where echoed lines go. Defaults to stdout when
                ``console`` accepts anything.
            name: Logger name. Defaults to the file stem.

        Raises:
            LogFileError: If the file cannot be opened for appending.
        """
        if max_size_bytes < 0:
            raise ValueError(f"max_size_bytes must be >= 0, got {max_size_bytes}")

        self.path = Path(path)
        self.name = name or self.path.stem
        self.max_size_bytes = max_size_bytes
        self.console = console
        self.console_writer = console_writer
        if self.console_writer is None and console != ConsoleMode.NONE:
            self.console_writer = ConsoleWriter()

        self._lock = threading.Lock()
        self._closed = False
        try:
            self._stream: IO[str] = open(self.path, "a", encoding="utf-8")
        except OSError as e:
            raise LogFileError(f"Cannot open log file {self.path}: {e}") from e
        logger.debug(f"Opened log sink '{self.name}' at {self.path}")

    @classmethod
    def open(cls, path: PathLike, **kwargs) -> LogSink:
        """Open (or create) *path* for appending. See :meth:`__init__`."""
        return cls(path, **kwargs)

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, line: str, level: Level = Level.INFO) -> None:
        """Append *line* and flush it to the file; echo it if *level* passes the console filter.

        Raises:
            SinkClosedError: If the sink has been closed.
            LogFileError: If the append fails.
        """
        with self._lock:
            if self._closed:
                raise SinkClosedError(f"Log sink '{self.name}' is closed")
            try:
                self._stream.write(line + "\n")
                self._stream.flush()
            except OSError as e:
                raise LogFileError(f"Cannot write to {self.path}: {e}") from e
            # only echo what reached the file
            if self.console_writer is not None and self.console.accepts(level):
                self.console_writer.write_line(line, level)

    def close(self) -> None:
        """Close the file, then trim it to ``max_size_bytes``. Safe to call twice.

        Raises:
            LogFileError: If flushing or trimming fails. The sink is closed
                regardless.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            try:
                self._stream.close()
            except OSError as e:
                raise LogFileError(f"Cannot close log file {self.path}: {e}") from e
            trim_file(self.path, self.max_size_bytes)
        logger.debug(f"Closed log sink '{self.name}'")

    def __enter__(self) -> LogSink:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"LogSink(name={self.name!r}, path='{self.path}', {state})"
