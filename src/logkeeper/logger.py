"""
Per-level logging entry points on top of a :class:`~logkeeper.sink.LogSink`.

The ``*_async`` variants run the same synchronous ``log`` on a worker thread;
they add no ordering guarantees of their own.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .formatting import CallerInfo, LineFormatter, capture_caller
from .levels import Level
from .sink import LogSink


class Logger:
    """Named logger: formats a message and hands the line to its sink."""

    def __init__(self, sink: LogSink, formatter: LineFormatter | None = None):
        self.sink = sink
        self.formatter = formatter or LineFormatter()

    @property
    def name(self) -> str:
        return self.sink.name

    @property
    def path(self) -> Path:
        return self.sink.path

    @property
    def closed(self) -> bool:
        return self.sink.closed

    def log(self, message: str, level: Level = Level.INFO, caller: CallerInfo | None = None, stacklevel: int = 1) -> None:
        """Write *message* at *level*.

        Args:
            message: Text to log. Line breaks are escaped.
            level: Severity.
            caller: Explicit call site. Captured from the stack when omitted.
            stacklevel: Frames to skip when capturing; wrappers add one.
        """
        if caller is None:
            caller = capture_caller(stacklevel)
        self.sink.write(self.formatter.format(message, level, caller), level)

    def info(self, message: str) -> None:
        self.log(message, Level.INFO, stacklevel=2)

    def success(self, message: str) -> None:
        self.log(message, Level.SUCCESS, stacklevel=2)

    def warn(self, message: str) -> None:
        self.log(message, Level.WARN, stacklevel=2)

    def error(self, message: str) -> None:
        self.log(message, Level.ERROR, stacklevel=2)

    def fatal(self, message: str) -> None:
        self.log(message, Level.FATAL, stacklevel=2)

    async def log_async(
        self, message: str, level: Level = Level.INFO, caller: CallerInfo | None = None, stacklevel: int = 1
    ) -> None:
        """Async counterpart of :meth:`log`; the write runs in a worker thread."""
        if caller is None:
            caller = capture_caller(stacklevel)
        await asyncio.to_thread(self.log, message, level, caller)

    async def info_async(self, message: str) -> None:
        await self.log_async(message, Level.INFO, stacklevel=2)

    async def success_async(self, message: str) -> None:
        await self.log_async(message, Level.SUCCESS, stacklevel=2)

    async def warn_async(self, message: str) -> None:
        await self.log_async(message, Level.WARN, stacklevel=2)

    async def error_async(self, message: str) -> None:
        await self.log_async(message, Level.ERROR, stacklevel=2)

    async def fatal_async(self, message: str) -> None:
        await self.log_async(message, Level.FATAL, stacklevel=2)

    def close(self) -> None:
        self.sink.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r}, path='{self.path}')"
