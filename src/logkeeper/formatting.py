"""
Log line formatting and call-site capture.

Produces the single-line text a :class:`~logkeeper.sink.LogSink` appends:

    [2026-10-19 14:03 UTC][WARN][/app/jobs.py run:42] disk nearly full
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from .levels import Level

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class CallerInfo:
    """Where a log call was made from."""

    path: str = ""
    member: str = ""
    line: int = 0


def capture_caller(stacklevel: int = 1) -> CallerInfo:
    """Return the location *stacklevel* frames above the function calling this one.

    ``stacklevel=1`` is the caller of the function that invoked
    ``capture_caller``; each wrapper in between adds one.
    """
    frame = inspect.currentframe()
    try:
        frame = frame.f_back if frame is not None else None
        for _ in range(stacklevel):
            if frame is None or frame.f_back is None:
                break
            frame = frame.f_back
        if frame is None:
            return CallerInfo()
        return CallerInfo(path=frame.f_code.co_filename, member=frame.f_code.co_name, line=frame.f_lineno)
    finally:
        del frame


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LineFormatter:
    """Assemble ``[timestamp][LEVEL][path member:line] message`` lines."""

    def __init__(
        self,
        include_timestamp: bool = True,
        include_caller_path: bool = True,
        include_caller_member: bool = True,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.include_timestamp = include_timestamp
        self.include_caller_path = include_caller_path
        self.include_caller_member = include_caller_member
        self._clock = clock

    def format(self, message: str, level: Level, caller: CallerInfo | None = None) -> str:
        parts = []
        if self.include_timestamp:
            parts.append(f"[{self._clock().strftime(TIMESTAMP_FORMAT)}]")
        parts.append(f"[{level.name}]")

        caller = caller or CallerInfo()
        location = []
        if self.include_caller_path:
            location.append(caller.path)
        if self.include_caller_member:
            location.append(f"{caller.member}:{caller.line}")
        if location:
            parts.append(f"[{' '.join(location)}]")

        return "".join(parts) + " " + flatten(message)


def flatten(message: str) -> str:
    """Escape line breaks so a message always occupies exactly one line."""
    return message.replace("\r\n", "\\n").replace("\r", "\\n").replace("\n", "\\n")
