"""
Colored console output for log lines.

Colors are explicit configuration on a :class:`ConsoleTheme` handed to each
:class:`ConsoleWriter`; nothing here touches process-wide terminal state
beyond the single styled line being printed (click resets the style at the
end of every line).
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import IO

import click

from .levels import Level

# (foreground, background); None falls back to the theme defaults
ColorPair = tuple[str | None, str | None]


def _default_styles() -> dict[Level, ColorPair]:
    return {
        Level.SUCCESS: ("green", None),
        Level.WARN: ("yellow", None),
        Level.ERROR: ("red", None),
        Level.FATAL: (None, "red"),
    }


@dataclass
class ConsoleTheme:
    """Foreground/background colors per level, with defaults for the rest."""

    foreground: str | None = None
    background: str | None = None
    styles: dict[Level, ColorPair] = field(default_factory=_default_styles)

    def colors_for(self, level: Level) -> ColorPair:
        fg, bg = self.styles.get(level, (None, None))
        return fg or self.foreground, bg or self.background


class ConsoleWriter:
    """Print one log line at a time, color-coded by level.

    Thread-safe: a line is never interleaved with another writer's line.
    """

    def __init__(self, stream: IO[str] | None = None, theme: ConsoleTheme | None = None, color: bool | None = None):
        """
        Args:
            stream: Target stream. Defaults to the current ``sys.stdout``.
            theme: Color theme. Defaults to :class:`ConsoleTheme`.
            color: Force ANSI styling on/off; None lets click decide from the stream.
        """
        self.stream = stream
        self.theme = theme or ConsoleTheme()
        self.color = color
        self._lock = threading.Lock()

    def write_line(self, line: str, level: Level) -> None:
        fg, bg = self.theme.colors_for(level)
        styled = click.style(line, fg=fg, bg=bg) if (fg or bg) else line
        with self._lock:
            click.echo(styled, file=self.stream, color=self.color)
