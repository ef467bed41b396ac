"""
Severity levels and the console echo filter.

Level numbers follow loguru's numbering (SUCCESS sits between INFO and
WARNING) so a logkeeper level can be handed to loguru unchanged.
"""

from __future__ import annotations

import enum

_LEVEL_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


class Level(enum.IntEnum):
    """Severity of a log record."""

    INFO = 20
    SUCCESS = 25
    WARN = 30
    ERROR = 40
    FATAL = 50

    @classmethod
    def parse(cls, value: str | int | Level) -> Level:
        """Resolve a level from its name (case-insensitive) or number."""
        if isinstance(value, Level):
            return value
        if isinstance(value, int):
            return cls(value)
        name = value.strip().upper()
        name = _LEVEL_ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


class ConsoleMode(enum.Flag):
    """Which severities a sink mirrors to the console.

    One bit per level; composites cover the usual presets.
    """

    NONE = 0
    INFO = 1
    SUCCESS = 2
    WARN = 4
    ERROR = 8
    FATAL = 16

    ALL = INFO | SUCCESS | WARN | ERROR | FATAL
    WARN_AND_ABOVE = WARN | ERROR | FATAL
    ERROR_AND_ABOVE = ERROR | FATAL
    FATAL_ONLY = FATAL
    SUCCESS_ONLY = SUCCESS
    SUCCESS_AND_INFO = SUCCESS | INFO
    SUCCESS_WARN_AND_ABOVE = SUCCESS | WARN | ERROR | FATAL
    SUCCESS_ERROR_AND_ABOVE = SUCCESS | ERROR | FATAL
    SUCCESS_FATAL = SUCCESS | FATAL

    def accepts(self, level: Level) -> bool:
        """Return True if records at *level* should be echoed."""
        return bool(self & ConsoleMode[level.name])

    @classmethod
    def parse(cls, value: str | bool | ConsoleMode | None) -> ConsoleMode:
        """Parse a preset name or a comma-separated combination.

        Accepts ``"all"``, ``"none"``, ``"warn-and-above"``, ``"fatal"``,
        ``"success,error-and-above"`` and so on. Booleans map to ALL/NONE.
        """
        if isinstance(value, ConsoleMode):
            return value
        if value is None or value is False:
            return cls.NONE
        if value is True:
            return cls.ALL

        mode = cls.NONE
        for part in value.split(","):
            key = part.strip().upper().replace("-", "_").replace(" ", "_")
            if not key:
                continue
            key = _LEVEL_ALIASES.get(key, key)
            try:
                mode |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown console mode: {part.strip()!r}") from None
        return mode
