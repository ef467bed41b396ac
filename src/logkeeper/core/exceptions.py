"""
logkeeper exception hierarchy.

All logkeeper exceptions inherit from LogKeeperError, making it easy for
consumers to catch library-level errors while still distinguishing specific
failure modes. File errors are also ``OSError`` and lookup errors are also
``KeyError`` so existing ``except`` clauses keep working.
"""


class LogKeeperError(Exception):
    """Base exception class for all logkeeper errors."""


class ConfigurationError(LogKeeperError):
    """Raised for configuration errors (missing keys, invalid values)."""


class NotFoundError(LogKeeperError, KeyError):
    """Raised when no logger is registered under the requested name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class DuplicateNameError(LogKeeperError):
    """Raised when creating a logger whose name is already registered."""


class LogFileError(LogKeeperError, OSError):
    """Raised when a log file cannot be opened, read, or rewritten."""


class SinkClosedError(LogKeeperError):
    """Raised when writing to a sink that has been closed."""


class RegistryClosedError(LogKeeperError):
    """Raised when creating a logger in a registry that has been closed."""


class TeardownError(LogKeeperError):
    """Raised after a registry closed all its sinks and some of them failed.

    ``errors`` maps each failing logger name to the exception it raised.
    """

    def __init__(self, errors: dict[str, BaseException]):
        self.errors = dict(errors)
        names = ", ".join(sorted(self.errors))
        super().__init__(f"Failed to close {len(self.errors)} logger(s): {names}")
