"""
Named loggers sharing one log directory.

Construction order is fixed: create the directory, sweep it (expire old
files, trim oversized ones), and only then open any sink. The sweep therefore
never races a writer in this process.

Usage::

    with LoggerRegistry("logs", expiration=timedelta(days=7)) as registry:
        jobs = registry.create_logger("jobs")
        jobs.info("started")
        registry.get_logger("jobs").success("done")
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from datetime import timedelta
from pathlib import Path

from loguru import logger

from .console import ConsoleTheme, ConsoleWriter
from .core.config import Config
from .core.config_schema import LogKeeperConfig
from .core.exceptions import (
    DuplicateNameError,
    LogFileError,
    NotFoundError,
    RegistryClosedError,
    TeardownError,
)
from .core.types import PathLike
from .formatting import LineFormatter
from .levels import ConsoleMode
from .logger import Logger
from .sink import DEFAULT_MAX_SIZE_BYTES, LogSink
from .sweep import LOG_SUFFIX, SweepReport, sweep_directory

DEFAULT_EXPIRATION = timedelta(days=30)
DEFAULT_LOGGER_NAME = "default"


class LoggerRegistry:
    """Create, look up and close the loggers rooted in one directory."""

    def __init__(
        self,
        directory: PathLike = "logs",
        expiration: timedelta = DEFAULT_EXPIRATION,
        max_file_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
        console: ConsoleMode | str | bool = ConsoleMode.ALL,
        create_default: bool = False,
        console_theme: ConsoleTheme | None = None,
        console_writer: ConsoleWriter | None = None,
        include_timestamp: bool = True,
        include_caller_path: bool = True,
        include_caller_member: bool = True,
    ):
        """
        Args:
            directory: Root directory for ``<name>.log`` files; created if missing.
            expiration: Log files not modified for longer than this are
                deleted during the startup sweep.
            max_file_size_bytes: Budget for the startup sweep and the
                default budget of every logger created here.
            console: Levels echoed to the console by default.
            create_default: Eagerly create a logger named ``"default"``.
            console_theme: Colors for console output.
            console_writer: Shared console writer; built from
                ``console_theme`` when omitted.
            include_timestamp, include_caller_path, include_caller_member:
                Default line segments for loggers created here.

        Raises:
            LogFileError: If the directory cannot be created or swept.
        """
        if max_file_size_bytes < 0:
            raise ValueError(f"max_file_size_bytes must be >= 0, got {max_file_size_bytes}")

        self.directory = Path(directory).expanduser()
        self.expiration = expiration
        self.max_file_size_bytes = max_file_size_bytes
        self.console = ConsoleMode.parse(console)
        self.console_writer = console_writer or ConsoleWriter(theme=console_theme)
        self._format_defaults = {
            "include_timestamp": include_timestamp,
            "include_caller_path": include_caller_path,
            "include_caller_member": include_caller_member,
        }

        self._loggers: dict[str, Logger] = {}
        self._lock = threading.Lock()
        self._closed = False

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise LogFileError(f"Cannot create log directory {self.directory}: {e}") from e

        # Must finish before any sink opens a file in this directory.
        self.sweep_report: SweepReport = sweep_directory(self.directory, self.expiration, self.max_file_size_bytes)

        if create_default:
            self.create_logger(DEFAULT_LOGGER_NAME)

    @classmethod
    def from_config(cls, config: Config | LogKeeperConfig | None = None, **overrides) -> LoggerRegistry:
        """Build a registry from a :class:`Config` or a validated :class:`LogKeeperConfig`."""
        if config is None:
            config = Config()
        settings = config.validated() if isinstance(config, Config) else config
        reg = settings.registry
        kwargs = dict(
            directory=reg.directory,
            expiration=reg.expiration,
            max_file_size_bytes=reg.max_file_size_bytes,
            console=reg.console_mode,
            create_default=reg.create_default,
        )
        kwargs.update(settings.format.model_dump())
        kwargs.update(overrides)
        return cls(**kwargs)

    def create_logger(
        self,
        name: str,
        max_file_size_bytes: int | None = None,
        console: ConsoleMode | str | bool | None = None,
        include_timestamp: bool | None = None,
        include_caller_path: bool | None = None,
        include_caller_member: bool | None = None,
    ) -> Logger:
        """Open ``<directory>/<name>.log`` and register it under *name*.

        Per-logger arguments left as None inherit the registry's settings.

        Raises:
            DuplicateNameError: If *name* is already registered.
            ValueError: If *name* is empty or contains a path separator.
            LogFileError: If the file cannot be opened.
        """
        self._check_name(name)
        formatter = LineFormatter(
            include_timestamp=self._format_option("include_timestamp", include_timestamp),
            include_caller_path=self._format_option("include_caller_path", include_caller_path),
            include_caller_member=self._format_option("include_caller_member", include_caller_member),
        )

        with self._lock:
            if self._closed:
                raise RegistryClosedError(f"Logger registry for {self.directory} is closed")
            if name in self._loggers:
                raise DuplicateNameError(f"Logger '{name}' already exists in {self.directory}")
            sink = LogSink(
                self.directory / f"{name}{LOG_SUFFIX}",
                max_size_bytes=self.max_file_size_bytes if max_file_size_bytes is None else max_file_size_bytes,
                console=self.console if console is None else ConsoleMode.parse(console),
                console_writer=self.console_writer,
                name=name,
            )
            new_logger = Logger(sink, formatter)
            self._loggers[name] = new_logger

        logger.debug(f"Created logger '{name}' in {self.directory}")
        return new_logger

    def get_logger(self, name: str) -> Logger:
        """Return the logger registered under *name*.

        Raises:
            NotFoundError: If no such logger exists.
        """
        with self._lock:
            try:
                return self._loggers[name]
            except KeyError:
                raise NotFoundError(f"Logger '{name}' does not exist.") from None

    def __getitem__(self, name: str) -> Logger:
        return self.get_logger(name)

    def remove_logger(self, name: str) -> None:
        """Unregister *name* and close its sink (trimming the file). The file is kept.

        Raises:
            NotFoundError: If no such logger exists.
            LogFileError: If closing or trimming fails; the logger is
                unregistered regardless.
        """
        with self._lock:
            removed = self._loggers.pop(name, None)
        if removed is None:
            raise NotFoundError(f"Logger '{name}' does not exist.")
        removed.close()
        logger.debug(f"Removed logger '{name}'")

    def close(self) -> None:
        """Close every logger and clear the registry. Safe to call twice.

        Each logger is closed even if an earlier one fails.

        Raises:
            TeardownError: After all loggers were closed, if any of them failed.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            loggers = list(self._loggers.items())
            self._loggers.clear()

        errors: dict[str, BaseException] = {}
        for name, log in loggers:
            try:
                log.close()
            except Exception as e:
                logger.warning(f"Failed to close logger '{name}': {e}")
                errors[name] = e

        if errors:
            raise TeardownError(errors)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def names(self) -> list[str]:
        with self._lock:
            return list(self._loggers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._loggers

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __iter__(self) -> Iterator[Logger]:
        with self._lock:
            return iter(list(self._loggers.values()))

    def __enter__(self) -> LoggerRegistry:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _format_option(self, key: str, value: bool | None) -> bool:
        if value is not None:
            return value
        return self._format_defaults[key]

    @staticmethod
    def _check_name(name: str) -> None:
        if not name or not name.strip():
            raise ValueError("Logger name cannot be empty.")
        if "/" in name or "\\" in name or "\x00" in name or name in (".", ".."):
            raise ValueError(f"Invalid logger name {name!r}: path separators are not allowed.")
