"""
logkeeper: named, size- and age-bounded log files.

    from logkeeper import LoggerRegistry

    with LoggerRegistry("logs") as registry:
        registry.create_logger("app").info("hello")
"""

from loguru import logger as _diagnostics

from .console import ConsoleTheme, ConsoleWriter
from .core.exceptions import (
    ConfigurationError,
    DuplicateNameError,
    LogFileError,
    LogKeeperError,
    NotFoundError,
    RegistryClosedError,
    SinkClosedError,
    TeardownError,
)
from .formatting import CallerInfo, LineFormatter, capture_caller
from .levels import ConsoleMode, Level
from .logger import Logger
from .registry import LoggerRegistry
from .sink import LogSink
from .sweep import SweepReport, sweep_directory
from .trim import trim_file

__version__ = "0.1.0"

_diagnostics.disable("logkeeper")

__all__ = [
    "CallerInfo",
    "ConfigurationError",
    "ConsoleMode",
    "ConsoleTheme",
    "ConsoleWriter",
    "DuplicateNameError",
    "Level",
    "LineFormatter",
    "LogFileError",
    "LogKeeperError",
    "LogSink",
    "Logger",
    "LoggerRegistry",
    "NotFoundError",
    "RegistryClosedError",
    "SinkClosedError",
    "SweepReport",
    "TeardownError",
    "__version__",
    "capture_caller",
    "sweep_directory",
    "trim_file",
]
