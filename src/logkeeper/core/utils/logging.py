"""
Diagnostics logging using loguru.

logkeeper reports its own housekeeping (sweeps, trims, sink open/close,
teardown failures) through loguru. The package is disabled in loguru on
import so libraries embedding it stay quiet; call setup_logging() at app
startup to see those messages.
"""

import sys

from loguru import logger


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru with console and optional file output for logkeeper diagnostics.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a diagnostics file. If None, only logs to stderr.
        fmt: Loguru format string.
        rotation: Diagnostics file rotation size.
        retention: How long to keep rotated diagnostics files.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}",
            rotation=rotation,
            retention=retention,
        )

    logger.enable("logkeeper")
