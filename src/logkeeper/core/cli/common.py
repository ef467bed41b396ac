"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click

from logkeeper.core.config import Config
from logkeeper.core.exceptions import LogKeeperError
from logkeeper.levels import Level


def load_config(config_file: str | None) -> Config:
    """Load config from *config_file* (plus LOGKEEPER_* env vars)."""
    try:
        return Config(config_file=config_file)
    except LogKeeperError as e:
        raise click.ClickException(str(e)) from e


class LevelType(click.ParamType):
    """Click parameter accepting a log level name."""

    name = "level"

    def convert(self, value, param, ctx) -> Level:
        try:
            return Level.parse(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


def format_size(num_bytes: int) -> str:
    """Human-readable byte count for CLI output."""
    for unit in ("B", "KB", "MB"):
        if num_bytes < 1000:
            return f"{num_bytes} {unit}" if unit == "B" else f"{num_bytes:.1f} {unit}"
        num_bytes /= 1000
    return f"{num_bytes:.1f} GB"
