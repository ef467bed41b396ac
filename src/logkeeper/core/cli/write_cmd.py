"""logkeeper write — append one message to a named log."""

from __future__ import annotations

import click

from logkeeper.core.exceptions import LogKeeperError
from logkeeper.formatting import CallerInfo
from logkeeper.levels import Level
from logkeeper.registry import LoggerRegistry

from .common import LevelType, load_config


@click.command()
@click.argument("name")
@click.argument("message")
@click.option("--dir", "directory", type=click.Path(file_okay=False), default=None,
              help="Log directory (overrides the config file).")
@click.option("--level", type=LevelType(), default="info", show_default=True)
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="YAML or JSON config file.")
def write(name: str, message: str, directory: str | None, level: Level, config_file: str | None) -> None:
    """Append MESSAGE to the log named NAME."""
    config = load_config(config_file)
    if directory:
        config.set("registry.directory", directory)

    try:
        with LoggerRegistry.from_config(config) as registry:
            registry.create_logger(name).log(message, level, caller=CallerInfo(path="cli", member="write"))
    except (LogKeeperError, ValueError) as e:
        raise click.ClickException(str(e)) from e
