"""logkeeper trim — trim one log file to a byte budget."""

from __future__ import annotations

from pathlib import Path

import click

from logkeeper.core.exceptions import LogKeeperError
from logkeeper.trim import trim_file

from .common import format_size


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-size", "max_size", type=click.IntRange(min=0), required=True,
              help="Byte budget; oldest lines are dropped first.")
def trim(file: Path, max_size: int) -> None:
    """Drop the oldest lines of FILE until it fits in --max-size bytes."""
    before = file.stat().st_size
    try:
        changed = trim_file(file, max_size)
    except LogKeeperError as e:
        raise click.ClickException(str(e)) from e

    if changed:
        click.echo(f"{file.name}: {format_size(before)} -> {format_size(file.stat().st_size)}")
    else:
        click.echo(f"{file.name}: already within {format_size(max_size)}")
