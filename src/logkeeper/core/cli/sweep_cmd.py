"""logkeeper sweep — expire and trim the log files in a directory."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import click

from logkeeper.core.exceptions import LogKeeperError
from logkeeper.sweep import sweep_directory


@click.command()
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--expiration-days", type=click.FloatRange(min=0), default=30, show_default=True,
              help="Delete .log files not modified for this many days.")
@click.option("--max-size", "max_size", type=click.IntRange(min=0), default=5_000_000, show_default=True,
              help="Trim .log files larger than this many bytes.")
def sweep(directory: Path, expiration_days: float, max_size: int) -> None:
    """Delete expired .log files in DIRECTORY and trim oversized ones."""
    try:
        report = sweep_directory(directory, timedelta(days=expiration_days), max_size)
    except LogKeeperError as e:
        raise click.ClickException(str(e)) from e

    for path in report.deleted:
        click.echo(f"deleted  {path.name}")
    for path in report.trimmed:
        click.echo(f"trimmed  {path.name}")
    for path in report.discarded:
        click.echo(f"removed  {path.name}")
    if not report.touched:
        click.echo("Nothing to do.")
