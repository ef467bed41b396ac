"""logkeeper CLI — entry point for sweep, trim, and write commands."""

import click

from logkeeper import __version__


@click.group()
@click.version_option(version=__version__, package_name="logkeeper")
@click.option("-v", "--verbose", is_flag=True, help="Show logkeeper's own diagnostics.")
def main(verbose: bool) -> None:
    """logkeeper — size- and age-bounded log files."""
    from logkeeper.core.utils.logging import setup_logging

    setup_logging(level="DEBUG" if verbose else "WARNING")


# Register subcommands
from .sweep_cmd import sweep
from .trim_cmd import trim
from .write_cmd import write

main.add_command(sweep)
main.add_command(trim)
main.add_command(write)
