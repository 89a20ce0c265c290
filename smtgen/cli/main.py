"""Main CLI entry point (modular)"""

from typing import Optional

import click

from .. import __version__
from .commands import check as check_cmd
from .commands import generate as generate_cmd
from .commands import list_solvers as list_solvers_cmd
from .utils import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Logging level (defaults from config)")
def cli(log_level: Optional[str]):
    """SMT solver binding generator"""
    setup_logging(log_level)


# Register modular commands
cli.add_command(generate_cmd.generate)
cli.add_command(list_solvers_cmd.list_solvers)
cli.add_command(check_cmd.check)


if __name__ == "__main__":
    cli()
