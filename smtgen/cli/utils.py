"""CLI utilities for logging setup and error reporting"""

import logging
from typing import Optional

import click

from ..config import get_config
from ..exceptions import SolverGenException, ValidationError


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or get_config().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def fail(error: SolverGenException) -> None:
    """Report a generator error on stderr and exit non-zero."""
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, ValidationError):
        click.echo(f"Offending entry: {error.entry.kind_name}", err=True)
    raise SystemExit(1)
