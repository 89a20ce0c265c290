"""Check command: validate the registry without writing anything"""

import click

from ...exceptions import SolverGenException
from ...registry import SOLVERS, validate_registry
from ..utils import fail


@click.command()
def check():
    """Validate constructor shapes of every registered solver."""
    try:
        validate_registry(SOLVERS)
    except SolverGenException as e:
        fail(e)
    click.echo(f"All {len(SOLVERS)} solver bindings are valid")
