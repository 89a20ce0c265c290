"""Generate command: writes SolverUtils.py for a target package"""

import click

from ...emitter import write_solver_utils
from ...exceptions import SolverGenException
from ..utils import fail, setup_logging


def run_generate(output_dir: str, package_name: str) -> None:
    try:
        path = write_solver_utils(output_dir, package_name)
    except SolverGenException as e:
        fail(e)
    click.echo(f"Bindings written to {path}")


@click.command()
@click.argument("output_dir", type=click.Path(file_okay=False))
@click.argument("package_name")
def generate(output_dir: str, package_name: str):
    """Generate solver bindings into OUTPUT_DIR for package PACKAGE_NAME."""
    run_generate(output_dir, package_name)


@click.command()
@click.argument("output_dir", type=click.Path(file_okay=False))
@click.argument("package_name")
def main(output_dir: str, package_name: str):
    """Generate solver bindings into OUTPUT_DIR for package PACKAGE_NAME."""
    setup_logging()
    run_generate(output_dir, package_name)


if __name__ == "__main__":
    main()
