"""List the solver integrations bindings are generated for"""

import click

from ...registry import SOLVERS, qualified_name


@click.command(name="list-solvers")
@click.option("--verbose", "-v", is_flag=True, help="Show qualified names and backend availability")
def list_solvers(verbose: bool):
    """List registered solver integrations in emission order."""
    click.echo("=== Solvers ===")
    for entry in SOLVERS:
        if not verbose:
            click.echo(f"  - {entry.kind_name}")
            continue
        available = "Yes" if entry.solver_type.is_available() else "No"
        click.echo(f"  - {entry.kind_name}")
        click.echo(f"      Solver: {qualified_name(entry.solver_type)}")
        click.echo(f"      Configuration: {qualified_name(entry.config_type)}")
        click.echo(f"      Backend: {entry.solver_type.backend_module} (installed: {available})")
