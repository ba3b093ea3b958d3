"""Command to print a distribution's installation guide."""

import click

from kubehub.catalog.display import numbered_prerequisites
from kubehub.cli.ensure import Ensure
from kubehub.cli.output import machine_output
from kubehub.context import KubeHubContext


@click.command("show")
@click.argument("entry_id", metavar="ID")
@click.pass_obj
def show_cmd(ctx: KubeHubContext, entry_id: str) -> None:
    """Show description, prerequisites and script for ID.

    The script is printed on its own line, exactly as stored.

    Examples:
        kubehub show k3s
    """
    entry = Ensure.known_entry(ctx.store, entry_id)

    machine_output(click.style(entry.name, bold=True))
    machine_output(entry.description)
    machine_output()
    machine_output(click.style("Prerequisites:", bold=True))
    if entry.prerequisites:
        for line in numbered_prerequisites(entry):
            machine_output(f"  {line}")
    else:
        machine_output("  (none)")
    machine_output()
    machine_output(click.style("Installation script:", bold=True))
    machine_output(entry.script)
