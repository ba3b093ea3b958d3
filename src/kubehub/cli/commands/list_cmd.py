"""Command to list distributions."""

import click
from rich.console import Console
from rich.table import Table

from kubehub.catalog.display import summarize_description
from kubehub.catalog.filtering import filter_entries
from kubehub.cli.output import user_output
from kubehub.context import KubeHubContext

# Descriptions are cut to this many characters in the table
DESCRIPTION_WIDTH = 60


@click.command("list")
@click.option("-s", "--search", default="", help="Only show distributions matching this text")
@click.pass_obj
def list_cmd(ctx: KubeHubContext, search: str) -> None:
    """List distributions in catalog order.

    Examples:
        kubehub list
        kubehub list --search docker
    """
    entries = filter_entries(ctx.store.list_all(), search)
    if not entries:
        user_output(f"No distributions match '{search}'")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("id", style="cyan", no_wrap=True)
    table.add_column("name", no_wrap=True)
    table.add_column("description")

    for entry in entries:
        table.add_row(
            entry.id,
            entry.name,
            summarize_description(entry.description, DESCRIPTION_WIDTH),
        )

    Console().print(table)
