"""Command to copy a distribution's installation script."""

import logging

import click

from kubehub.cli.ensure import Ensure
from kubehub.cli.output import machine_output, user_output
from kubehub.context import KubeHubContext

logger = logging.getLogger(__name__)


@click.command("copy")
@click.argument("entry_id", metavar="ID")
@click.pass_obj
def copy_cmd(ctx: KubeHubContext, entry_id: str) -> None:
    """Copy the installation script for ID to the clipboard.

    Copying is best-effort: when no clipboard is available the script is
    printed for manual copy and the command still succeeds.

    Examples:
        kubehub copy k3s
    """
    entry = Ensure.known_entry(ctx.store, entry_id)

    if ctx.clipboard.copy(entry.script):
        user_output(f"Copied {entry.name} installation script to clipboard")
        return

    logger.debug("Clipboard rejected script for %s", entry.id)
    user_output("Clipboard unavailable. Copy manually:")
    machine_output(entry.script)
