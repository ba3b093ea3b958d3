"""Command to launch the interactive catalog."""

import click

from kubehub.context import KubeHubContext
from kubehub.tui.app import KubeHubApp


@click.command("dash")
@click.pass_obj
def dash_cmd(ctx: KubeHubContext) -> None:
    """Browse distributions in an interactive dashboard.

    Examples:
        kubehub dash
    """
    app = KubeHubApp(store=ctx.store, clipboard=ctx.clipboard, config=ctx.config)
    ctx.tui_runner.run(app)
