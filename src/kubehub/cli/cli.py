import logging
from pathlib import Path

import click

from kubehub.cli.commands.copy import copy_cmd
from kubehub.cli.commands.dash import dash_cmd
from kubehub.cli.commands.list_cmd import list_cmd
from kubehub.cli.commands.show import show_cmd
from kubehub.config import DEFAULT_CONFIG_DIR, ConfigError, load_config
from kubehub.context import KubeHubContext

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="kubehub")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_DIR,
    show_default=True,
    help="Directory containing config.toml",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: Path) -> None:
    """Browse Kubernetes distributions and their installation scripts."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            config = load_config(config_dir)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e
        ctx.obj = KubeHubContext.for_production(config)


cli.add_command(copy_cmd)
cli.add_command(dash_cmd)
cli.add_command(list_cmd)
cli.add_command(show_cmd)


def main() -> None:
    """CLI entry point used by the `kubehub` console script."""
    cli()
