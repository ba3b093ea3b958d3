"""kubehub CLI entry point.

This package provides a Textual dashboard and a Click-based CLI for browsing
Kubernetes distributions and copying their installation scripts. See
`kubehub --help` for details.
"""

from kubehub.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `kubehub` console script."""
    cli()
