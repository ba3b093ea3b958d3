"""Output helpers that make the destination of each line explicit.

user_output goes to stderr (status, errors, hints); machine_output goes to
stdout (catalog data a user may pipe or redirect).
"""

import click


def user_output(message: str = "") -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write data to stdout."""
    click.echo(message)
