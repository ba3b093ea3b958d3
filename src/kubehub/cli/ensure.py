"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TypeVar

import click

from kubehub.catalog.store import CatalogStore
from kubehub.catalog.types import DistributionEntry
from kubehub.cli.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | None` and returns `T`.

        Args:
            value: Value to check
            error_message: Error message to display if value is None.
                          "Error: " prefix will be added automatically in red.

        Returns:
            The value unchanged if not None

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def known_entry(store: CatalogStore, entry_id: str) -> DistributionEntry:
        """Look up a distribution by id, exiting with a hint if it is unknown.

        Args:
            store: Catalog to search
            entry_id: Id supplied on the command line

        Returns:
            The matching entry

        Raises:
            SystemExit: If no entry has this id (with exit code 1)
        """
        return Ensure.not_none(
            store.get_entry(entry_id),
            f"Unknown distribution '{entry_id}'. Run 'kubehub list' to see available ids.",
        )
