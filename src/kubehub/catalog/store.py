"""Catalog store abstraction.

The catalog is read-only process-wide state: the production store wraps the
static table built at import time, and tests inject their own entries.
"""

import logging
from abc import ABC, abstractmethod

from kubehub.catalog.data import KUBERNETES_DISTRIBUTIONS
from kubehub.catalog.types import DistributionEntry

logger = logging.getLogger(__name__)


class DuplicateEntryError(ValueError):
    """Raised when a catalog table contains the same id twice."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Duplicate distribution id in catalog: {entry_id!r}")
        self.entry_id = entry_id


class CatalogStore(ABC):
    """Abstract interface for reading the distribution catalog."""

    @abstractmethod
    def list_all(self) -> tuple[DistributionEntry, ...]:
        """Return every entry in catalog order.

        Pure and deterministic: repeated calls return the same sequence.
        """
        ...

    def get_entry(self, entry_id: str) -> DistributionEntry | None:
        """Look up an entry by id.

        Args:
            entry_id: Identifier to look up

        Returns:
            The matching entry, or None if no entry has this id
        """
        for entry in self.list_all():
            if entry.id == entry_id:
                return entry
        return None


class StaticCatalogStore(CatalogStore):
    """Production store over a fixed tuple of entries."""

    def __init__(
        self, entries: tuple[DistributionEntry, ...] = KUBERNETES_DISTRIBUTIONS
    ) -> None:
        """Validate and hold the catalog table.

        Args:
            entries: Catalog table, defaults to the built-in distributions

        Raises:
            DuplicateEntryError: If two entries share an id
        """
        seen: set[str] = set()
        for entry in entries:
            if entry.id in seen:
                raise DuplicateEntryError(entry.id)
            seen.add(entry.id)
        self._entries = tuple(entries)
        logger.debug("Loaded catalog with %d distributions", len(self._entries))

    def list_all(self) -> tuple[DistributionEntry, ...]:
        return self._entries
