"""Fake catalog store for testing views and commands."""

from kubehub.catalog.store import CatalogStore
from kubehub.catalog.types import DistributionEntry


class FakeCatalogStore(CatalogStore):
    """Fake implementation of CatalogStore returning canned entries.

    Unlike StaticCatalogStore it does not validate ids, so tests can build
    tables that break invariants on purpose.
    """

    def __init__(self, entries: tuple[DistributionEntry, ...] = ()) -> None:
        self._entries = tuple(entries)
        self._list_count = 0

    def list_all(self) -> tuple[DistributionEntry, ...]:
        self._list_count += 1
        return self._entries

    @property
    def list_count(self) -> int:
        """Number of times list_all was called."""
        return self._list_count


def make_entry(
    entry_id: str,
    name: str | None = None,
    *,
    description: str = "A Kubernetes distribution.",
    prerequisites: tuple[str, ...] = ("Docker installed",),
    script: str = "echo install",
) -> DistributionEntry:
    """Create a DistributionEntry for testing with sensible defaults.

    Args:
        entry_id: Entry id
        name: Display name, defaults to the id
        description: Description text
        prerequisites: Prerequisites in display order
        script: Installation script

    Returns:
        DistributionEntry populated with test data
    """
    return DistributionEntry(
        id=entry_id,
        name=name if name is not None else entry_id,
        description=description,
        prerequisites=prerequisites,
        script=script,
    )
