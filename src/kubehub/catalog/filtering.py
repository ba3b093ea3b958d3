"""Pure filtering logic for the catalog."""

from kubehub.catalog.types import DistributionEntry


def filter_entries(
    entries: tuple[DistributionEntry, ...], query: str
) -> tuple[DistributionEntry, ...]:
    """Filter entries by query matching id, name, or description.

    Case-insensitive substring matching. Catalog order is preserved.

    Args:
        entries: Entries to filter
        query: Search query string

    Returns:
        Matching entries, or all entries if query is empty
    """
    if not query:
        return entries

    query_lower = query.lower()
    result: list[DistributionEntry] = []

    for entry in entries:
        if query_lower in entry.id.lower():
            result.append(entry)
            continue

        if query_lower in entry.name.lower():
            result.append(entry)
            continue

        if query_lower in entry.description.lower():
            result.append(entry)

    return tuple(result)
