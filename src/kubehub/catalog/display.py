"""Pure formatting helpers shared by the TUI and the CLI."""

from kubehub.catalog.types import DistributionEntry


def numbered_prerequisites(entry: DistributionEntry) -> list[str]:
    """Number prerequisites from 1 in stored order.

    Args:
        entry: Entry whose prerequisites to format

    Returns:
        Lines like "1. Linux operating system", one per prerequisite
    """
    return [f"{index}. {prerequisite}" for index, prerequisite in enumerate(entry.prerequisites, 1)]


def summarize_description(description: str, width: int) -> str:
    """Flow a description onto one line and truncate it to width.

    Args:
        description: Free-text description, possibly multi-line
        width: Maximum length of the result (at least 4)

    Returns:
        Single-line text, ending in "..." if it was truncated
    """
    flowed = " ".join(description.split())
    if len(flowed) <= width:
        return flowed
    return flowed[: width - 3].rstrip() + "..."
