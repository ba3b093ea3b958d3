"""Fake Clipboard implementation for testing.

FakeClipboard is an in-memory implementation that captures copied text
without touching the system clipboard, enabling fast and predictable tests.
"""

from kubehub.integrations.clipboard.abc import Clipboard


class FakeClipboard(Clipboard):
    """In-memory fake that records every copy.

    Construct with available=False to simulate a host that rejects writes.
    """

    def __init__(self, *, available: bool = True) -> None:
        """Create FakeClipboard with empty copy tracking.

        Args:
            available: Whether copy() should report success
        """
        self._available = available
        self._copied: list[str] = []

    def copy(self, text: str) -> bool:
        """Capture text; succeed only when available.

        Args:
            text: The text that would have been copied
        """
        self._copied.append(text)
        return self._available

    @property
    def copied(self) -> list[str]:
        """Every string passed to copy(), in order.

        This property is for test assertions only.
        """
        return self._copied

    @property
    def last_copied(self) -> str | None:
        """The most recent string passed to copy(), or None."""
        if not self._copied:
            return None
        return self._copied[-1]
