"""Clipboard abstraction for testability.

This module provides an ABC for writing text to the system clipboard so
copy actions can be tested without touching the real clipboard.
"""

from abc import ABC, abstractmethod


class Clipboard(ABC):
    """Abstract interface for clipboard writes."""

    @abstractmethod
    def copy(self, text: str) -> bool:
        """Copy text to the clipboard.

        Args:
            text: Text to copy, written verbatim

        Returns:
            True if the write succeeded, False if the host rejected it
        """
        ...
