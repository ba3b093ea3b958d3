"""Real Clipboard implementation using pyperclip.

RealClipboard provides cross-platform clipboard access using pyperclip,
which handles xclip/xsel on Linux, pbcopy on macOS, etc.
"""

import logging

from kubehub.integrations.clipboard.abc import Clipboard

logger = logging.getLogger(__name__)


class RealClipboard(Clipboard):
    """Production implementation using pyperclip for clipboard access."""

    def copy(self, text: str) -> bool:
        """Copy text to clipboard using pyperclip.

        Args:
            text: Text to copy to clipboard

        Returns:
            True if copy succeeded, False if clipboard unavailable
            (e.g., in headless/SSH environments)
        """
        # Inline import: pyperclip is only needed for real clipboard operations
        import pyperclip

        # pyperclip picks its backend on first use and raises when none exists
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.debug("Clipboard write rejected: %s", e)
            return False
        return True
