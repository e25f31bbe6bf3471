"""System clipboard integration.

Posts are plain text (styling lives in the glyphs themselves), so a plain
text clipboard is all the composer needs on every platform.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Raised when the system clipboard cannot be used."""


class ClipboardManager:
    """Copies and pastes plain text through pyperclip."""

    @staticmethod
    def copy_text(text: str) -> None:
        """Copy text to the system clipboard.

        Args:
            text: Text to copy, newlines included.

        Raises:
            ClipboardError: If no clipboard mechanism is available.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Could not copy to clipboard: {e}")
            raise ClipboardError(str(e)) from e

    @staticmethod
    def paste_text() -> str:
        """Return the clipboard contents as text.

        Raises:
            ClipboardError: If no clipboard mechanism is available.
        """
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.warning(f"Could not read clipboard: {e}")
            raise ClipboardError(str(e)) from e
        return content or ""
