"""System clipboard access through pyperclip."""

from __future__ import annotations

import pyperclip

from clipmade.errors import ClipboardError, ClipboardUnavailableError


class Clipboard:
    """Text-only view of the system clipboard."""

    @classmethod
    def create(cls) -> "Clipboard":
        """Return a clipboard after checking that pyperclip can reach one.

        Raises:
            ClipboardUnavailableError: If no copy/paste mechanism is installed.
        """
        try:
            pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(f"No clipboard available: {e}") from e
        return cls()

    def get_text(self) -> str | None:
        """Current clipboard text, or None if it is empty or unreadable."""
        try:
            text = pyperclip.paste()
        except (pyperclip.PyperclipException, OSError, UnicodeError):
            # Undecodable bytes or a broken xclip/xsel helper drop this read only
            return None
        if not isinstance(text, str) or not text:
            return None
        return text

    def set_text(self, text: str):
        try:
            pyperclip.copy(text)
        except (pyperclip.PyperclipException, OSError) as e:
            raise ClipboardError(f"Cannot write clipboard: {e}") from e
