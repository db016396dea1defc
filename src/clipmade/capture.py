"""Hotkey-driven clipboard capture.

The pynput listener thread calls ``capture`` whenever Alt+C is pressed. The
only state it shares with the UI thread is the history store and the change
signal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clipmade.errors import HotkeyRegistrationError, StorageWriteError

if TYPE_CHECKING:
    from clipmade.change_signal import ChangeSignal
    from clipmade.clipboard import Clipboard
    from clipmade.debug_log import DebugLogger
    from clipmade.history import HistoryStore

HOTKEY = "<alt>+c"


class CaptureListener:
    def __init__(self, store: "HistoryStore", clipboard: "Clipboard",
                 signal: "ChangeSignal", debug_logger: "DebugLogger | None" = None):
        self.store = store
        self.clipboard = clipboard
        self.signal = signal
        self.debug_logger = debug_logger
        self.failure: StorageWriteError | None = None
        self._listener = None

    def start(self):
        """Register the global hotkey and start the listener thread.

        Raises:
            HotkeyRegistrationError: If the listener cannot be started.
        """
        try:
            # pynput picks its backend at import time and fails without a display
            from pynput import keyboard

            listener = keyboard.GlobalHotKeys({HOTKEY: self._on_hotkey})
            listener.start()
            listener.wait()
        except Exception as e:
            raise HotkeyRegistrationError(f"Cannot register {HOTKEY}: {e}") from e
        if not listener.is_alive():
            raise HotkeyRegistrationError(f"Hotkey listener for {HOTKEY} exited at startup")
        self._listener = listener
        if self.debug_logger:
            self.debug_logger.log("HOTKEY", HOTKEY)

    def stop(self):
        if self._listener is not None:
            self._listener.stop()
            self._listener = None

    def _on_hotkey(self):
        try:
            self.capture()
        except StorageWriteError:
            # Recorded in capture(); the UI thread re-raises it
            pass

    def capture(self) -> bool:
        """Copy the current clipboard text into history.

        Returns True when a new entry was stored. Unreadable or empty
        clipboard contents are dropped. A storage failure is recorded in
        ``failure``, wakes the UI and stops the listener before propagating.
        """
        text = self.clipboard.get_text()
        if text is None:
            if self.debug_logger:
                self.debug_logger.log("DROP", "no clipboard text")
            return False
        try:
            accepted = self.store.push(text)
        except StorageWriteError as e:
            self.failure = e
            if self.debug_logger:
                self.debug_logger.log("FATAL", str(e))
            self.signal.set()
            self.stop()
            raise
        if self.debug_logger:
            self.debug_logger.log_capture(text, accepted)
        self.signal.set()
        return accepted

    def raise_if_failed(self):
        if self.failure is not None:
            raise self.failure
