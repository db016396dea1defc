from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from clipmade.errors import ClipboardError
from clipmade.types import one_line
from clipmade.ui import KeyAction, handle_key, init_colors, render

if TYPE_CHECKING:
    from clipmade.capture import CaptureListener
    from clipmade.change_signal import ChangeSignal
    from clipmade.clipboard import Clipboard
    from clipmade.config import Config
    from clipmade.debug_log import DebugLogger
    from clipmade.history import HistoryStore
    from clipmade.search import SearchEngine

HELP_STATUS = "Alt+C capture | Enter copy | Up/Down select | Esc clear/quit"


def poll_once(store: "HistoryStore", engine: "SearchEngine", signal: "ChangeSignal",
              listener: "CaptureListener", logger: "DebugLogger") -> bool:
    """Pick up captures made since the last poll.

    Re-raises a storage failure from the capture thread. Returns True when
    the engine was refreshed.
    """
    listener.raise_if_failed()
    if not signal.consume():
        return False
    engine.refresh(store.snapshot())
    logger.log("REFRESH", f"{len(engine.entries)} entries, {len(engine.filtered)} shown")
    return True


def commit_selection(engine: "SearchEngine", clipboard: "Clipboard",
                     logger: "DebugLogger") -> str | None:
    """Copy the selected entry and return the status line to show, if any."""
    try:
        text = engine.commit(clipboard)
    except ClipboardError as e:
        logger.log("COPYFAIL", str(e))
        return f"Copy failed: {e}"
    if text is None:
        return None
    logger.log_commit(text)
    return f"Copied: {one_line(text, 60)}"


def run_ui(stdscr, store: "HistoryStore", engine: "SearchEngine", clipboard: "Clipboard",
           signal: "ChangeSignal", listener: "CaptureListener", config: "Config",
           logger: "DebugLogger"):
    try:
        curses.curs_set(1)
    except curses.error:
        pass
    stdscr.keypad(True)
    stdscr.timeout(config.ui.poll_interval_ms)
    init_colors()

    status = HELP_STATUS
    try:
        while True:
            poll_once(store, engine, signal, listener, logger)
            render(stdscr, engine.view(), status, config.ui)

            # get_wch blocks up to poll_interval_ms via timeout()
            try:
                key = stdscr.get_wch()
            except curses.error:
                continue
            if key == curses.KEY_RESIZE:
                continue

            action = handle_key(engine, key)
            if action is KeyAction.QUIT:
                return
            if action is KeyAction.COMMIT:
                message = commit_selection(engine, clipboard, logger)
                if message is not None:
                    status = message
    except KeyboardInterrupt:
        return
