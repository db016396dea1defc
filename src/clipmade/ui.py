from __future__ import annotations

import curses
import enum
import unicodedata
from typing import TYPE_CHECKING

from clipmade.types import one_line

if TYPE_CHECKING:
    from clipmade.config import UIConfig
    from clipmade.search import SearchEngine, SearchView

# Color pair ids
PAIR_ROW_EVEN = 1
PAIR_ROW_ODD = 2
PAIR_HIGHLIGHT = 3

# Backgrounds from the xterm 256-color grayscale ramp
_GRAY_EVEN = 235
_GRAY_ODD = 237
_GRAY_HIGHLIGHT = 240


class KeyAction(enum.Enum):
    NONE = "none"
    COMMIT = "commit"
    QUIT = "quit"


def init_colors():
    """Set up the row shading pairs; silently falls back to monochrome."""
    try:
        curses.start_color()
        curses.use_default_colors()
    except curses.error:
        return
    if curses.COLORS >= 256:
        backgrounds = (_GRAY_EVEN, _GRAY_ODD, _GRAY_HIGHLIGHT)
    else:
        backgrounds = (-1, curses.COLOR_BLACK, curses.COLOR_BLUE)
    for pair_id, bg in zip((PAIR_ROW_EVEN, PAIR_ROW_ODD, PAIR_HIGHLIGHT), backgrounds):
        try:
            curses.init_pair(pair_id, -1, bg)
        except curses.error:
            pass


def _pair(pair_id: int) -> int:
    if not curses.has_colors():
        return 0
    try:
        return curses.color_pair(pair_id)
    except curses.error:
        return 0


def cell_width(text: str) -> int:
    """Terminal columns taken by text; wide and fullwidth characters use two."""
    return sum(2 if unicodedata.east_asian_width(c) in ("W", "F") else 1 for c in text)


def clip_to_width(text: str, width: int) -> str:
    out = []
    used = 0
    for c in text:
        w = cell_width(c)
        if used + w > width:
            break
        out.append(c)
        used += w
    return "".join(out)


def scroll_offset(selected: int | None, count: int, visible: int) -> int:
    """First result row to show so that the selection stays on screen."""
    if visible <= 0 or count <= visible or selected is None:
        return 0
    return min(max(0, selected - visible + 1), count - visible)


def _put(win, y: int, x: int, text: str, attr: int = 0):
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell raises after drawing
        pass


def _box(stdscr, top: int, height: int, width: int, label: str):
    try:
        win = stdscr.derwin(height, width, top, 0)
        win.box()
    except curses.error:
        return
    _put(win, 0, 2, label, curses.A_BOLD)


def _draw_scrollbar(stdscr, top: int, visible: int, x: int, offset: int, count: int):
    if count <= visible or visible < 2:
        return
    _put(stdscr, top, x, "↑")
    _put(stdscr, top + visible - 1, x, "↓")
    track = visible - 2
    if track <= 0:
        return
    thumb_len = max(1, track * visible // count)
    max_offset = count - visible
    thumb_top = (track - thumb_len) * offset // max_offset if max_offset else 0
    for i in range(track):
        ch = "█" if thumb_top <= i < thumb_top + thumb_len else "│"
        _put(stdscr, top + 1 + i, x, ch, curses.A_DIM)


def render(stdscr, view: "SearchView", status: str, config: "UIConfig"):
    """Draw one frame from a search snapshot."""
    stdscr.erase()
    h, w = stdscr.getmaxyx()
    if h < 8 or w < 20:
        _put(stdscr, 0, 0, clip_to_width("Terminal too small", w - 1))
        stdscr.refresh()
        return

    # Header
    title = clip_to_width(one_line(config.title), w - 2)
    _put(stdscr, 0, max(0, (w - cell_width(title)) // 2), title, curses.A_BOLD)

    # Results box fills everything between the header and the search box
    list_top = 1
    list_h = h - 5
    _box(stdscr, list_top, list_h, w, f" results {len(view.results)}/{view.total} ")
    visible = list_h - 2
    inner_w = w - 4
    offset = scroll_offset(view.selected, len(view.results), visible)
    for row, idx in enumerate(range(offset, min(len(view.results), offset + visible))):
        y = list_top + 1 + row
        is_sel = idx == view.selected
        marker = ">" if is_sel else " "
        line = clip_to_width(f"{marker} {one_line(view.results[idx])}", inner_w)
        line += " " * max(0, inner_w - cell_width(line))
        if is_sel:
            attr = _pair(PAIR_HIGHLIGHT) | curses.A_BOLD
            if not curses.has_colors():
                attr |= curses.A_REVERSE
        elif config.zebra:
            attr = _pair(PAIR_ROW_ODD if idx % 2 else PAIR_ROW_EVEN)
        else:
            attr = 0
        _put(stdscr, y, 1, line, attr)
    _draw_scrollbar(stdscr, list_top + 1, visible, w - 2, offset, len(view.results))

    # Search box, query centered
    search_top = h - 4
    _box(stdscr, search_top, 3, w, " search ")
    query = one_line(view.query)
    query_w = cell_width(query)
    if query_w <= w - 4:
        qx = 2 + (w - 4 - query_w) // 2
        shown = query
        cursor_x = qx + cell_width(one_line(view.query[: view.cursor]))
    else:
        # Keep the cursor end visible when the query is wider than the box
        shown = clip_to_width(one_line(view.query[: view.cursor])[::-1], w - 5)[::-1]
        qx = 2
        cursor_x = qx + cell_width(shown)
    _put(stdscr, search_top + 1, qx, shown)

    # Status
    _put(stdscr, h - 1, 0, clip_to_width(one_line(status), w - 1), curses.A_DIM)

    try:
        stdscr.move(search_top + 1, min(cursor_x, w - 2))
    except curses.error:
        pass
    stdscr.refresh()


_ESC = 27
_ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
_BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)


def handle_key(engine: "SearchEngine", key: int | str) -> KeyAction:
    """Apply one key from ``get_wch`` to the engine."""
    if isinstance(key, str):
        if len(key) != 1:
            return KeyAction.NONE
        code = ord(key)
        if code >= 32 and code != 127:
            if key.isprintable():
                engine.insert_char(key)
            return KeyAction.NONE
        key = code

    if key == _ESC:
        return KeyAction.QUIT if engine.cancel() else KeyAction.NONE

    if key in _ENTER_KEYS:
        return KeyAction.COMMIT

    if key == curses.KEY_UP:
        engine.select_previous()
    elif key == curses.KEY_DOWN:
        engine.select_next()
    elif key == curses.KEY_HOME:
        engine.select_first()
    elif key == curses.KEY_END:
        engine.select_last()
    elif key == curses.KEY_LEFT:
        engine.move_left()
    elif key == curses.KEY_RIGHT:
        engine.move_right()
    elif key in _BACKSPACE_KEYS:
        engine.backspace()
    elif key == curses.KEY_DC:
        engine.delete()
    # Ctrl+A
    elif key == 1:
        engine.move_home()
    # Ctrl+E
    elif key == 5:
        engine.move_end()
    # Ctrl+W
    elif key == 23:
        engine.kill_word_back()
    # Ctrl+U
    elif key == 21:
        engine.kill_to_start()
    return KeyAction.NONE
