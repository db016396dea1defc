"""Search and selection state behind the history UI.

``SearchEngine`` owns the query, its cursor, the filtered list of entry
indices and the selected position. Every edit rebuilds the filter from
scratch and puts the selection back on the first result. Rendering works
from ``SearchView`` snapshots and never touches the engine directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from clipmade.input_buffer import InputBuffer
from clipmade.matcher import matches


class TextSink(Protocol):
    def set_text(self, text: str): ...


@dataclass(frozen=True)
class SearchView:
    query: str
    cursor: int
    results: tuple[str, ...]
    selected: int | None
    total: int


class SearchEngine:
    def __init__(self, entries: Iterable[str] = (), phonetic: bool = True):
        self.phonetic = phonetic
        self._entries: list[str] = list(entries)
        self._buf = InputBuffer()
        self.filtered: list[int] = []
        self.selected: int | None = None

    @property
    def query(self) -> str:
        return self._buf.text

    @property
    def cursor(self) -> int:
        return self._buf.cursor

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    # --- Query editing ---

    def insert_char(self, ch: str):
        self._buf.insert(ch)
        self.rebuild()

    def backspace(self):
        if self._buf.backspace():
            self.rebuild()

    def delete(self):
        if self._buf.delete():
            self.rebuild()

    def kill_word_back(self):
        if self._buf.kill_word_back():
            self.rebuild()

    def kill_to_start(self):
        if self._buf.kill_to_start():
            self.rebuild()

    def move_left(self):
        self._buf.move_left()

    def move_right(self):
        self._buf.move_right()

    def move_home(self):
        self._buf.move_home()

    def move_end(self):
        self._buf.move_end()

    def cancel(self) -> bool:
        """Clear a non-blank query; return True if the query was already blank."""
        if not self._buf.text.strip():
            return True
        self._buf.clear()
        self.rebuild()
        return False

    # --- Filtering ---

    def rebuild(self):
        """Recompute the filtered indices and select the first result."""
        q = self._buf.text.strip()
        if not q:
            self.filtered = []
            self.selected = None
            return
        self.filtered = [
            i for i, text in enumerate(self._entries)
            if matches(q, text, phonetic=self.phonetic)
        ]
        self.selected = 0 if self.filtered else None

    def refresh(self, entries: Iterable[str]):
        """Swap in a new entry snapshot after the history changed."""
        self._entries = list(entries)
        self.rebuild()

    # --- Selection ---

    def select_next(self):
        if self.filtered and self.selected is not None:
            self.selected = (self.selected + 1) % len(self.filtered)

    def select_previous(self):
        if self.filtered and self.selected is not None:
            self.selected = (self.selected - 1) % len(self.filtered)

    def select_first(self):
        if self.filtered:
            self.selected = 0

    def select_last(self):
        if self.filtered:
            self.selected = len(self.filtered) - 1

    def selected_text(self) -> str | None:
        if self.selected is None or not self.filtered:
            return None
        return self._entries[self.filtered[self.selected]]

    def commit(self, clipboard: TextSink) -> str | None:
        """Copy the selected entry to ``clipboard``.

        Returns the copied text, or None when nothing is selected. Clipboard
        errors propagate to the caller.
        """
        text = self.selected_text()
        if text is None:
            return None
        clipboard.set_text(text)
        return text

    def view(self) -> SearchView:
        return SearchView(
            query=self._buf.text,
            cursor=self._buf.cursor,
            results=tuple(self._entries[i] for i in self.filtered),
            selected=self.selected,
            total=len(self._entries),
        )
