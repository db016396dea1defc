"""Deduplicated clipboard history persisted to a YAML file.

The store is write-through: every accepted ``push`` is on disk before the
call returns. A history file that is missing or cannot be parsed is replaced
by an empty one at load time.
"""

from __future__ import annotations

import os
import tempfile
import threading
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from clipmade.errors import StorageWriteError

if TYPE_CHECKING:
    from clipmade.debug_log import DebugLogger


class HistoryStore:
    """Ordered, de-duplicated list of captured clipboard texts."""

    def __init__(self, path: str | Path, texts: list[str] | None = None):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._texts: list[str] = []
        self._seen: set[str] = set()
        for text in texts or ():
            text = text.strip()
            if text and text not in self._seen:
                self._texts.append(text)
                self._seen.add(text)

    @classmethod
    def load(cls, path: str | Path, debug_logger: "DebugLogger | None" = None) -> "HistoryStore":
        """Load the history file, resetting it to empty if absent or unparsable.

        Raises:
            StorageWriteError: If the empty baseline cannot be written.
        """
        path = Path(path)
        texts = _read_texts(path)
        if texts is None:
            store = cls(path)
            if debug_logger:
                debug_logger.log("RESET", str(path))
            store.save()
            return store
        store = cls(path, texts)
        if debug_logger:
            debug_logger.log("LOAD", f"{len(store)} entries from {path}")
        return store

    @property
    def entries(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._texts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._texts)

    def __contains__(self, text: object) -> bool:
        with self._lock:
            return text in self._seen

    def snapshot(self) -> list[str]:
        """Return a copy of the entries; filtering works on the copy."""
        with self._lock:
            return list(self._texts)

    def push(self, text: str) -> bool:
        """Append trimmed text unless blank or already present.

        Returns True when the entry was added and persisted. A failed write
        rolls the append back and raises StorageWriteError.
        """
        text = text.strip()
        if not text:
            return False
        with self._lock:
            if text in self._seen:
                return False
            self._texts.append(text)
            self._seen.add(text)
            try:
                self._write()
            except StorageWriteError:
                self._texts.pop()
                self._seen.discard(text)
                raise
        return True

    def save(self):
        """Overwrite the history file with the current entries."""
        with self._lock:
            self._write()

    def _write(self):
        # Caller holds the lock
        data = yaml.safe_dump(
            {"texts": list(self._texts)},
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
            raise StorageWriteError(f"Cannot write history file {self.path}: {e}") from e


def _read_texts(path: Path) -> list[str] | None:
    """Read the text list from a history file, or None if it is unusable."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return None
    if not isinstance(data, dict):
        return None
    texts = data.get("texts")
    if texts is None:
        return []
    if not isinstance(texts, list):
        return None
    return [str(t) for t in texts if t is not None]
