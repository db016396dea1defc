"""Refuse to start while another clipmade process is running.

Two instances would both grab the global hotkey and both rewrite the history
file. The guard holds an exclusive OS lock on a file for as long as the
process lives; the OS drops it when the process exits, even on a crash.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from clipmade.errors import AlreadyRunningError

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl


class SingleInstance:
    def __init__(self, lock_path: str | Path):
        self.lock_path = Path(lock_path)
        self._fd: int | None = None

    def acquire(self):
        """Take the lock.

        Raises:
            AlreadyRunningError: If another process holds it.
        """
        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.lock_path, os.O_RDWR | os.O_CREAT, 0o644)
        try:
            if sys.platform == "win32":
                msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)
            else:
                fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError as e:
            os.close(fd)
            raise AlreadyRunningError(
                f"Another clipmade instance is already running (lock: {self.lock_path})"
            ) from e
        os.ftruncate(fd, 0)
        os.write(fd, f"{os.getpid()}\n".encode())
        self._fd = fd

    def release(self):
        if self._fd is None:
            return
        try:
            if sys.platform == "win32":
                os.lseek(self._fd, 0, os.SEEK_SET)
                msvcrt.locking(self._fd, msvcrt.LK_UNLCK, 1)
            else:
                fcntl.flock(self._fd, fcntl.LOCK_UN)
        finally:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> "SingleInstance":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
