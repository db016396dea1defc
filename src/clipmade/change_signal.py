import threading


class ChangeSignal:
    """Level-triggered dirty flag shared between the capture and UI threads.

    Any number of ``set()`` calls between two ``consume()`` calls collapse
    into a single True.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._dirty = False

    def set(self):
        with self._lock:
            self._dirty = True

    def consume(self) -> bool:
        """Clear the flag and return whether it was set."""
        with self._lock:
            dirty, self._dirty = self._dirty, False
        return dirty

    def is_set(self) -> bool:
        with self._lock:
            return self._dirty
