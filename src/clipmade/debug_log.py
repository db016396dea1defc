import threading
import time

from clipmade.types import one_line, ts_str

LOG_FILE = "clipmade_debug.log"


class DebugLogger:
    """Optional debug log file shared by the capture and UI threads."""

    def __init__(self, path: str = LOG_FILE):
        self.path = path
        self.enabled = False
        self._fh = None
        self._lock = threading.Lock()

    def start(self):
        self._fh = open(self.path, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        with self._lock:
            self._fh.write(sep)
            self._fh.flush()

    def stop(self):
        self.enabled = False
        with self._lock:
            if self._fh:
                try:
                    self._fh.close()
                except OSError:
                    pass
            self._fh = None

    def log(self, kind: str, text: str = ""):
        if not self.enabled or not self._fh:
            return
        with self._lock:
            if self._fh is None:
                return
            self._fh.write(f"{ts_str(time.time())} {kind:>8} | {one_line(text, 120)}\n")
            self._fh.flush()

    def log_capture(self, text: str, accepted: bool):
        self.log("CAPTURE" if accepted else "DUP", text)

    def log_commit(self, text: str):
        self.log("COMMIT", text)
