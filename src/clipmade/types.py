from __future__ import annotations

import re
import time

# C0 and C1 controls other than tab/newline/CR; curses rejects NUL and draws
# the rest as two-cell ^X sequences
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)


def one_line(text: str, max_len: int | None = None) -> str:
    # Entries can span lines; list rows and log lines need a single line
    s = text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", " ")
    s = _CONTROL_RE.sub(lambda m: f"\\x{ord(m.group()):02x}", s)
    if max_len is not None and len(s) > max_len:
        s = s[: max(0, max_len - 1)] + "\u2026"
    return s
