class InputBuffer:
    """Editable query text with a cursor counted in code points.

    Every position is a ``str`` index, so multi-byte characters such as
    Han text occupy exactly one cursor step.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._cursor = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def insert(self, ch: str):
        """Insert text at the cursor and move past it."""
        self._text = self._text[: self._cursor] + ch + self._text[self._cursor :]
        self._cursor += len(ch)

    def backspace(self) -> bool:
        """Remove the character before the cursor. Returns False at the start."""
        if self._cursor == 0:
            return False
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1
        return True

    def delete(self) -> bool:
        """Remove the character under the cursor. Returns False at the end."""
        if self._cursor >= len(self._text):
            return False
        self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]
        return True

    def move_left(self):
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self):
        if self._cursor < len(self._text):
            self._cursor += 1

    def move_home(self):
        self._cursor = 0

    def move_end(self):
        self._cursor = len(self._text)

    def _word_start(self) -> int:
        pos = self._cursor
        while pos > 0 and not self._text[pos - 1].isalnum():
            pos -= 1
        while pos > 0 and self._text[pos - 1].isalnum():
            pos -= 1
        return pos

    def kill_word_back(self) -> bool:
        """Delete back to the start of the previous word (Ctrl+W)."""
        if self._cursor == 0:
            return False
        start = self._word_start()
        self._text = self._text[:start] + self._text[self._cursor :]
        self._cursor = start
        return True

    def kill_to_start(self) -> bool:
        """Delete from the cursor to the start of the line (Ctrl+U)."""
        if self._cursor == 0:
            return False
        self._text = self._text[self._cursor :]
        self._cursor = 0
        return True

    def set_text(self, text: str):
        self._text = text
        self._cursor = len(text)

    def clear(self) -> str:
        """Empty the buffer and return what it held."""
        text = self._text
        self._text = ""
        self._cursor = 0
        return text
