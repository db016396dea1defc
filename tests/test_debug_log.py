from clipmade.debug_log import DebugLogger
from clipmade.types import one_line


class TestOneLine:
    def test_escapes_newlines(self):
        assert one_line("a\nb\r\nc") == "a\\nb\\r\\nc"

    def test_tabs_become_spaces(self):
        assert one_line("a\tb") == "a b"

    def test_control_characters_escaped(self):
        assert one_line("a\x00b") == "a\\x00b"
        assert one_line("\x1b[31mred\x07") == "\\x1b[31mred\\x07"
        assert one_line("del\x7f") == "del\\x7f"

    def test_escaped_text_is_printable(self):
        assert one_line("x\x00\x01\x1f\x85y").isprintable()

    def test_truncates(self):
        assert one_line("abcdef", 4) == "abc…"
        assert one_line("abc", 4) == "abc"


class TestDebugLogger:
    def test_disabled_by_default(self, tmp_path):
        path = tmp_path / "debug.log"
        logger = DebugLogger(str(path))
        logger.log("CAPTURE", "hello")
        assert not path.exists()

    def test_writes_events(self, tmp_path):
        path = tmp_path / "debug.log"
        logger = DebugLogger(str(path))
        logger.start()
        logger.log_capture("hello\nworld", accepted=True)
        logger.log_capture("hello", accepted=False)
        logger.log_commit("hello")
        logger.stop()
        text = path.read_text(encoding="utf-8")
        assert "Session started" in text
        assert "CAPTURE | hello\\nworld" in text
        assert "DUP | hello" in text
        assert "COMMIT | hello" in text

    def test_log_after_stop_is_noop(self, tmp_path):
        path = tmp_path / "debug.log"
        logger = DebugLogger(str(path))
        logger.start()
        logger.stop()
        size = path.stat().st_size
        logger.log("LATE", "x")
        assert path.stat().st_size == size
