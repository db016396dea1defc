from clipmade.input_buffer import InputBuffer


class TestInsert:
    def test_empty_initial_state(self):
        buf = InputBuffer()
        assert buf.text == ""
        assert buf.cursor == 0

    def test_initial_text_puts_cursor_at_end(self):
        buf = InputBuffer("北京")
        assert buf.cursor == 2

    def test_insert_at_middle(self):
        buf = InputBuffer("ac")
        buf.move_left()
        buf.insert("b")
        assert buf.text == "abc"
        assert buf.cursor == 2

    def test_insert_han_advances_one(self):
        buf = InputBuffer()
        buf.insert("北")
        buf.insert("京")
        assert buf.text == "北京"
        assert buf.cursor == 2

    def test_insert_between_han(self):
        buf = InputBuffer("北京")
        buf.move_left()
        buf.insert("x")
        assert buf.text == "北x京"
        assert buf.cursor == 2


class TestBackspaceDelete:
    def test_backspace_at_start_is_noop(self):
        buf = InputBuffer("abc")
        buf.move_home()
        assert not buf.backspace()
        assert buf.text == "abc"
        assert buf.cursor == 0

    def test_backspace_han(self):
        buf = InputBuffer("我爱北京")
        assert buf.backspace()
        assert buf.text == "我爱北"
        assert buf.cursor == 3

    def test_backspace_middle_multibyte(self):
        buf = InputBuffer("é北ü")
        buf.move_left()
        buf.backspace()
        assert buf.text == "éü"
        assert buf.cursor == 1

    def test_delete_at_end_is_noop(self):
        buf = InputBuffer("abc")
        assert not buf.delete()
        assert buf.text == "abc"

    def test_delete_under_cursor(self):
        buf = InputBuffer("北京")
        buf.move_home()
        assert buf.delete()
        assert buf.text == "京"
        assert buf.cursor == 0

    def test_backspace_empty(self):
        buf = InputBuffer()
        assert not buf.backspace()
        assert buf.text == ""


class TestCursorBounds:
    def test_left_clamps_at_zero(self):
        buf = InputBuffer("ab")
        for _ in range(5):
            buf.move_left()
        assert buf.cursor == 0

    def test_right_clamps_at_length(self):
        buf = InputBuffer("北京")
        buf.move_home()
        for _ in range(5):
            buf.move_right()
        assert buf.cursor == 2

    def test_home_end(self):
        buf = InputBuffer("hello")
        buf.move_home()
        assert buf.cursor == 0
        buf.move_end()
        assert buf.cursor == 5

    def test_random_walk_stays_in_bounds(self):
        buf = InputBuffer("北京abc")
        moves = [buf.move_left, buf.move_right, buf.move_left, buf.move_left,
                 buf.move_right, buf.move_right, buf.move_right, buf.move_right]
        for move in moves * 3:
            move()
            assert 0 <= buf.cursor <= len(buf.text)


class TestKill:
    def test_kill_word_back(self):
        buf = InputBuffer("hello world")
        assert buf.kill_word_back()
        assert buf.text == "hello "
        assert buf.cursor == 6

    def test_kill_word_back_at_start(self):
        buf = InputBuffer("hello")
        buf.move_home()
        assert not buf.kill_word_back()
        assert buf.text == "hello"

    def test_kill_word_back_trailing_space(self):
        buf = InputBuffer("foo bar  ")
        buf.kill_word_back()
        assert buf.text == "foo "

    def test_kill_to_start(self):
        buf = InputBuffer("hello world")
        for _ in range(5):
            buf.move_left()
        assert buf.kill_to_start()
        assert buf.text == "world"
        assert buf.cursor == 0

    def test_kill_to_start_at_start(self):
        buf = InputBuffer("abc")
        buf.move_home()
        assert not buf.kill_to_start()
        assert buf.text == "abc"


class TestSetTextAndClear:
    def test_set_text(self):
        buf = InputBuffer()
        buf.set_text("hello")
        assert buf.text == "hello"
        assert buf.cursor == 5

    def test_clear_returns_text(self):
        buf = InputBuffer("hello")
        assert buf.clear() == "hello"
        assert buf.text == ""
        assert buf.cursor == 0
