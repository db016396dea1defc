import threading

from clipmade.change_signal import ChangeSignal


class TestChangeSignal:
    def test_initially_clear(self):
        signal = ChangeSignal()
        assert not signal.is_set()
        assert not signal.consume()

    def test_consume_clears(self):
        signal = ChangeSignal()
        signal.set()
        assert signal.is_set()
        assert signal.consume()
        assert not signal.is_set()
        assert not signal.consume()

    def test_many_sets_collapse(self):
        signal = ChangeSignal()
        for _ in range(5):
            signal.set()
        assert signal.consume()
        assert not signal.consume()

    def test_set_from_threads(self):
        signal = ChangeSignal()
        threads = [threading.Thread(target=signal.set) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert signal.consume()
        assert not signal.consume()
