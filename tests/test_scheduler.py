"""
Ticker lifetime: the pending timer is always cancelled on the way out.
"""
import pytest

from scheduler import Ticker


class FakeWidget:
    """Stands in for a Tk widget's after/after_cancel pair."""
    def __init__(self):
        self.pending = {}
        self.counter = 0

    def after(self, ms, func):
        self.counter += 1
        id = f"after#{self.counter}"
        self.pending[id] = func
        return id

    def after_cancel(self, id):
        self.pending.pop(id, None)

    def run_pending(self):
        for id, func in list(self.pending.items()):
            del self.pending[id]
            func()


class TestTicker:
    def test_fires_and_reschedules(self):
        widget, calls = FakeWidget(), []
        ticker = Ticker(widget, 30, lambda: calls.append(1))
        ticker.start()
        for _ in range(3):
            widget.run_pending()
        assert len(calls) == 3
        assert len(widget.pending) == 1

    def test_start_twice_keeps_one_timer(self):
        widget = FakeWidget()
        ticker = Ticker(widget, 30, lambda: None)
        ticker.start()
        ticker.start()
        assert len(widget.pending) == 1

    def test_stop_cancels(self):
        widget = FakeWidget()
        ticker = Ticker(widget, 30, lambda: None)
        ticker.start()
        ticker.stop()
        assert widget.pending == {}
        assert not ticker.running

    def test_context_manager(self):
        widget = FakeWidget()
        with Ticker(widget, 30, lambda: None) as ticker:
            assert ticker.running
            assert len(widget.pending) == 1
        assert widget.pending == {}

    def test_context_manager_cancels_on_error(self):
        widget = FakeWidget()
        with pytest.raises(RuntimeError):
            with Ticker(widget, 30, lambda: None):
                raise RuntimeError("boom")
        assert widget.pending == {}

    def test_failing_callback_stops_timer(self):
        widget = FakeWidget()

        def boom():
            raise ValueError("tick failed")

        ticker = Ticker(widget, 30, boom)
        ticker.start()
        with pytest.raises(ValueError):
            widget.run_pending()
        assert widget.pending == {}
        assert not ticker.running

    def test_callback_can_stop_ticker(self):
        widget = FakeWidget()
        holder = {}
        holder["ticker"] = Ticker(widget, 30, lambda: holder["ticker"].stop())
        holder["ticker"].start()
        widget.run_pending()
        assert widget.pending == {}

    def test_drives_engine(self, default_engine):
        widget = FakeWidget()
        with Ticker(widget, 30, default_engine.tick):
            for _ in range(5):
                widget.run_pending()
        assert default_engine.tick_count == 5
