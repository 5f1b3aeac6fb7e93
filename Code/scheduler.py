# scheduler.py
# The recurring simulation timer. Works with anything exposing Tk's after/after_cancel pair,
# so the engine loop can be driven (and tested) without a display.

import logging

import config

logger = logging.getLogger(f"{config.LOGGER_NAME}.scheduler")


class Ticker:
    """
    Owns one recurring `after` timer on a widget.
    Use start()/stop() or a `with` block. The pending handle is cancelled on every exit
    path, including a callback that raises.
    """
    def __init__(self, widget, interval_ms, callback):
        self.widget = widget
        self.interval_ms = max(1, int(interval_ms))
        self.callback = callback
        self.id = None
        self.active = False

    @property
    def running(self):
        return self.active

    def start(self):
        if self.active:
            return
        self.active = True
        self.schedule()

    def schedule(self):
        self.id = self.widget.after(self.interval_ms, self.fire)

    def stop(self):
        self.active = False
        id = self.id
        self.id = None
        if id:
            self.widget.after_cancel(id)

    def fire(self):
        self.id = None
        if not self.active:
            return
        try:
            self.callback()
        except Exception:
            logger.debug("Tick callback failed, stopping timer")
            self.stop()
            raise
        # The callback may have stopped us (e.g. window closing)
        if self.active:
            self.schedule()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
