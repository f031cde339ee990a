import os

import pytest

from Core.Services.timer_group import TimerGroup

class _Entry:
    def __init__(self, seq, interval_ms, callback, next_due):
        self.seq = seq
        self.interval_ms = interval_ms
        self.callback = callback
        self.next_due = next_due
        self.cancelled = False

class SimulatedClock:
    """
    Deterministic stand-in for the event loop.
    Callbacks due at the same instant fire in registration order, or reversed
    when `reverse_ties` is set, so tests can cover both interleavings.
    """
    def __init__(self, reverse_ties=False):
        self.now_ms = 0
        self.reverse_ties = reverse_ties
        self.entries = []
        self.fired = 0
        self._seq = 0

    def create_group(self):
        return SimulatedTimerGroup(self)

    def add(self, interval_ms, callback):
        entry = _Entry(self._seq, interval_ms, callback, self.now_ms + interval_ms)
        self._seq += 1
        self.entries.append(entry)
        return entry

    def remove(self, entry):
        entry.cancelled = True
        if entry in self.entries:
            self.entries.remove(entry)

    @property
    def active_timer_count(self):
        return len(self.entries)

    def advance(self, ms):
        target = self.now_ms + ms
        while True:
            due = [e for e in self.entries if e.next_due <= target]
            if not due:
                break
            instant = min(e.next_due for e in due)
            batch = sorted(
                (e for e in due if e.next_due == instant),
                key=lambda e: e.seq,
                reverse=self.reverse_ties
            )
            self.now_ms = instant
            for entry in batch:
                # An earlier callback in this batch may have cancelled it
                if entry.cancelled:
                    continue
                entry.next_due += entry.interval_ms
                self.fired += 1
                entry.callback()
        self.now_ms = target

    def advance_seconds(self, seconds):
        self.advance(int(round(seconds * 1000)))

class SimulatedTimerGroup(TimerGroup):
    def __init__(self, clock):
        super().__init__()
        self.clock = clock
        self.entries = []

    def _schedule(self, interval_ms, callback):
        self.entries.append(self.clock.add(interval_ms, callback))

    def _cancel(self):
        for entry in self.entries:
            self.clock.remove(entry)
        self.entries.clear()

@pytest.fixture(params=[False, True], ids=["registration-order", "reverse-order"])
def clock(request):
    return SimulatedClock(reverse_ties=request.param)

@pytest.fixture(scope="session")
def qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    # Closing a window in one test must not stop the loop for the next
    app.setQuitOnLastWindowClosed(False)
    return app

def run_event_loop(ms):
    """Spins the Qt event loop for `ms` milliseconds of real time."""
    from PyQt6.QtCore import QEventLoop, QTimer
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()
