from PyQt6.QtCore import QObject, QTimer

from Core.Services.timer_group import TimerGroup

class QtTimerGroup(TimerGroup):
    """
    TimerGroup backed by QTimers on the Qt event loop.
    Every timer is parented to one private QObject, so cancelling the group
    stops and frees them all in one place.
    """
    def __init__(self, parent=None):
        super().__init__()
        self.owner = QObject(parent)
        self.timers = []

    def _schedule(self, interval_ms, callback):
        timer = QTimer(self.owner)
        timer.timeout.connect(callback)
        timer.start(interval_ms)
        self.timers.append(timer)

    def _cancel(self):
        for timer in self.timers:
            try:
                timer.stop()
                timer.timeout.disconnect()
            except (RuntimeError, TypeError) as e:
                # Already deleted with its parent window during teardown
                print(f"QtTimerGroup: Error stopping timer: {e}")
        self.timers.clear()
        try:
            self.owner.deleteLater()
        except RuntimeError as e:
            print(f"QtTimerGroup: Error releasing timers: {e}")
