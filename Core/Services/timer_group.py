class TimerGroup:
    """
    Port for a group of repeating callbacks that are cancelled together.
    One group is owned by exactly one breathing session; adapters supply the
    actual scheduling (QTimer in the app, a simulated clock in tests).
    """
    def __init__(self):
        self.is_cancelled = False

    def schedule(self, interval_ms, callback):
        """Registers `callback` to run every `interval_ms` until cancel_all()."""
        if self.is_cancelled:
            raise RuntimeError("TimerGroup: cannot schedule on a cancelled group")
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self._schedule(interval_ms, callback)

    def cancel_all(self):
        """Stops every callback. Safe to call more than once; never raises."""
        if self.is_cancelled:
            return
        self.is_cancelled = True
        self._cancel()

    # --- Adapter hooks ---
    def _schedule(self, interval_ms, callback):
        raise NotImplementedError

    def _cancel(self):
        raise NotImplementedError
