from Core.Entities.breathing_session import BreathingSession, BreathingPhase
from Infrastructure.content import BREATHING_INSTRUCTIONS, COMPLETION_SUMMARY
from Infrastructure.variables import (
    PHASE_SECONDS, COUNTDOWN_INTERVAL_MS, PROGRESS_INTERVAL_MS, PHASE_INTERVAL_MS
)

COUNTDOWN = "countdown"
PROGRESS = "progress"
PHASE = "phase"

class BreathingEngine:
    """
    Core breathing-session controller.
    Drives one session with three repeating processes (countdown, progress,
    phase rotation) owned by a single timer group, so they start and stop together.
    """
    def __init__(self, timer_group_factory, on_update=None, on_complete=None):
        self.timer_group_factory = timer_group_factory
        self.on_update = on_update
        self.on_complete = on_complete
        self.session = None
        self.timer_group = None

    # --- Commands ---
    def start(self, duration_seconds):
        """Starts a new session, preempting any session still running."""
        if isinstance(duration_seconds, bool) or not isinstance(duration_seconds, int):
            raise ValueError(f"Breathing duration must be an integer number of seconds, got {duration_seconds!r}")
        if duration_seconds <= 0:
            raise ValueError(f"Breathing duration must be positive, got {duration_seconds}")

        previous = self.session
        if previous is not None and previous.is_active:
            print(f"BreathingEngine: Preempting {previous.requested_seconds}s session ({previous.remaining_seconds}s left)")
        self._release_timers()

        session = BreathingSession(duration_seconds)
        group = self.timer_group_factory()
        self.session = session
        self.timer_group = group

        group.schedule(COUNTDOWN_INTERVAL_MS, lambda: self._tick(session, COUNTDOWN))
        group.schedule(PROGRESS_INTERVAL_MS, lambda: self._tick(session, PROGRESS))
        group.schedule(PHASE_INTERVAL_MS, lambda: self._tick(session, PHASE))

        print(f"BreathingEngine: Started {duration_seconds}s session ({session.cycle_count} cycles)")
        if self.on_update:
            self.on_update(session)
        return session

    def shutdown(self):
        """Stops all ticking and discards the current session (view teardown)."""
        self._release_timers()
        self.session = None

    # --- State transition ---
    def _tick(self, session, process):
        # Callbacks of a superseded or finished session never mutate anything
        if session is not self.session or not session.is_active:
            return

        changed = False
        if process == COUNTDOWN:
            if session.remaining_seconds > 0:
                session.remaining_seconds -= 1
                changed = True
        elif process == PROGRESS:
            ticks = session.progress_ticks + 1
            value = ticks * session.progress_step
            # Reaching 100% is reserved for the termination transition
            if value < 100.0:
                session.progress_ticks = ticks
                session.progress = value
                changed = True
        elif process == PHASE:
            changed = self._advance_phase(session)

        finished = session.remaining_seconds == 0
        if finished:
            self._finish(session)
            changed = True

        if changed and self.on_update:
            self.on_update(session)
        if finished and self.on_complete:
            self.on_complete(session)

    def _advance_phase(self, session):
        # Never rotate past the boundaries the session actually spans
        if session.phase_advances >= session.requested_seconds // PHASE_SECONDS:
            return False
        session.phase_advances += 1
        session.phase = session.phase.next()
        return True

    def _finish(self, session):
        # Settle a phase boundary that coincides with the last second,
        # whichever callback happened to fire first
        while session.phase_advances < session.requested_seconds // PHASE_SECONDS:
            self._advance_phase(session)
        session.is_active = False
        session.is_complete = True
        session.progress = 100.0
        self._release_timers()
        print(f"BreathingEngine: Session complete ({session.cycle_count} cycles)")

    def _release_timers(self):
        if self.timer_group is not None:
            self.timer_group.cancel_all()
            self.timer_group = None

    # --- Queries ---
    @property
    def requested_seconds(self):
        return self.session.requested_seconds if self.session else 0

    @property
    def remaining_seconds(self):
        return self.session.remaining_seconds if self.session else 0

    @property
    def progress(self):
        return self.session.progress if self.session else 0.0

    @property
    def phase(self):
        return self.session.phase if self.session else BreathingPhase.INHALE

    @property
    def cycle_count(self):
        return self.session.cycle_count if self.session else 0

    @property
    def is_active(self):
        return bool(self.session and self.session.is_active)

    @property
    def is_complete(self):
        return bool(self.session and self.session.is_complete)

    def describe_current_phase(self):
        if self.is_complete:
            return COMPLETION_SUMMARY.format(cycles=self.cycle_count)
        return BREATHING_INSTRUCTIONS[self.phase]

    def get_time_string(self):
        m, s = divmod(self.remaining_seconds, 60)
        return f"{m:02d}:{s:02d}"
