from enum import Enum

from Infrastructure.variables import PHASE_SECONDS

class BreathingPhase(Enum):
    INHALE = 0
    HOLD = 1
    EXHALE = 2
    REST = 3

    def next(self):
        return BreathingPhase((self.value + 1) % len(BreathingPhase))

# One cycle walks every phase once (4 x 4s = 16s)
CYCLE_SECONDS = PHASE_SECONDS * len(BreathingPhase)

class BreathingSession:
    """
    State of one timed breathing run.
    Mutated only by BreathingEngine; the view layer reads it.
    """
    def __init__(self, requested_seconds):
        self.requested_seconds = requested_seconds
        self.remaining_seconds = requested_seconds
        self.progress = 0.0
        self.phase = BreathingPhase.INHALE
        self.cycle_count = requested_seconds // CYCLE_SECONDS
        self.is_active = True
        self.is_complete = False

        # Internal counters (ticks applied so far)
        self.progress_ticks = 0
        self.phase_advances = 0

    @property
    def progress_step(self):
        """Percent added per 100ms progress tick."""
        return 100.0 / (self.requested_seconds * 10)

    def to_dict(self):
        return {
            "requested_seconds": self.requested_seconds,
            "remaining_seconds": self.remaining_seconds,
            "progress": self.progress,
            "phase": self.phase.name,
            "cycle_count": self.cycle_count,
            "is_active": self.is_active,
            "is_complete": self.is_complete,
        }
