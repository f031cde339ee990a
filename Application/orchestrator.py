from PyQt6.QtCore import QObject, pyqtSignal, QTimer

from Infrastructure.variables import HEART_ANIMATION_MS
from Core.Services.breathing_engine import BreathingEngine
from Core.Services.streak_tracker import StreakTracker
from Core.Services.inspiration_service import InspirationService
from Adapters.Scheduling.qt_timer_group import QtTimerGroup

class Orchestrator(QObject):
    """
    Application-level orchestrator (Hexagonal Application Layer).
    Owns the core services and relays their state changes to the view as Qt signals.
    """
    session_updated = pyqtSignal(object)   # BreathingSession
    session_completed = pyqtSignal(object) # BreathingSession
    streak_changed = pyqtSignal(int, str)  # streak, alert text
    heart_animation_changed = pyqtSignal(bool)

    def __init__(self, parent=None, inspiration=None, streak_tracker=None):
        super().__init__(parent)
        self.inspiration = inspiration if inspiration else InspirationService()
        self.streak_tracker = streak_tracker if streak_tracker else StreakTracker()
        self.engine = BreathingEngine(
            timer_group_factory=lambda: QtTimerGroup(self),
            on_update=self.session_updated.emit,
            on_complete=self.session_completed.emit
        )
        self.current_quote = self.inspiration.pick_quote()
        self.current_affirmation = self.inspiration.pick_affirmation()

    def start_breathing(self, seconds):
        return self.engine.start(seconds)

    def handle_heart_click(self):
        streak = self.streak_tracker.like()
        self.heart_animation_changed.emit(True)
        self.streak_changed.emit(streak, self.streak_tracker.message())
        QTimer.singleShot(HEART_ANIMATION_MS, self._end_heart_animation)

    def _end_heart_animation(self):
        self.heart_animation_changed.emit(False)

    def shutdown(self):
        self.engine.shutdown()
