from Infrastructure.content import STREAK_MESSAGE

class StreakTracker:
    """In-memory count of liked affirmations. Resets with the app."""
    def __init__(self, streak=0):
        self.streak = streak

    def like(self):
        self.streak += 1
        return self.streak

    def message(self):
        return STREAK_MESSAGE.format(streak=self.streak)
