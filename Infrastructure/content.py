from Core.Entities.breathing_session import BreathingPhase

QUOTES = [
    "The only way to do great work is to love what you do.",
    "Believe you can and you're halfway there.",
    "Everything you've ever wanted is on the other side of fear.",
    "The future belongs to those who believe in the beauty of their dreams.",
    "Your mind is a garden, your thoughts are the seeds.",
    "Every moment is a fresh beginning.",
]

AFFIRMATIONS = [
    "I am capable of achieving anything I set my mind to.",
    "I choose to be confident and self-assured.",
    "I am surrounded by love and positive energy.",
    "I trust in my abilities and inner wisdom.",
    "I am grateful for all the abundance in my life.",
    "I radiate peace, love, and harmony.",
]

BREATHING_INSTRUCTIONS = {
    BreathingPhase.INHALE: "Breathe in slowly...",
    BreathingPhase.HOLD: "Hold...",
    BreathingPhase.EXHALE: "Breathe out gently...",
    BreathingPhase.REST: "Rest...",
}

COMPLETION_SUMMARY = (
    "Session Complete! 🎉\n"
    "You completed {cycles} breathing cycles.\n"
    "Take a moment to notice how calm you feel."
)

STREAK_MESSAGE = "Great job! You've maintained a {streak} day streak! 🎉"
