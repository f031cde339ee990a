# --- Breathing Configuration ---
BREATHING_PRESETS = (
    (60, "1 Minute"),
    (180, "3 Minutes"),
    (300, "5 Minutes"),
)
PHASE_SECONDS = 4 # Inhale / Hold / Exhale / Rest each last 4s

# --- Timer Cadences (Milliseconds) ---
COUNTDOWN_INTERVAL_MS = 1000
PROGRESS_INTERVAL_MS = 100
PHASE_INTERVAL_MS = PHASE_SECONDS * 1000

# --- Affirmation Feedback ---
HEART_ANIMATION_MS = 1000 # Heart pop + streak alert visibility

# --- Window ---
WINDOW_TITLE = "Mindful Moment"
WINDOW_WIDTH = 720
WINDOW_HEIGHT = 900

# --- Breathing Circle ---
CIRCLE_BASE_SIZE = 128
CIRCLE_ACTIVE_SCALE = 1.10
CIRCLE_EXPANDED_SCALE = 1.25 # Inhale / Hold
CIRCLE_RESTING_SCALE = 1.00  # Exhale / Rest
CIRCLE_ANIMATION_MS = 1000

# --- UI Styling ---
PRIMARY_COLOR = "#3B82F6"   # Blue
PRIMARY_HOVER_COLOR = "#2563EB"
SUCCESS_COLOR = "#22C55E"   # Green
HEART_COLOR = "#EF4444"     # Red
STREAK_COLOR = "#EAB308"    # Yellow

DEFAULT_THEME = "light"
THEMES = {
    "light": {
        "bg": "#F3F4F6",
        "card_bg": "#FFFFFF",
        "text": "#1F2937",
        "muted_text": "#6B7280",
        "border": "#E5E7EB",
        "track": "#E5E7EB",
    },
    "dark": {
        "bg": "#111827",
        "card_bg": "#1F2937",
        "text": "#FFFFFF",
        "muted_text": "#9CA3AF",
        "border": "#374151",
        "track": "#374151",
    },
}
