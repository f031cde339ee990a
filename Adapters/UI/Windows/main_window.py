from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFrame, QPushButton, QLabel, QProgressBar
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
import datetime

# --- Hexagonal Imports ---
from Infrastructure.variables import *
from Application.orchestrator import Orchestrator

# --- UI Layout Sub-components ---
from Adapters.UI.Components.breathing_circle import BreathingCircle
from Adapters.UI.Components.streak_alert import StreakAlert

class MainWindow(QMainWindow):
    def __init__(self, orchestrator=None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.theme = DEFAULT_THEME

        # 1. Application Layer
        self.orchestrator = orchestrator if orchestrator else Orchestrator(self)
        self.orchestrator.session_updated.connect(self.update_breathing_ui)
        self.orchestrator.session_completed.connect(self.update_breathing_ui)
        self.orchestrator.streak_changed.connect(self.handle_streak_changed)
        self.orchestrator.heart_animation_changed.connect(self.set_heart_animated)

        # 2. Layout
        central_widget = QWidget()
        central_widget.setObjectName("CentralWidget")
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(24, 24, 24, 24)
        main_layout.setSpacing(24)

        main_layout.addLayout(self._build_header())
        main_layout.addWidget(self._build_affirmation_card())
        main_layout.addWidget(self._build_breathing_card())
        main_layout.addWidget(self._build_quote_card())
        main_layout.addLayout(self._build_footer())
        main_layout.addStretch()

        self.apply_theme()
        self.update_breathing_ui()

    # --- Sections ---
    def _build_header(self):
        header = QHBoxLayout()
        today = datetime.date.today()
        self.lbl_date = QLabel(f"📅 {today.strftime('%A, %B')} {today.day}, {today.year}")
        self.lbl_date.setFont(QFont("Segoe UI", 12))
        header.addWidget(self.lbl_date)
        header.addStretch()

        self.btn_theme = QPushButton("☾")
        self.btn_theme.setObjectName("themeButton")
        self.btn_theme.setFixedSize(40, 40)
        self.btn_theme.setToolTip("Toggle theme")
        self.btn_theme.clicked.connect(self.toggle_theme)
        header.addWidget(self.btn_theme)
        return header

    def _build_affirmation_card(self):
        card, layout = self._create_card("Daily Affirmation")

        self.lbl_affirmation = QLabel(self.orchestrator.current_affirmation)
        self.lbl_affirmation.setFont(QFont("Segoe UI", 13))
        self.lbl_affirmation.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_affirmation.setWordWrap(True)
        layout.addWidget(self.lbl_affirmation)

        self.btn_heart = QPushButton("♡")
        self.btn_heart.setObjectName("heartButton")
        self.btn_heart.setFixedSize(64, 64)
        self.btn_heart.clicked.connect(self.orchestrator.handle_heart_click)
        layout.addWidget(self.btn_heart, alignment=Qt.AlignmentFlag.AlignCenter)

        self.streak_alert = StreakAlert()
        layout.addWidget(self.streak_alert)
        self.set_heart_animated(False)
        return card

    def _build_breathing_card(self):
        card, layout = self._create_card("Mindful Breathing")

        presets = QHBoxLayout()
        presets.addStretch()
        self.preset_buttons = []
        for seconds, label in BREATHING_PRESETS:
            btn = QPushButton(label)
            btn.setObjectName("presetButton")
            btn.clicked.connect(lambda _, s=seconds: self.orchestrator.start_breathing(s))
            presets.addWidget(btn)
            self.preset_buttons.append(btn)
        presets.addStretch()
        layout.addLayout(presets)

        self.breathing_circle = BreathingCircle()
        layout.addWidget(self.breathing_circle, alignment=Qt.AlignmentFlag.AlignCenter)

        self.lbl_time = QLabel("00:00")
        self.lbl_time.setFont(QFont("Segoe UI", 24, QFont.Weight.Bold))
        self.lbl_time.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.lbl_time)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 1000) # Tenths of a percent
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(8)
        layout.addWidget(self.progress_bar)

        self.lbl_message = QLabel("")
        self.lbl_message.setFont(QFont("Segoe UI", 14, QFont.Weight.Medium))
        self.lbl_message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_message.setWordWrap(True)
        layout.addWidget(self.lbl_message)
        return card

    def _build_quote_card(self):
        card, layout = self._create_card("❝ Quote of the Day", centered=False)

        self.lbl_quote = QLabel(self.orchestrator.current_quote)
        quote_font = QFont("Segoe UI", 13)
        quote_font.setItalic(True)
        self.lbl_quote.setFont(quote_font)
        self.lbl_quote.setWordWrap(True)
        layout.addWidget(self.lbl_quote)
        return card

    def _build_footer(self):
        footer = QHBoxLayout()
        footer.addStretch()
        award = QLabel("🏆")
        award.setStyleSheet(f"color: {STREAK_COLOR}; font-size: 16pt;")
        footer.addWidget(award)

        self.lbl_streak = QLabel(self._streak_text(self.orchestrator.streak_tracker.streak))
        self.lbl_streak.setFont(QFont("Segoe UI", 12))
        footer.addWidget(self.lbl_streak)

        bookmark = QLabel("🔖")
        bookmark.setStyleSheet("font-size: 16pt;")
        footer.addWidget(bookmark)
        footer.addStretch()
        return footer

    def _create_card(self, title, centered=True):
        card = QFrame()
        card.setObjectName("card")
        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        lbl_title = QLabel(title)
        lbl_title.setFont(QFont("Segoe UI", 18, QFont.Weight.Bold))
        if centered:
            lbl_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(lbl_title)
        return card, layout

    # --- Rendering ---
    def update_breathing_ui(self, session=None):
        engine = self.orchestrator.engine
        self.lbl_time.setText(engine.get_time_string())
        self.progress_bar.setValue(int(round(engine.progress * 10)))
        self.breathing_circle.set_phase(engine.phase, engine.is_active)

        message = engine.describe_current_phase()
        self.lbl_message.setText(message)
        if engine.is_complete:
            self.lbl_message.setStyleSheet(f"color: {SUCCESS_COLOR};")
        else:
            self.lbl_message.setStyleSheet("")

        for btn in self.preset_buttons:
            btn.setEnabled(not engine.is_active)

    def handle_streak_changed(self, streak, message):
        self.lbl_streak.setText(self._streak_text(streak))
        self.streak_alert.show_message(message)

    def set_heart_animated(self, animated):
        self.btn_heart.setText("♥" if animated else "♡")
        size = 34 if animated else 28 # Pop on click
        self.btn_heart.setStyleSheet(f"""
            QPushButton#heartButton {{
                background: transparent;
                border: none;
                color: {HEART_COLOR};
                font-size: {size}pt;
            }}
        """)
        if not animated:
            self.streak_alert.hide()

    def _streak_text(self, streak):
        return f"Current Streak: {streak} days"

    # --- Theme ---
    def toggle_theme(self):
        self.theme = "dark" if self.theme == "light" else "light"
        self.apply_theme()

    def apply_theme(self):
        palette = THEMES[self.theme]
        self.centralWidget().setStyleSheet(f"""
            QWidget#CentralWidget {{
                background-color: {palette['bg']};
            }}
            QWidget {{
                color: {palette['text']};
                font-family: 'Segoe UI', 'Roboto', 'Helvetica Neue', sans-serif;
            }}
            QLabel {{
                background: transparent;
            }}
            QFrame#card {{
                background-color: {palette['card_bg']};
                border: 1px solid {palette['border']};
                border-radius: 12px;
            }}
            QPushButton#presetButton {{
                background-color: {PRIMARY_COLOR};
                color: white;
                border: none;
                border-radius: 8px;
                padding: 8px 16px;
            }}
            QPushButton#presetButton:hover {{
                background-color: {PRIMARY_HOVER_COLOR};
            }}
            QPushButton#presetButton:disabled {{
                background-color: {palette['track']};
                color: {palette['muted_text']};
            }}
            QPushButton#themeButton {{
                background-color: transparent;
                border: none;
                border-radius: 20px;
                font-size: 16pt;
            }}
            QPushButton#themeButton:hover {{
                background-color: {palette['border']};
            }}
            QProgressBar {{
                background-color: {palette['track']};
                border: none;
                border-radius: 4px;
            }}
            QProgressBar::chunk {{
                background-color: {PRIMARY_COLOR};
                border-radius: 4px;
            }}
        """)

    def closeEvent(self, event):
        # Release breathing timers before the widgets go away
        self.orchestrator.shutdown()
        super().closeEvent(event)
