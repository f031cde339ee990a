from PyQt6.QtWidgets import QFrame, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

class StreakAlert(QFrame):
    """Inline green banner shown briefly after liking an affirmation."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("streakAlert")
        self.setStyleSheet("""
            QFrame#streakAlert {
                background-color: #DCFCE7;
                border: 1px solid #4ADE80;
                border-radius: 8px;
            }
            QLabel {
                color: #14532D;
                background: transparent;
                border: none;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 10, 16, 10)

        self.label = QLabel("")
        self.label.setFont(QFont("Segoe UI", 10))
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.label.setWordWrap(True)
        layout.addWidget(self.label)

        self.hide()

    def show_message(self, text):
        self.label.setText(text)
        self.show()
