from PyQt6.QtWidgets import QWidget
from PyQt6.QtGui import QPainter, QColor, QPen
from PyQt6.QtCore import Qt, QRectF, QPropertyAnimation, QEasingCurve, pyqtProperty

from Core.Entities.breathing_session import BreathingPhase
from Infrastructure.variables import (
    PRIMARY_COLOR, CIRCLE_BASE_SIZE, CIRCLE_ACTIVE_SCALE,
    CIRCLE_EXPANDED_SCALE, CIRCLE_RESTING_SCALE, CIRCLE_ANIMATION_MS
)

def target_scale(phase, is_active):
    """
    Visual size for a phase. Only two tiers are drawn:
    inhale/hold expand the circle, exhale/rest let it settle.
    """
    if phase in (BreathingPhase.INHALE, BreathingPhase.HOLD):
        scale = CIRCLE_EXPANDED_SCALE
    else:
        scale = CIRCLE_RESTING_SCALE
    if is_active:
        scale *= CIRCLE_ACTIVE_SCALE
    return scale

class BreathingCircle(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self._scale = CIRCLE_RESTING_SCALE
        max_side = int(CIRCLE_BASE_SIZE * CIRCLE_EXPANDED_SCALE * CIRCLE_ACTIVE_SCALE) + 8
        self.setFixedSize(max_side, max_side)

        self.animation = QPropertyAnimation(self, b"scale", self)
        self.animation.setDuration(CIRCLE_ANIMATION_MS)
        self.animation.setEasingCurve(QEasingCurve.Type.InOutQuad)

    def get_scale(self):
        return self._scale

    def set_scale(self, value):
        self._scale = value
        self.update()

    scale = pyqtProperty(float, fget=get_scale, fset=set_scale)

    def set_phase(self, phase, is_active):
        target = target_scale(phase, is_active)
        # Progress ticks re-render 10x a second; don't restart an animation already heading there
        if self.animation.state() == QPropertyAnimation.State.Running:
            if self.animation.endValue() == target:
                return
        elif abs(target - self._scale) < 1e-6:
            return
        self.animation.stop()
        self.animation.setStartValue(self._scale)
        self.animation.setEndValue(target)
        self.animation.start()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        pen_width = 4
        diameter = CIRCLE_BASE_SIZE * self._scale - pen_width
        x = (self.width() - diameter) / 2
        y = (self.height() - diameter) / 2

        painter.setPen(QPen(QColor(PRIMARY_COLOR), pen_width))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QRectF(x, y, diameter, diameter))
