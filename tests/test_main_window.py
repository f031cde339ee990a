import random

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from conftest import run_event_loop
from Adapters.UI.Windows.main_window import MainWindow
from Application.orchestrator import Orchestrator
from Core.Services.inspiration_service import InspirationService

@pytest.fixture
def window(qt_app):
    orchestrator = Orchestrator(inspiration=InspirationService(rng=random.Random(7)))
    win = MainWindow(orchestrator=orchestrator)
    win.show()
    yield win
    win.orchestrator.shutdown()
    win.hide()
    win.deleteLater()

def test_window_shows_picked_affirmation_and_quote(window):
    assert window.lbl_affirmation.text() == window.orchestrator.current_affirmation
    assert window.lbl_quote.text() == window.orchestrator.current_quote
    assert window.lbl_time.text() == "00:00"
    assert window.lbl_message.text() == "Breathe in slowly..."
    assert all(btn.isEnabled() for btn in window.preset_buttons)

def test_preset_click_starts_session_and_disables_presets(window):
    window.preset_buttons[0].click()

    engine = window.orchestrator.engine
    assert engine.is_active is True
    assert engine.requested_seconds == 60
    assert window.lbl_time.text() == "01:00"
    assert not any(btn.isEnabled() for btn in window.preset_buttons)

def test_presets_reenable_when_session_completes(window):
    window.orchestrator.start_breathing(1)
    assert not any(btn.isEnabled() for btn in window.preset_buttons)

    run_event_loop(1600)

    assert window.orchestrator.engine.is_complete is True
    assert all(btn.isEnabled() for btn in window.preset_buttons)
    assert window.lbl_time.text() == "00:00"
    assert window.progress_bar.value() == 1000
    assert window.lbl_message.text().startswith("Session Complete!")

def test_heart_click_shows_streak_then_hides_alert(window):
    window.btn_heart.click()

    assert window.btn_heart.text() == "♥"
    assert window.lbl_streak.text() == "Current Streak: 1 days"
    assert not window.streak_alert.isHidden()
    assert "1 day streak" in window.streak_alert.label.text()

    run_event_loop(1300)

    assert window.btn_heart.text() == "♡"
    assert window.streak_alert.isHidden()
    assert window.lbl_streak.text() == "Current Streak: 1 days"

def test_toggle_theme_switches_palette(window):
    assert window.theme == "light"
    window.btn_theme.click()
    assert window.theme == "dark"
    window.btn_theme.click()
    assert window.theme == "light"

def test_closing_window_stops_breathing_timers(window):
    window.preset_buttons[1].click()
    window.close()

    assert window.orchestrator.engine.session is None
    assert window.orchestrator.engine.timer_group is None
