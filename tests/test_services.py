import random

import pytest

from Core.Services.streak_tracker import StreakTracker
from Core.Services.inspiration_service import InspirationService
from Infrastructure.content import QUOTES, AFFIRMATIONS

def test_like_increments_streak():
    tracker = StreakTracker()
    assert tracker.streak == 0
    assert tracker.like() == 1
    assert tracker.like() == 2
    assert tracker.streak == 2

def test_streak_message_mentions_current_count():
    tracker = StreakTracker(streak=4)
    tracker.like()
    assert tracker.message() == "Great job! You've maintained a 5 day streak! 🎉"

def test_picks_come_from_default_pools():
    service = InspirationService(rng=random.Random(3))
    for _ in range(20):
        assert service.pick_quote() in QUOTES
        assert service.pick_affirmation() in AFFIRMATIONS

def test_seeded_rng_makes_picks_reproducible():
    first = InspirationService(rng=random.Random(42))
    second = InspirationService(rng=random.Random(42))
    assert [first.pick_quote() for _ in range(5)] == [second.pick_quote() for _ in range(5)]

def test_custom_pools_are_used():
    service = InspirationService(quotes=["Only quote"], affirmations=["Only affirmation"])
    assert service.pick_quote() == "Only quote"
    assert service.pick_affirmation() == "Only affirmation"

@pytest.mark.parametrize("kwargs", [{"quotes": []}, {"affirmations": []}])
def test_empty_pool_is_rejected(kwargs):
    with pytest.raises(ValueError):
        InspirationService(**kwargs)
