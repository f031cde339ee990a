import random

from Infrastructure.content import QUOTES, AFFIRMATIONS

class InspirationService:
    """
    Picks the quote and affirmation shown on screen.
    Pass a seeded random.Random to make the picks reproducible.
    """
    def __init__(self, quotes=None, affirmations=None, rng=None):
        self.quotes = list(QUOTES if quotes is None else quotes)
        self.affirmations = list(AFFIRMATIONS if affirmations is None else affirmations)
        if not self.quotes:
            raise ValueError("InspirationService needs at least one quote")
        if not self.affirmations:
            raise ValueError("InspirationService needs at least one affirmation")
        self.rng = rng if rng else random.Random()

    def pick_quote(self):
        return self.rng.choice(self.quotes)

    def pick_affirmation(self):
        return self.rng.choice(self.affirmations)
