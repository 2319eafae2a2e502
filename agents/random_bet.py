# agents/random_bet.py
import random


class RandomBetAgent:
    """
    Simplest possible wagering agent:
    - ignores its cards
    - bets a uniform amount between 1 and ``max_bet`` (or the balance)
    """

    def __init__(self, max_bet: int = 25, rng: random.Random = None):
        self.max_bet = max_bet
        self.rng = rng or random

    def bet(self, **kw):
        tokens = kw["tokens"]
        return self.rng.randint(1, max(1, min(self.max_bet, tokens)))
