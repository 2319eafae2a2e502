# agents/fixed_bet.py
class FixedBetAgent:
    """Wagers the same amount every round, capped at the balance."""

    def __init__(self, amount: int = 10):
        self.amount = amount

    def bet(self, **kw):
        tokens = kw["tokens"]
        return max(1, min(self.amount, tokens))
