from __future__ import annotations

"""
Wagering agent that sizes bets from the strength of its own hand.
"""
from typing import Dict, List

from hand_strength import strength_percentile


class StrengthScaledAgent:
    """
    Bets a slice of the balance proportional to how strong the hand is.

    - Hands below ``floor`` (percentile of all five-card hand values) get the
      minimum bet.
    - Above it the bet grows linearly up to ``max_fraction`` of the balance.
    """

    def __init__(self, floor: float = 0.5, max_fraction: float = 0.5, min_bet: int = 1):
        self.floor = floor
        self.max_fraction = max_fraction
        self.min_bet = min_bet

    def bet(self, **state: Dict[str, object]) -> int:
        hand: List[object] = state["hand"]
        tokens: int = int(state["tokens"])

        strength = strength_percentile(hand)
        if strength <= self.floor:
            return min(self.min_bet, tokens)

        scale = (strength - self.floor) / (1.0 - self.floor)
        amount = int(tokens * self.max_fraction * scale)
        return max(min(self.min_bet, tokens), min(amount, tokens))
