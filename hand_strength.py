# hand_strength.py
from typing import Sequence

from treys import Card as TreysCard, Evaluator

from deck import Card

evaluator = Evaluator()

# treys uses:
# s = spades, h = hearts, d = diamonds, c = clubs
TREYS_SUITS = {"♠": "s", "♥": "h", "♦": "d", "♣": "c"}


def to_treys(card: Card) -> int:
    """Convert '10♠' to Treys internal representation."""
    rank = "T" if card.rank == "10" else card.rank
    return TreysCard.new(rank + TREYS_SUITS[card.suit])


def treys_score(hand: Sequence[Card]) -> int:
    """
    Returns Treys score: lower = better.
    """
    return evaluator.evaluate([to_treys(c) for c in hand], [])


def strength_percentile(hand: Sequence[Card]) -> float:
    """Fraction of distinct five-card hand values this hand beats (0.0 - 1.0)."""
    return 1.0 - evaluator.get_five_card_rank_percentage(treys_score(hand))
