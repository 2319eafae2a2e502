"""Five-card hand classification."""
from __future__ import annotations

from enum import IntEnum
from typing import List, NamedTuple, Sequence, Tuple

from deck import Card

HAND_SIZE = 5
ROYAL_RANKS = [10, 11, 12, 13, 14]


class Category(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    Category.HIGH_CARD: "High Card",
    Category.ONE_PAIR: "One Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.ROYAL_FLUSH: "Royal Flush",
}


class Evaluation(NamedTuple):
    category: Category
    tiebreak: Tuple[int, ...]


def rank_counts(ranks: Sequence[int]) -> List[Tuple[int, int]]:
    """Return ``(rank, count)`` pairs ordered by count, then rank, descending.

    A hand has at most five distinct ranks so a sorted list is all we need;
    the ordering puts trips before pairs and higher kickers before lower ones.
    """
    pairs = [(rank, ranks.count(rank)) for rank in set(ranks)]
    return sorted(pairs, key=lambda pair: (pair[1], pair[0]), reverse=True)


def is_straight(ranks: Sequence[int]) -> bool:
    # Aces only play high.
    ascending = sorted(set(ranks))
    return len(ascending) == HAND_SIZE and ascending[-1] - ascending[0] == HAND_SIZE - 1


def classify(hand: Sequence[Card]) -> Evaluation:
    """Classify a five-card hand.

    Returns the hand's category together with a tie-break key: a tuple of
    ranks that decides between two hands of the same category when compared
    element by element.
    """
    if len(hand) != HAND_SIZE:
        raise ValueError(f"A hand must contain exactly {HAND_SIZE} cards, got {len(hand)}")

    ranks = [card.numeric_rank for card in hand]
    descending = tuple(sorted(ranks, reverse=True))
    counts = rank_counts(ranks)
    ordered = tuple(rank for rank, _ in counts)
    top_count = counts[0][1]
    second_count = counts[1][1] if len(counts) > 1 else 0

    flush = len({card.suit for card in hand}) == 1
    straight = is_straight(ranks)

    if flush and sorted(ranks) == ROYAL_RANKS:
        return Evaluation(Category.ROYAL_FLUSH, descending)
    if flush and straight:
        return Evaluation(Category.STRAIGHT_FLUSH, descending)
    if top_count == 4:
        return Evaluation(Category.FOUR_OF_A_KIND, ordered)
    if top_count == 3 and second_count == 2:
        return Evaluation(Category.FULL_HOUSE, ordered)
    if flush:
        return Evaluation(Category.FLUSH, descending)
    if straight:
        return Evaluation(Category.STRAIGHT, descending)
    if top_count == 3:
        return Evaluation(Category.THREE_OF_A_KIND, ordered)
    if top_count == 2 and second_count == 2:
        return Evaluation(Category.TWO_PAIR, ordered)
    if top_count == 2:
        return Evaluation(Category.ONE_PAIR, ordered)
    return Evaluation(Category.HIGH_CARD, descending)


def hand_class(hand: Sequence[Card]) -> str:
    return classify(hand).category.label
