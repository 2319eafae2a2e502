"""Head-to-head comparison of two five-card hands."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from deck import Card
from hand_evaluator import Category, Evaluation, classify


class Result(Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


@dataclass(frozen=True)
class Outcome:
    """Verdict from the first hand's point of view.

    ``category`` is the winning side's category, or the shared one on a tie.
    """

    result: Result
    category: Category

    @property
    def category_name(self) -> str:
        return self.category.label


def compare_evaluations(a: Evaluation, b: Evaluation) -> Outcome:
    if a.category != b.category:
        if a.category > b.category:
            return Outcome(Result.WIN, a.category)
        return Outcome(Result.LOSE, b.category)

    for mine, theirs in zip(a.tiebreak, b.tiebreak):
        if mine > theirs:
            return Outcome(Result.WIN, a.category)
        if mine < theirs:
            return Outcome(Result.LOSE, b.category)

    return Outcome(Result.TIE, a.category)


def compare(hand_a: Sequence[Card], hand_b: Sequence[Card]) -> Outcome:
    return compare_evaluations(classify(hand_a), classify(hand_b))
