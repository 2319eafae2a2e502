from dataclasses import dataclass
import random
from typing import List, Optional

RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
SUITS = ["♠", "♥", "♦", "♣"]  # spades, hearts, diamonds, clubs

FACE_VALUES = {"J": 11, "Q": 12, "K": 13, "A": 14}


@dataclass(frozen=True)
class Card:
    suit: str
    rank: str

    def __post_init__(self) -> None:
        if self.suit not in SUITS:
            raise ValueError(f"Unknown suit: {self.suit!r}")
        if self.rank not in RANKS:
            raise ValueError(f"Unknown rank: {self.rank!r}")

    @classmethod
    def parse(cls, label: str) -> "Card":
        """Build a card from its display label, e.g. '10♠' or 'A♥'."""
        return cls(suit=label[-1], rank=label[:-1])

    @property
    def numeric_rank(self) -> int:
        return FACE_VALUES.get(self.rank) or int(self.rank)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return str(self)


class Deck:
    def __init__(self) -> None:
        self.cards: List[Card] = []
        self.reset()

    def reset(self) -> None:
        self.cards = [Card(suit, rank) for suit in SUITS for rank in RANKS]

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        (rng or random).shuffle(self.cards)

    def deal(self, n: int = 1):
        """Return a Card if n=1, otherwise return a list of Cards."""
        if n > len(self.cards):
            raise ValueError("Not enough cards left in the deck")

        if n == 1:
            return self.cards.pop()

        dealt = self.cards[-n:]
        del self.cards[-n:]
        return dealt

    def __len__(self) -> int:
        return len(self.cards)
