from dataclasses import dataclass, field
from typing import List
from deck import Card, Deck

@dataclass
class Player:
    name: str
    hand: List[Card] = field(default_factory=list)

    def draw(self, deck: Deck) -> None:
        self.hand.append(deck.deal(1))

    def reset(self) -> None:
        self.hand.clear()

    def __str__(self):
        cards_str = " ".join(str(c) for c in self.hand) if self.hand else "[]"
        return f"{self.name}: {cards_str}"
