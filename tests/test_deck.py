import random

import pytest

from deck import RANKS, SUITS, Card, Deck
from player import Player


def test_deck_has_52_unique_cards():
    deck = Deck()
    assert len(deck) == 52
    assert len(set(deck.cards)) == 52


def test_numeric_ranks():
    assert [Card("♠", r).numeric_rank for r in RANKS] == list(range(2, 15))


def test_card_display_and_equality():
    card = Card("♥", "10")
    assert str(card) == "10♥"
    assert Card.parse("10♥") == card
    assert Card.parse("A♣") == Card(suit="♣", rank="A")
    assert Card("♠", "A") != Card("♥", "A")


@pytest.mark.parametrize("suit, rank", [("x", "A"), ("♠", "1"), ("♠", "T")])
def test_card_rejects_unknown_values(suit, rank):
    with pytest.raises(ValueError):
        Card(suit, rank)


def test_deal_single_and_many():
    deck = Deck()
    top = deck.cards[-1]
    assert deck.deal() == top
    dealt = deck.deal(5)
    assert isinstance(dealt, list) and len(dealt) == 5
    assert len(deck) == 46


def test_deal_past_end_raises():
    deck = Deck()
    deck.deal(52)
    with pytest.raises(ValueError):
        deck.deal(1)


def test_seeded_shuffle_is_reproducible_and_reset_restores():
    a, b = Deck(), Deck()
    a.shuffle(random.Random(3))
    b.shuffle(random.Random(3))
    assert a.cards == b.cards
    a.deal(10)
    a.reset()
    assert a.cards == [Card(s, r) for s in SUITS for r in RANKS]


def test_player_draw_and_reset():
    deck = Deck()
    player = Player("You")
    for _ in range(5):
        player.draw(deck)
    assert len(player.hand) == 5
    assert str(player).startswith("You: ")
    player.reset()
    assert player.hand == []
    assert str(player) == "You: []"
