import random

from agents import AllInAgent, FixedBetAgent, RandomBetAgent, StrengthScaledAgent
from deck import Card


def hand(*labels):
    return [Card.parse(label) for label in labels]


WEAK = hand("2♠", "3♥", "4♦", "5♣", "7♠")
ROYAL = hand("10♠", "J♠", "Q♠", "K♠", "A♠")


def test_fixed_bet_is_capped_by_balance():
    agent = FixedBetAgent(amount=20)
    assert agent.bet(hand=WEAK, tokens=100) == 20
    assert agent.bet(hand=WEAK, tokens=7) == 7


def test_all_in_bets_everything():
    assert AllInAgent().bet(hand=WEAK, tokens=42) == 42


def test_random_bet_stays_within_bounds():
    agent = RandomBetAgent(max_bet=10, rng=random.Random(5))
    bets = [agent.bet(hand=WEAK, tokens=6) for _ in range(200)]
    assert min(bets) >= 1
    assert max(bets) <= 6


def test_strength_scaled_bets_more_on_stronger_hands():
    agent = StrengthScaledAgent(floor=0.5, max_fraction=0.5)
    assert agent.bet(hand=WEAK, tokens=100) == 1
    assert agent.bet(hand=ROYAL, tokens=100) == 49
    assert 1 <= agent.bet(hand=ROYAL, tokens=1) <= 1
