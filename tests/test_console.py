import random

import pytest

from console import parse_bet, play_round, render_hand, render_hidden, run
from deck import Card
from game import GameSession


def scripted(*answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


def test_render_hand_and_hidden():
    cards = [Card.parse("10♠"), Card.parse("A♥")]
    assert render_hand(cards) == "[10♠] [A♥]"
    assert render_hidden(2) == "[🂠] [🂠]"


@pytest.mark.parametrize("raw", ["", "abc", "0", "-3", "101", "2.5"])
def test_parse_bet_rejects_bad_input(raw):
    with pytest.raises(ValueError, match="Invalid bet."):
        parse_bet(raw, 100)


def test_parse_bet_accepts_padded_number():
    assert parse_bet(" 25 ", 100) == 25


def test_play_round_reprompts_until_bet_is_valid():
    session = GameSession(rng=random.Random(12))
    out = []
    play_round(session, read=scripted("lots", "500", "10"), write=out.append)

    assert out.count("Invalid bet.") == 2
    assert any(line.startswith("Dealer: [🂠]") for line in out)
    assert out[-1] == f"Tokens: {session.tokens}"
    assert session.tokens in (90, 100, 110)


def test_run_plays_until_quit():
    session = GameSession(rng=random.Random(6))
    out = []
    final = run(session, read=scripted("5", "n", "5", "q"), write=out.append)
    assert session.round_number == 2
    assert final == session.tokens
