import random

import pytest

from deck import Card
from game import STARTING_TOKENS, GameSession
from hand_evaluator import Category
from showdown import Result


def hand(*labels):
    return [Card.parse(label) for label in labels]


def rigged_session(player_labels, dealer_labels, tokens=STARTING_TOKENS):
    session = GameSession(tokens, rng=random.Random(0))
    session.start_round()
    session.player.hand[:] = hand(*player_labels)
    session.dealer.hand[:] = hand(*dealer_labels)
    return session


def test_start_round_deals_five_unique_cards_each():
    session = GameSession(rng=random.Random(11))
    session.start_round()
    dealt = session.player.hand + session.dealer.hand
    assert len(session.player.hand) == 5
    assert len(session.dealer.hand) == 5
    assert len(set(dealt)) == 10
    assert len(session.deck) == 42
    assert session.round_number == 1
    assert session.in_progress


def test_win_adds_bet_and_reports_player_category():
    session = rigged_session(
        ("2♠", "2♥", "2♦", "2♣", "5♠"),
        ("9♠", "9♥", "9♦", "3♣", "3♠"),
    )
    result = session.play(30)
    assert result.outcome.result is Result.WIN
    assert result.tokens_after == 130
    assert session.tokens == 130
    assert result.token_delta == 30
    assert result.status_message() == "You win with Four of a Kind!"
    assert not session.in_progress


def test_loss_subtracts_bet_and_reports_dealer_category():
    session = rigged_session(
        ("2♠", "5♥", "9♦", "J♣", "K♥"),
        ("10♠", "J♠", "Q♠", "K♠", "A♠"),
    )
    result = session.play(40)
    assert result.tokens_after == 60
    assert result.dealer_eval.category is Category.ROYAL_FLUSH
    assert result.status_message() == "Dealer wins with Royal Flush!"


def test_tie_keeps_balance():
    session = rigged_session(
        ("4♠", "4♥", "J♦", "J♣", "8♠"),
        ("4♦", "4♣", "J♠", "J♥", "8♥"),
    )
    result = session.play(10)
    assert result.tokens_after == STARTING_TOKENS
    assert result.status_message() == "Tie with Two Pair!"


def test_invalid_bet_leaves_round_open():
    session = GameSession(rng=random.Random(1))
    session.start_round()
    with pytest.raises(ValueError):
        session.play(STARTING_TOKENS + 1)
    assert session.in_progress
    session.play(STARTING_TOKENS)
    assert not session.in_progress


def test_play_requires_a_dealt_round():
    session = GameSession()
    with pytest.raises(RuntimeError):
        session.play(10)
    session.start_round()
    session.play(10)
    with pytest.raises(RuntimeError):
        session.play(10)


def test_restart_restores_starting_balance():
    session = rigged_session(
        ("2♠", "5♥", "9♦", "J♣", "K♥"),
        ("10♠", "J♠", "Q♠", "K♠", "A♠"),
        tokens=50,
    )
    session.play(50)
    assert session.is_broke
    session.restart()
    assert session.tokens == 50
    assert session.round_number == 0
    assert session.player.hand == []


def test_round_result_as_dict_uses_card_labels():
    session = rigged_session(
        ("10♠", "10♥", "9♦", "7♣", "4♠"),
        ("10♦", "10♣", "9♠", "7♥", "3♠"),
    )
    payload = session.play(5).as_dict()
    assert payload["player_hand"] == ["10♠", "10♥", "9♦", "7♣", "4♠"]
    assert payload["result"] == "win"
    assert payload["category"] == "One Pair"
    assert payload["tokens_before"] == 100
    assert payload["tokens_after"] == 105


def test_session_requires_positive_balance():
    with pytest.raises(ValueError):
        GameSession(0)
