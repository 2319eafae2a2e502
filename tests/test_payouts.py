import pytest

from payouts import settle_wager, validate_bet
from showdown import Result


def test_settle_wager_moves_tokens_by_result():
    assert settle_wager(100, 25, Result.WIN) == 125
    assert settle_wager(100, 25, Result.LOSE) == 75
    assert settle_wager(100, 25, Result.TIE) == 100


def test_validate_bet_accepts_whole_balance():
    assert validate_bet(100, 100) == 100
    assert validate_bet(1, 100) == 1


@pytest.mark.parametrize("bet", [0, -5, 101, 2.5, "10", None, True])
def test_validate_bet_rejects_illegal_wagers(bet):
    with pytest.raises(ValueError, match="Invalid bet."):
        validate_bet(bet, 100)
