"""Utilities for validating and settling token wagers."""
from __future__ import annotations

from showdown import Result


def validate_bet(bet: object, tokens: int) -> int:
    """Return ``bet`` if it is a legal wager against a balance of ``tokens``.

    A wager must be a whole, positive number of tokens no larger than the
    current balance.
    """

    if isinstance(bet, bool) or not isinstance(bet, int):
        raise ValueError("Invalid bet.")
    if bet <= 0 or bet > tokens:
        raise ValueError("Invalid bet.")
    return bet


def settle_wager(tokens: int, bet: int, result: Result) -> int:
    """Return the balance after a round: the bet is won, lost, or pushed."""

    if result is Result.WIN:
        return tokens + bet
    if result is Result.LOSE:
        return tokens - bet
    return tokens
