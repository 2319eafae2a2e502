"""Interactive terminal front-end for five-card showdown."""
from __future__ import annotations

import argparse
import random
from typing import Callable, List, Optional, Sequence

from deck import Card
from game import STARTING_TOKENS, GameSession
from hand_evaluator import hand_class
from hand_strength import strength_percentile
from payouts import validate_bet

HIDDEN_CARD = "🂠"


def render_hand(cards: Sequence[Card]) -> str:
    return " ".join(f"[{card}]" for card in cards)


def render_hidden(count: int = 5) -> str:
    return " ".join(f"[{HIDDEN_CARD}]" for _ in range(count))


def parse_bet(raw: str, tokens: int) -> int:
    """Parse a typed wager; anything that is not a legal bet raises ``ValueError``."""
    try:
        bet = int(raw.strip())
    except ValueError:
        raise ValueError("Invalid bet.") from None
    return validate_bet(bet, tokens)


def prompt_bet(tokens: int, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> int:
    while True:
        try:
            return parse_bet(read(f"Bet (1-{tokens}): "), tokens)
        except ValueError as exc:
            write(str(exc))


def play_round(
    session: GameSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    session.start_round()
    write(f"\nRound {session.round_number}    Tokens: {session.tokens}")
    write(f"Dealer: {render_hidden()}")
    write(f"You:    {render_hand(session.player.hand)}  ({hand_class(session.player.hand)}, "
          f"beats {strength_percentile(session.player.hand):.0%} of hands)")

    bet = prompt_bet(session.tokens, read, write)
    result = session.play(bet)

    write(f"Dealer: {render_hand(result.dealer_hand)}  ({result.dealer_eval.category.label})")
    write(result.status_message())
    write(f"Tokens: {result.tokens_after}")


def run(
    session: GameSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Play rounds until the player quits; returns the final balance."""
    while True:
        play_round(session, read, write)
        if session.is_broke:
            write("You are out of tokens.")
            choice = read("[r]estart or [q]uit? ").strip().lower()
        else:
            choice = read("[n]ext round, [r]estart or [q]uit? ").strip().lower()

        if choice.startswith("q"):
            return session.tokens
        if choice.startswith("r") or session.is_broke:
            session.restart()


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play five-card showdown against the dealer")
    parser.add_argument("--tokens", type=int, help="Starting token balance", default=STARTING_TOKENS)
    parser.add_argument("--seed", type=int, help="RNG seed for shuffling", default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(args.tokens, rng=rng)
    try:
        final = run(session)
    except (EOFError, KeyboardInterrupt):
        final = session.tokens
    print(f"\nFinal tokens: {final}")


if __name__ == "__main__":
    main()
