import random
from dataclasses import dataclass
from typing import List, Optional

from deck import Card, Deck
from hand_evaluator import HAND_SIZE, Evaluation, classify
from payouts import settle_wager, validate_bet
from player import Player
from showdown import Outcome, Result, compare_evaluations

STARTING_TOKENS = 100


@dataclass(frozen=True)
class RoundResult:
    round_number: int
    bet: int
    outcome: Outcome
    player_hand: List[Card]
    dealer_hand: List[Card]
    player_eval: Evaluation
    dealer_eval: Evaluation
    tokens_before: int
    tokens_after: int

    @property
    def token_delta(self) -> int:
        return self.tokens_after - self.tokens_before

    def status_message(self) -> str:
        name = self.outcome.category_name
        if self.outcome.result is Result.WIN:
            return f"You win with {name}!"
        if self.outcome.result is Result.LOSE:
            return f"Dealer wins with {name}!"
        return f"Tie with {name}!"

    def as_dict(self) -> dict:
        return {
            "round": self.round_number,
            "bet": self.bet,
            "result": self.outcome.result.value,
            "category": self.outcome.category_name,
            "player_hand": [str(c) for c in self.player_hand],
            "dealer_hand": [str(c) for c in self.dealer_hand],
            "player_category": self.player_eval.category.label,
            "dealer_category": self.dealer_eval.category.label,
            "tokens_before": self.tokens_before,
            "tokens_after": self.tokens_after,
        }


class GameSession:
    """Token balance, deck and both hands for one sitting at the table."""

    def __init__(self, starting_tokens: int = STARTING_TOKENS, rng: Optional[random.Random] = None):
        if starting_tokens <= 0:
            raise ValueError("A session needs a positive starting balance")
        self.starting_tokens = starting_tokens
        self.rng = rng
        self.deck = Deck()
        self.player = Player("You")
        self.dealer = Player("Dealer")
        self.tokens = starting_tokens
        self.round_number = 0
        self._resolved = True

    # ----------------------------------------------------------------------
    # Round lifecycle
    # ----------------------------------------------------------------------

    def start_round(self) -> None:
        self.deck.reset()
        self.deck.shuffle(self.rng)
        self.player.reset()
        self.dealer.reset()

        for _ in range(HAND_SIZE):
            self.player.draw(self.deck)
            self.dealer.draw(self.deck)

        self.round_number += 1
        self._resolved = False

    def play(self, bet: int) -> RoundResult:
        """Reveal the dealer's hand and settle ``bet`` against the balance."""
        if self._resolved:
            raise RuntimeError("No round in progress; call start_round() first")
        validate_bet(bet, self.tokens)

        player_eval = classify(self.player.hand)
        dealer_eval = classify(self.dealer.hand)
        outcome = compare_evaluations(player_eval, dealer_eval)

        tokens_before = self.tokens
        self.tokens = settle_wager(self.tokens, bet, outcome.result)
        self._resolved = True

        return RoundResult(
            round_number=self.round_number,
            bet=bet,
            outcome=outcome,
            player_hand=list(self.player.hand),
            dealer_hand=list(self.dealer.hand),
            player_eval=player_eval,
            dealer_eval=dealer_eval,
            tokens_before=tokens_before,
            tokens_after=self.tokens,
        )

    def restart(self) -> None:
        self.tokens = self.starting_tokens
        self.round_number = 0
        self.player.reset()
        self.dealer.reset()
        self.deck.reset()
        self._resolved = True

    # ----------------------------------------------------------------------

    @property
    def in_progress(self) -> bool:
        return not self._resolved

    @property
    def is_broke(self) -> bool:
        return self.tokens <= 0
