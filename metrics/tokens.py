"""Token EV and win-rate aggregation for game sessions."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict


@dataclass
class _SessionSnapshot:
    total_token_delta: int = 0
    total_wagered: int = 0
    rounds_played: int = 0
    wins: int = 0
    history: Deque[int] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.history is None:
            self.history = deque()

    def record(self, token_delta: int, bet: int) -> None:
        self.rounds_played += 1
        self.total_token_delta += token_delta
        self.total_wagered += bet
        if token_delta > 0:
            self.wins += 1
        self.history.append(token_delta)

    def ev_per_round(self) -> float:
        if not self.rounds_played:
            return 0.0
        return self.total_token_delta / self.rounds_played

    def rolling_ev_per_round(self) -> float:
        if not self.history:
            return 0.0
        return sum(self.history) / len(self.history)

    def win_rate(self) -> float:
        if not self.rounds_played:
            return 0.0
        return self.wins / self.rounds_played

    def return_on_wagered(self) -> float:
        if not self.total_wagered:
            return 0.0
        return self.total_token_delta / self.total_wagered


class TokenMetricsAccumulator:
    """Track the player's token EV from round summaries."""

    def __init__(self, *, rolling_window: int = 200):
        self.rolling_window = rolling_window
        self._snapshot = _SessionSnapshot(history=deque(maxlen=rolling_window))

    def record_round(self, summary: Dict) -> None:
        result = summary.get("result")
        if result is None:
            return
        self._snapshot.record(result.token_delta, result.bet)

    def as_dict(self) -> Dict:
        snapshot = self._snapshot
        return {
            "rounds": snapshot.rounds_played,
            "token_delta": snapshot.total_token_delta,
            "tokens_wagered": snapshot.total_wagered,
            "ev_per_round": snapshot.ev_per_round(),
            "win_rate": snapshot.win_rate(),
            "return_on_wagered": snapshot.return_on_wagered(),
            "rolling_window": snapshot.history.maxlen or len(snapshot.history),
            "rolling_ev_per_round": snapshot.rolling_ev_per_round(),
        }
