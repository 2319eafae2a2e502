"""Automated five-card showdown sessions with CLI support."""
from __future__ import annotations

import argparse
import importlib
import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from game import STARTING_TOKENS, GameSession, RoundResult
from metrics.tokens import TokenMetricsAccumulator
from round_logging.round_logger import RoundLogger, create_logger
from showdown import Result

DEFAULT_AGENT = "agents.fixed_bet.FixedBetAgent"


# ---------------------------------------------------------------------------
# Configuration structures
# ---------------------------------------------------------------------------


def _load_agent(agent_path: str, options: Optional[Dict] = None):
    """Instantiate an agent given a dotted path like ``agents.fixed_bet.FixedBetAgent``."""

    if ":" in agent_path:
        module_name, class_name = agent_path.split(":", 1)
    else:
        module_name, class_name = agent_path.rsplit(".", 1)

    module = importlib.import_module(module_name)
    agent_cls = getattr(module, class_name)
    return agent_cls(**(options or {}))


@dataclass
class SimulationConfig:
    num_rounds: int = 1
    starting_tokens: int = STARTING_TOKENS
    seed: Optional[int] = None
    agent: str = DEFAULT_AGENT
    agent_options: Dict = field(default_factory=dict)
    stop_when_broke: bool = True
    checkpoint_interval: Optional[int] = None
    checkpoint_path: Optional[Path] = None
    round_log_mode: Optional[str] = None
    round_log_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "SimulationConfig":
        round_log = data.get("round_log", {})
        checkpoint_path = data.get("checkpoint_path")
        round_log_path = round_log.get("path")
        return cls(
            num_rounds=data.get("num_rounds", 1),
            starting_tokens=data.get("starting_tokens", STARTING_TOKENS),
            seed=data.get("seed"),
            agent=data.get("agent", DEFAULT_AGENT),
            agent_options=data.get("agent_options", {}),
            stop_when_broke=data.get("stop_when_broke", True),
            checkpoint_interval=data.get("checkpoint_interval"),
            checkpoint_path=Path(checkpoint_path) if checkpoint_path else None,
            round_log_mode=round_log.get("mode"),
            round_log_path=Path(round_log_path) if round_log_path else None,
        )


# ---------------------------------------------------------------------------
# Stats & hooks
# ---------------------------------------------------------------------------


class RoundEventPublisher:
    def __init__(self) -> None:
        self._subscribers: List[Callable[[Dict], None]] = []

    def subscribe(self, callback: Callable[[Dict], None]) -> None:
        self._subscribers.append(callback)

    def publish(self, payload: Dict) -> None:
        for callback in list(self._subscribers):
            callback(payload)


@dataclass
class SimulationStats:
    rounds_played: int = 0
    tokens_wagered: int = 0
    final_tokens: Optional[int] = None
    result_counts: Dict[str, int] = field(default_factory=dict)
    category_counts: Dict[str, int] = field(default_factory=dict)

    def update_from_summary(self, summary: Dict) -> None:
        result: RoundResult = summary["result"]
        self.rounds_played += 1
        self.tokens_wagered += result.bet
        self.final_tokens = result.tokens_after
        verdict = result.outcome.result.value
        self.result_counts[verdict] = self.result_counts.get(verdict, 0) + 1
        # Tally the player's own hand, not the winning side's.
        label = result.player_eval.category.label
        self.category_counts[label] = self.category_counts.get(label, 0) + 1

    def as_dict(self) -> Dict:
        return {
            "rounds_played": self.rounds_played,
            "tokens_wagered": self.tokens_wagered,
            "final_tokens": self.final_tokens,
            "wins": self.result_counts.get(Result.WIN.value, 0),
            "losses": self.result_counts.get(Result.LOSE.value, 0),
            "ties": self.result_counts.get(Result.TIE.value, 0),
            "category_counts": self.category_counts,
        }


# ---------------------------------------------------------------------------
# Core simulation logic
# ---------------------------------------------------------------------------


class SimulationRunner:
    def __init__(self, config: SimulationConfig):
        self.config = config
        self.publisher = RoundEventPublisher()
        self.stats = SimulationStats()
        rng = random.Random(config.seed) if config.seed is not None else None
        self.session = GameSession(config.starting_tokens, rng=rng)
        self.agent = _load_agent(config.agent, config.agent_options)

    def subscribe(self, callback: Callable[[Dict], None]) -> None:
        self.publisher.subscribe(callback)

    def _play_round(self, logger: Optional[RoundLogger]) -> Dict:
        self.session.start_round()
        bet = self.agent.bet(hand=list(self.session.player.hand), tokens=self.session.tokens)
        result = self.session.play(bet)
        if logger is not None:
            logger.log_round(result)
        return {
            "round": result.round_number,
            "result": result,
            "tokens": self.session.tokens,
        }

    def _handle_summary(self, summary: Dict) -> None:
        self.stats.update_from_summary(summary)
        self.publisher.publish(summary)
        self._maybe_checkpoint()

    def _maybe_checkpoint(self) -> None:
        if not self.config.checkpoint_interval:
            return
        if self.stats.rounds_played % self.config.checkpoint_interval != 0:
            return

        checkpoint_path = self.config.checkpoint_path or Path("simulation_checkpoint.json")
        data = {"stats": self.stats.as_dict()}
        checkpoint_path = Path(checkpoint_path)
        checkpoint_path.parent.mkdir(parents=True, exist_ok=True)
        checkpoint_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def _create_logger(self) -> Optional[RoundLogger]:
        if not self.config.round_log_mode:
            return None
        destination = self.config.round_log_path
        if destination:
            destination = destination.expanduser()
        session_id = str(self.config.seed) if self.config.seed is not None else "unseeded"
        return create_logger(
            self.config.round_log_mode,
            destination=destination,
            session_id=session_id,
        )

    def run(self) -> SimulationStats:
        logger = self._create_logger()
        try:
            for _ in range(self.config.num_rounds):
                if self.config.stop_when_broke and self.session.is_broke:
                    break
                if self.session.is_broke:
                    self.session.restart()
                self._handle_summary(self._play_round(logger))
        finally:
            if logger is not None:
                logger.close()

        return self.stats


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Five-card showdown simulation harness")
    parser.add_argument("--config", type=Path, help="Optional JSON config file", default=None)
    parser.add_argument("--rounds", type=int, help="Number of rounds to play", default=None)
    parser.add_argument("--tokens", type=int, help="Starting token balance", default=None)
    parser.add_argument("--seed", type=int, help="RNG seed for shuffling", default=None)
    parser.add_argument("--agent", help="Dotted path of the wagering agent", default=None)
    parser.add_argument(
        "--keep-playing",
        action="store_true",
        help="Restart with a fresh balance instead of stopping when broke",
    )
    parser.add_argument("--checkpoint-interval", type=int, help="Rounds between checkpoints", default=None)
    parser.add_argument("--checkpoint-path", type=Path, help="Where to write checkpoint stats", default=None)
    parser.add_argument("--verbose", action="store_true", help="Stream per-round results")
    parser.add_argument(
        "--round-log-mode",
        choices=["stdout", "jsonl", "parquet"],
        help="Where to stream structured round logs",
        default=None,
    )
    parser.add_argument(
        "--round-log-path",
        type=Path,
        help="Destination file for JSONL or Parquet logs",
        default=None,
    )
    return parser.parse_args(argv)


def _load_config_from_file(config_path: Optional[Path]) -> Dict:
    if not config_path:
        return {}
    return json.loads(config_path.read_text(encoding="utf-8"))


def _build_simulation_config(args: argparse.Namespace) -> SimulationConfig:
    config = SimulationConfig.from_dict(_load_config_from_file(args.config))

    if args.rounds:
        config.num_rounds = args.rounds
    if args.tokens:
        config.starting_tokens = args.tokens
    if args.seed is not None:
        config.seed = args.seed
    if args.agent:
        config.agent = args.agent
    if args.keep_playing:
        config.stop_when_broke = False
    if args.checkpoint_interval:
        config.checkpoint_interval = args.checkpoint_interval
    if args.checkpoint_path:
        config.checkpoint_path = args.checkpoint_path
    if args.round_log_mode:
        config.round_log_mode = args.round_log_mode
    if args.round_log_path:
        config.round_log_path = args.round_log_path

    config.num_rounds = max(1, config.num_rounds)
    return config


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config = _build_simulation_config(args)
    runner = SimulationRunner(config)
    metrics = TokenMetricsAccumulator()
    runner.subscribe(metrics.record_round)

    if args.verbose:
        runner.subscribe(
            lambda summary: print(
                f"round={summary['round']} {summary['result'].status_message()} tokens={summary['tokens']}"
            )
        )

    stats = runner.run()
    print(json.dumps({"stats": stats.as_dict(), "metrics": metrics.as_dict()}, indent=2))


if __name__ == "__main__":
    main()
