"""Structured round logging utilities for game sessions."""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Optional dependency for Parquet output
    import pyarrow as pa  # type: ignore
    import pyarrow.parquet as pq  # type: ignore
except Exception:  # pragma: no cover - pyarrow is optional
    pa = None  # type: ignore
    pq = None  # type: ignore


@dataclass
class RoundEvent:
    """Resolved round: both hands, the verdict and the token movement."""

    timestamp: str
    session_id: str
    event: str
    round: int
    bet: int
    result: str
    category: str
    player_hand: List[str]
    dealer_hand: List[str]
    player_category: str
    dealer_category: str
    tokens_before: int
    tokens_after: int

    def as_dict(self) -> Dict:
        return {
            "timestamp": self.timestamp,
            "session_id": self.session_id,
            "event": self.event,
            "round": self.round,
            "bet": self.bet,
            "result": self.result,
            "category": self.category,
            "player_hand": self.player_hand,
            "dealer_hand": self.dealer_hand,
            "player_category": self.player_category,
            "dealer_category": self.dealer_category,
            "tokens_before": self.tokens_before,
            "tokens_after": self.tokens_after,
        }


class _BaseWriter:
    def append(self, event: Dict[str, Any]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:  # pragma: no cover - interface
        return None


class StdoutWriter(_BaseWriter):
    def append(self, event: Dict[str, Any]) -> None:
        print(json.dumps(event, separators=(",", ":"), ensure_ascii=False))


class JSONLWriter(_BaseWriter):
    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("a", encoding="utf-8")

    def append(self, event: Dict[str, Any]) -> None:
        self._handle.write(json.dumps(event, ensure_ascii=False) + "\n")
        self._handle.flush()

    def close(self) -> None:
        self._handle.close()


class ParquetWriter(_BaseWriter):
    def __init__(self, path: Path) -> None:
        if pq is None or pa is None:  # pragma: no cover - import-time guard
            raise RuntimeError("pyarrow is required for Parquet logging but is not installed")
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._writer: Optional["pq.ParquetWriter"] = None

    def append(self, event: Dict[str, Any]) -> None:
        table = pa.Table.from_pylist([event])
        if self._writer is None:
            self._writer = pq.ParquetWriter(self.path, table.schema)
        self._writer.write_table(table)

    def close(self) -> None:
        if self._writer is not None:
            self._writer.close()
            self._writer = None


class RoundLogger:
    """Facade over an append-only writer for round events."""

    def __init__(self, writer: _BaseWriter, session_id: str) -> None:
        self._writer = writer
        self.session_id = session_id

    def log_round(self, result: Any) -> None:
        """Record a resolved ``game.RoundResult``."""
        payload = result.as_dict()
        event = RoundEvent(
            timestamp=datetime.now(timezone.utc).isoformat(),
            session_id=self.session_id,
            event="round",
            round=payload["round"],
            bet=payload["bet"],
            result=payload["result"],
            category=payload["category"],
            player_hand=payload["player_hand"],
            dealer_hand=payload["dealer_hand"],
            player_category=payload["player_category"],
            dealer_category=payload["dealer_category"],
            tokens_before=payload["tokens_before"],
            tokens_after=payload["tokens_after"],
        )
        self._writer.append(event.as_dict())

    def close(self) -> None:
        self._writer.close()


def create_logger(mode: str, *, destination: Optional[Path], session_id: str) -> RoundLogger:
    """Factory that builds a logger for the requested mode."""

    normalized = mode.lower()
    if normalized == "stdout":
        writer = StdoutWriter()
    elif normalized == "jsonl":
        if not destination:
            raise ValueError("JSONL logging requires a destination path")
        writer = JSONLWriter(destination)
    elif normalized == "parquet":
        if not destination:
            raise ValueError("Parquet logging requires a destination path")
        writer = ParquetWriter(destination)
    else:
        raise ValueError(f"Unknown round log mode: {mode}")

    return RoundLogger(writer, session_id=session_id)
