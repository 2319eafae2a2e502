from __future__ import annotations

"""Wagering agent exports for dotted-path loading by the simulation runner."""

from .all_in import AllInAgent
from .fixed_bet import FixedBetAgent
from .random_bet import RandomBetAgent
from .strength_scaled import StrengthScaledAgent

__all__ = [
    "AllInAgent",
    "FixedBetAgent",
    "RandomBetAgent",
    "StrengthScaledAgent",
]
