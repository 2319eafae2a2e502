"""Simulation helpers for running automated game sessions."""

from .runner import SimulationConfig, SimulationRunner, SimulationStats

__all__ = ["SimulationConfig", "SimulationRunner", "SimulationStats"]
