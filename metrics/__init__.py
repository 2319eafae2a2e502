"""Aggregate metrics over simulated sessions."""

from .tokens import TokenMetricsAccumulator

__all__ = ["TokenMetricsAccumulator"]
