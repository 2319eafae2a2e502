"""Structured event logging for game sessions."""

from .round_logger import RoundLogger, create_logger

__all__ = ["RoundLogger", "create_logger"]
