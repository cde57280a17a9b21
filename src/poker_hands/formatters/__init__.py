"""Output formatting for the terminal."""

from poker_hands.formatters.table import TableFormatter

__all__ = ["TableFormatter"]
