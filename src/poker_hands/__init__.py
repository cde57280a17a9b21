"""Poker Hands - five-card poker hand ranking and comparison."""

__version__ = "0.1.0"
