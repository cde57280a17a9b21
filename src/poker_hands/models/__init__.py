"""Data models for poker hands."""

from poker_hands.models.card import Card, Suit, rank_name, rank_value
from poker_hands.models.hand import Hand
from poker_hands.models.deck import Deck

__all__ = ["Card", "Suit", "rank_name", "rank_value", "Hand", "Deck"]
