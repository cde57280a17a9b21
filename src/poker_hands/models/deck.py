"""A standard 52-card deck for dealing random matchups."""

import random
from typing import List, Optional

from poker_hands.models.card import ACE, MIN_RANK, Card, Suit


class Deck:
    """A standard 52-card deck."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self.cards: List[Card] = []
        self.reset()

    def reset(self):
        """Put all 52 cards back, in suit then rank order."""
        self.cards = [Card(rank, suit)
                      for suit in Suit
                      for rank in range(MIN_RANK, ACE + 1)]

    def shuffle(self):
        """Shuffle the deck in place."""
        self._rng.shuffle(self.cards)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.cards):
            raise ValueError(f"Not enough cards in deck. Need {count}, have {len(self.cards)}")

        dealt = self.cards[:count]
        self.cards = self.cards[count:]
        return dealt

    def __len__(self) -> int:
        return len(self.cards)
