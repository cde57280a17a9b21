"""Category detectors for a five-card hand."""

from typing import Dict, List, Optional

from poker_hands.models.card import ACE, Card
from poker_hands.models.hand import Hand

CardGroup = List[Card]


class HandClassifier:
    """Tests a hand against every poker category.

    Each detector returns the cards that make up the category, or ``None``
    when the hand does not qualify. Detectors are independent of each other:
    a full house also satisfies ``three_of_a_kind`` and ``one_pair``.
    """

    def __init__(self, hand: Hand):
        self.hand = hand

    def groups_of_size(self, n: int = 0) -> List[CardGroup]:
        """Partition the cards by rank, in order of first appearance.

        Args:
            n: Only return groups holding exactly ``n`` cards. ``0`` returns
                every group.
        """
        groups: Dict[int, CardGroup] = {}
        for card in self.hand.cards:
            groups.setdefault(card.rank, []).append(card)
        if n == 0:
            return list(groups.values())
        return [g for g in groups.values() if len(g) == n]

    def high_card(self) -> Optional[CardGroup]:
        return [self.hand.cards_by_val[-1]]

    def one_pair(self) -> Optional[CardGroup]:
        pairs = self.groups_of_size(2)
        if len(pairs) != 1:
            return None
        return pairs[0]

    def two_pairs(self) -> Optional[CardGroup]:
        pairs = self.groups_of_size(2)
        if len(pairs) != 2:
            return None
        return pairs[0] + pairs[1]

    def three_of_a_kind(self) -> Optional[CardGroup]:
        threes = self.groups_of_size(3)
        if len(threes) != 1:
            return None
        return threes[0]

    def straight(self) -> Optional[CardGroup]:
        """Five consecutive ranks. Aces are high only: A-2-3-4-5 does not count."""
        cards = list(self.hand.cards_by_val)
        for low, high in zip(cards, cards[1:]):
            if high.rank - low.rank != 1:
                return None
        return cards

    def flush(self) -> Optional[CardGroup]:
        first = self.hand.cards[0].suit
        if any(c.suit != first for c in self.hand.cards):
            return None
        return list(self.hand.cards)

    def full_house(self) -> Optional[CardGroup]:
        three = self.three_of_a_kind()
        pair = self.one_pair()
        if three is None or pair is None:
            return None
        return three + pair

    def four_of_a_kind(self) -> Optional[CardGroup]:
        fours = self.groups_of_size(4)
        if len(fours) != 1:
            return None
        return fours[0]

    def straight_flush(self) -> Optional[CardGroup]:
        straight = self.straight()
        if straight is None or self.flush() is None:
            return None
        return straight

    def royal_flush(self) -> Optional[CardGroup]:
        if self.straight_flush() is None or self.hand.cards_by_val[-1].rank != ACE:
            return None
        return list(self.hand.cards)
