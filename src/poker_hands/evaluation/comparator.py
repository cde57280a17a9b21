"""Ordering between two hands."""

import logging
from typing import List, Sequence

from poker_hands.evaluation.classifier import HandClassifier
from poker_hands.models.hand import Hand

logger = logging.getLogger(__name__)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def rank_signature(hand: Hand) -> List[int]:
    """Distinct ranks ordered by group size, then by rank, both descending.

    Full house 44422 gives [4, 2]; two pair 99553 gives [9, 5, 3]; a hand
    with no repeated rank gives its ranks from highest to lowest.
    """
    groups = HandClassifier(hand).groups_of_size(0)
    groups.sort(key=lambda g: (len(g), g[0].rank), reverse=True)
    return [g[0].rank for g in groups]


def deltas(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Element-wise differences of two sequences, over the shorter length."""
    return [x - y for x, y in zip(a, b)]


class HandComparator:
    """Compares two hands: category, then rank signature, then raw cards."""

    @staticmethod
    def compare(hand1: Hand, hand2: Hand) -> int:
        """Compare two hands.

        Args:
            hand1: First hand.
            hand2: Second hand.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie.
        """
        category1 = hand1.analysis.category
        category2 = hand2.analysis.category
        if category1 > category2:
            return 1
        if category1 < category2:
            return -1

        # Same category: highest-priority differing rank decides
        for d in deltas(rank_signature(hand1), rank_signature(hand2)):
            if d != 0:
                logger.debug("%s vs %s decided by signature delta %d", hand1, hand2, d)
                return _sign(d)

        # Last resort: sorted cards, highest differing position wins
        card_deltas = [d for d in deltas(hand1.ranks, hand2.ranks) if d != 0]
        if card_deltas:
            return _sign(card_deltas[-1])
        return 0

    @staticmethod
    def beats(hand1: Hand, hand2: Hand) -> bool:
        """True when hand1 wins outright."""
        return HandComparator.compare(hand1, hand2) > 0
