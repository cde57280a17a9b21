"""Hand - five cards held by one player."""

import logging
from collections import Counter
from functools import cached_property
from typing import Iterable, List, Optional, Tuple, Union

from poker_hands.errors import DuplicateCard, InvalidCardType, InvalidHandSize
from poker_hands.models.card import Card

logger = logging.getLogger(__name__)

HAND_SIZE = 5

# A hand item is either an already-parsed Card or its notation, e.g. "QH".
HandItem = Union[Card, str]


def resolve_card(item: HandItem) -> Card:
    """Turn one hand item into a Card."""
    if isinstance(item, Card):
        return item
    if isinstance(item, str):
        return Card.parse(item)
    raise InvalidCardType(
        f"Cards must be Card objects or strings, got {type(item).__name__}"
    )


class Hand:
    """An immutable five-card poker hand.

    Cards keep the order they were supplied in. Comparison operators rank
    hands with :class:`~poker_hands.evaluation.comparator.HandComparator`,
    so ``==`` means the two hands tie, not that they hold the same cards.
    """

    def __init__(self, cards: Iterable[HandItem], strict: Optional[bool] = None):
        try:
            items = list(cards)
        except TypeError:
            raise InvalidCardType(
                f"Hand cards must be an iterable of cards, got {type(cards).__name__}"
            ) from None
        if len(items) != HAND_SIZE:
            raise InvalidHandSize(
                f"Must be a {HAND_SIZE} card hand, got {len(items)} cards"
            )
        self._cards: Tuple[Card, ...] = tuple(resolve_card(i) for i in items)

        if strict is None:
            from poker_hands import config
            strict = config.STRICT_DECK
        if strict:
            self._check_duplicates()

    @classmethod
    def parse(cls, text: str, strict: Optional[bool] = None) -> "Hand":
        """Build a hand from whitespace-separated notation like '5H 5C 6S 7S KD'."""
        return cls(text.split(), strict=strict)

    def _check_duplicates(self) -> None:
        counts = Counter(c.key for c in self._cards)
        dupes = sorted(str(Card(rank, suit)) for (rank, suit), n in counts.items() if n > 1)
        if dupes:
            raise DuplicateCard(f"Duplicate cards in hand: {', '.join(dupes)}")

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @cached_property
    def cards_by_val(self) -> Tuple[Card, ...]:
        """Cards sorted ascending by rank; equal ranks keep supplied order."""
        return tuple(sorted(self._cards, key=lambda c: c.rank))

    @property
    def ranks(self) -> List[int]:
        return [c.rank for c in self.cards_by_val]

    @cached_property
    def analysis(self):
        """Best category for this hand, as a ranker Analysis."""
        from poker_hands.evaluation.ranker import HandRanker
        result = HandRanker(self).analyze()
        logger.debug("Analyzed %s as %s", self, result.category.name)
        return result

    def analyze(self):
        """Return the (category, cards) pair of the best matching category."""
        return self.analysis

    @property
    def category(self):
        return self.analysis.category

    def compare(self, other: "Hand") -> int:
        from poker_hands.evaluation.comparator import HandComparator
        return HandComparator.compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        # Tied hands always hold the same multiset of ranks.
        return hash(tuple(self.ranks))

    def __lt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Hand") -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) >= 0

    def __iter__(self):
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({self})"

    def __str__(self) -> str:
        return " ".join(c.to_short() for c in self._cards)
