"""Best-category selection for a hand."""

from enum import IntEnum
from typing import Callable, List, NamedTuple, Optional, Tuple

from poker_hands.errors import NoCategoryMatched
from poker_hands.evaluation.classifier import CardGroup, HandClassifier
from poker_hands.models.card import Card
from poker_hands.models.hand import Hand


class Category(IntEnum):
    """Hand categories from worst to best."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'Full House'."""
        names = {
            Category.HIGH_CARD: "High Card",
            Category.ONE_PAIR: "One Pair",
            Category.TWO_PAIR: "Two Pair",
            Category.THREE_OF_A_KIND: "Three of a Kind",
            Category.STRAIGHT: "Straight",
            Category.FLUSH: "Flush",
            Category.FULL_HOUSE: "Full House",
            Category.FOUR_OF_A_KIND: "Four of a Kind",
            Category.STRAIGHT_FLUSH: "Straight Flush",
            Category.ROYAL_FLUSH: "Royal Flush",
        }
        return names[self]


Detector = Callable[[HandClassifier], Optional[CardGroup]]

DETECTORS: List[Tuple[Category, Detector]] = [
    (Category.ROYAL_FLUSH, HandClassifier.royal_flush),
    (Category.STRAIGHT_FLUSH, HandClassifier.straight_flush),
    (Category.FOUR_OF_A_KIND, HandClassifier.four_of_a_kind),
    (Category.FULL_HOUSE, HandClassifier.full_house),
    (Category.FLUSH, HandClassifier.flush),
    (Category.STRAIGHT, HandClassifier.straight),
    (Category.THREE_OF_A_KIND, HandClassifier.three_of_a_kind),
    (Category.TWO_PAIR, HandClassifier.two_pairs),
    (Category.ONE_PAIR, HandClassifier.one_pair),
    (Category.HIGH_CARD, HandClassifier.high_card),
]


class Analysis(NamedTuple):
    """The winning category of a hand and the cards that form it."""
    category: Category
    cards: List[Card]


class HandRanker:
    """Selects the single best category for a hand."""

    def __init__(self, hand: Hand):
        self.hand = hand
        self.classifier = HandClassifier(hand)

    def matches(self) -> List[Analysis]:
        """Every category the hand satisfies."""
        results = []
        for category, detector in DETECTORS:
            cards = detector(self.classifier)
            if cards is not None:
                results.append(Analysis(category, cards))
        return results

    def analyze(self) -> Analysis:
        matched = self.matches()
        if not matched:
            raise NoCategoryMatched(f"No category matched hand {self.hand}")
        return max(matched, key=lambda a: a.category)
