"""Hand classification, ranking and comparison."""

from poker_hands.evaluation.classifier import HandClassifier
from poker_hands.evaluation.ranker import Analysis, Category, HandRanker
from poker_hands.evaluation.comparator import HandComparator, rank_signature

__all__ = [
    "HandClassifier",
    "Analysis", "Category", "HandRanker",
    "HandComparator", "rank_signature",
]
