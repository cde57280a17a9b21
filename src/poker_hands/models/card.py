"""Card and Suit models."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from poker_hands.errors import InvalidCardFormat

RANK_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9,
    "T": 10, "10": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
}
RANK_NAMES = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A",
}
MIN_RANK = 2
ACE = 14


def rank_value(token: str) -> int:
    """Return the numeric rank for a token such as '7', 'T' or 'A'."""
    try:
        return RANK_VALUES[token.upper()]
    except KeyError:
        raise InvalidCardFormat(f"Unknown rank: {token!r}") from None


def rank_name(rank: int) -> str:
    """Return the single-character name of a numeric rank."""
    try:
        return RANK_NAMES[rank]
    except KeyError:
        raise InvalidCardFormat(f"Rank out of range: {rank!r}") from None


class Suit(str, Enum):
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "c": cls.CLUBS, "♣": cls.CLUBS,
            "d": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "h": cls.HEARTS, "♥": cls.HEARTS,
            "s": cls.SPADES, "♠": cls.SPADES,
        }
        if s.lower() in mapping:
            return mapping[s.lower()]
        raise InvalidCardFormat(f"Unknown suit: {s!r}")

    @property
    def symbol(self) -> str:
        return {"C": "♣", "D": "♦", "H": "♥", "S": "♠"}[self.value]


@dataclass(frozen=True, eq=False)
class Card:
    """A single playing card.

    Comparison, equality included, looks at rank only, so
    ``Card.parse("5H") == Card.parse("5C")``. Use :attr:`key` to tell two
    cards of the same rank apart.
    """

    rank: int
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, int) or not MIN_RANK <= self.rank <= ACE:
            raise InvalidCardFormat(f"Rank out of range: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            object.__setattr__(self, "suit", Suit.from_symbol(str(self.suit)))

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like '5H', 'TD' or '10s'.

        All characters but the last name the rank, the last one the suit.
        """
        if not isinstance(s, str) or len(s) not in (2, 3):
            raise InvalidCardFormat(f"Cannot parse card: {s!r}")
        return cls(rank_value(s[:-1]), Suit.from_symbol(s[-1]))

    def compare(self, other: "Card") -> int:
        """Rank-only three-way comparison: 1, -1 or 0."""
        if self.rank > other.rank:
            return 1
        if self.rank < other.rank:
            return -1
        return 0

    def difference(self, other: "Card") -> int:
        """Signed rank difference to another card."""
        return self.rank - other.rank

    def __sub__(self, other: "Card") -> int:
        if not isinstance(other, Card):
            return NotImplemented
        return self.difference(other)

    @property
    def key(self) -> Tuple[int, Suit]:
        """Identity of the card in the deck: (rank, suit)."""
        return self.rank, self.suit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank

    def __hash__(self) -> int:
        return hash(self.rank)

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __repr__(self) -> str:
        return f"Card({self.to_short()!r})"

    def __str__(self) -> str:
        return self.to_short()

    @property
    def pretty(self) -> str:
        """Rank followed by the unicode suit symbol, e.g. 'A♠'."""
        return f"{rank_name(self.rank)}{self.suit.symbol}"

    def to_short(self) -> str:
        """Return short string like 'AS'."""
        return f"{rank_name(self.rank)}{self.suit.value}"
