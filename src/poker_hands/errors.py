"""Exceptions raised by the hand evaluation engine."""


class PokerHandError(Exception):
    """Base class for every error raised by poker_hands."""


class InvalidCardFormat(PokerHandError, ValueError):
    """A card token has the wrong length or an unknown rank/suit."""


class InvalidHandSize(PokerHandError, ValueError):
    """A hand was built from something other than five cards."""


class InvalidCardType(PokerHandError, TypeError):
    """A hand item was neither a Card nor card notation."""


class DuplicateCard(PokerHandError, ValueError):
    """The same card appears twice in a hand checked against the deck."""


class InvalidRecord(PokerHandError, ValueError):
    """A matchup line does not hold exactly ten card tokens."""

    def __init__(self, message: str, line_number: int = 0):
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class NoCategoryMatched(PokerHandError, RuntimeError):
    """No detector matched a hand; this indicates a bug in a detector."""
