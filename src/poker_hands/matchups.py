"""Reading head-to-head matchups from text files and tallying the results."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Optional, Union

from poker_hands.errors import InvalidRecord, PokerHandError
from poker_hands.evaluation.ranker import Category
from poker_hands.models.hand import HAND_SIZE, Hand

logger = logging.getLogger(__name__)

RECORD_SIZE = HAND_SIZE * 2


@dataclass(frozen=True, eq=False)
class Matchup:
    """Two hands dealt against each other on one line.

    Matchups compare by identity; use :meth:`winner` to rank the hands.
    """

    player1: Hand
    player2: Hand
    line_number: int = 0

    def winner(self) -> int:
        """1 or 2 for the winning player, 0 for a tie."""
        result = self.player1.compare(self.player2)
        if result > 0:
            return 1
        if result < 0:
            return 2
        return 0

    @property
    def player1_wins(self) -> bool:
        return self.winner() == 1


def parse_matchup(line: str, line_number: int = 0,
                  strict: Optional[bool] = None) -> Matchup:
    """Parse a line of ten card tokens: five for player 1, five for player 2."""
    tokens = line.split()
    if len(tokens) != RECORD_SIZE:
        raise InvalidRecord(
            f"Expected {RECORD_SIZE} cards, got {len(tokens)}", line_number
        )
    return Matchup(
        Hand(tokens[:HAND_SIZE], strict=strict),
        Hand(tokens[HAND_SIZE:], strict=strict),
        line_number,
    )


def iter_matchups(lines: Iterable[str], strict: Optional[bool] = None,
                  skip_invalid: bool = True,
                  on_invalid: Optional[Callable[[PokerHandError], None]] = None,
                  ) -> Iterator[Matchup]:
    """Yield a Matchup per non-blank line.

    Args:
        lines: Lines of ten card tokens each.
        strict: Reject hands holding the same card twice.
        skip_invalid: Log and skip malformed lines. When False the first
            malformed line raises.
        on_invalid: Called with the error of every skipped line.
    """
    for number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            matchup = parse_matchup(line, number, strict=strict)
        except PokerHandError as e:
            if not skip_invalid:
                logger.debug("Malformed matchup on line %d: %r", number, line)
                raise
            logger.warning("Skipping malformed matchup on line %d: %s", number, e)
            if on_invalid is not None:
                on_invalid(e)
            continue
        yield matchup


def read_matchups(path: Union[str, Path], strict: Optional[bool] = None,
                  skip_invalid: bool = True,
                  on_invalid: Optional[Callable[[PokerHandError], None]] = None,
                  ) -> Iterator[Matchup]:
    """Yield matchups from a file, one per non-blank line."""
    logger.debug("Reading matchups from %s", path)
    with open(path, encoding="utf-8") as f:
        yield from iter_matchups(f, strict=strict, skip_invalid=skip_invalid,
                                 on_invalid=on_invalid)


def count_player1_wins(matchups: Iterable[Matchup]) -> int:
    """Number of matchups that player 1 wins outright."""
    return sum(1 for m in matchups if m.player1_wins)


@dataclass
class Tally:
    """Aggregate results over many matchups."""

    player1_wins: int = 0
    player2_wins: int = 0
    ties: int = 0
    # malformed lines skipped while reading
    invalid: int = 0
    # category of the winning hand -> count
    winning_categories: Dict[Category, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.player1_wins + self.player2_wins + self.ties

    def add(self, matchup: Matchup) -> None:
        winner = matchup.winner()
        if winner == 0:
            self.ties += 1
            return
        if winner == 1:
            self.player1_wins += 1
            category = matchup.player1.category
        else:
            self.player2_wins += 1
            category = matchup.player2.category
        self.winning_categories[category] = self.winning_categories.get(category, 0) + 1

    def add_invalid(self, error: PokerHandError) -> None:
        self.invalid += 1


def tally(matchups: Iterable[Matchup]) -> Tally:
    result = Tally()
    for m in matchups:
        result.add(m)
    logger.debug("Tallied %d matchups", result.total)
    return result


def tally_lines(lines: Iterable[str], strict: Optional[bool] = None) -> Tally:
    """Tally matchup lines, counting malformed ones instead of stopping."""
    result = Tally()
    for m in iter_matchups(lines, strict=strict, on_invalid=result.add_invalid):
        result.add(m)
    logger.debug("Tallied %d matchups, skipped %d", result.total, result.invalid)
    return result


def tally_file(path: Union[str, Path], strict: Optional[bool] = None) -> Tally:
    """Tally every matchup in a file; see :func:`tally_lines`."""
    logger.debug("Reading matchups from %s", path)
    with open(path, encoding="utf-8") as f:
        return tally_lines(f, strict=strict)
