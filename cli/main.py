"""Poker Hands CLI — Typer-based command line interface."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from poker_hands.errors import PokerHandError

app = typer.Typer(
    name="poker-hands",
    help="Five-card poker hand ranking and comparison",
    no_args_is_help=True,
)
console = Console()


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v",
                                 help="Show debug logging"),
):
    """Rank and compare five-card poker hands."""
    if verbose:
        from poker_hands import config
        logging.basicConfig(
            level=config.LOG_LEVEL,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def analyze(
    cards: List[str] = typer.Argument(..., help="Five cards, e.g. 5H 5C 6S 7S KD"),
    strict: bool = typer.Option(False, "--strict", help="Reject duplicate cards"),
):
    """Show the category of a single hand."""
    from poker_hands.formatters.table import TableFormatter
    from poker_hands.models.hand import Hand

    try:
        hand = Hand(cards, strict=strict or None)
    except PokerHandError as e:
        _fail(f"Invalid hand: {e}")

    TableFormatter(console).print_analysis(hand)


@app.command()
def compare(
    cards: List[str] = typer.Argument(...,
                                      help="Ten cards: five for player 1, then five for player 2"),
    strict: bool = typer.Option(False, "--strict", help="Reject duplicate cards"),
):
    """Compare two hands and show the winner."""
    from poker_hands.formatters.table import TableFormatter
    from poker_hands.matchups import parse_matchup

    try:
        matchup = parse_matchup(" ".join(cards), strict=strict or None)
    except PokerHandError as e:
        _fail(f"Invalid matchup: {e}")

    TableFormatter(console).print_matchup(matchup)


@app.command()
def count(
    file: Optional[Path] = typer.Argument(None,
                                          help="Matchup file, one pair of hands per line"),
    details: bool = typer.Option(False, "--details", "-d",
                                 help="Show a breakdown of all results"),
    strict: bool = typer.Option(False, "--strict", help="Reject duplicate cards"),
):
    """Count how many matchups player 1 wins."""
    from poker_hands import config
    from poker_hands.formatters.table import TableFormatter
    from poker_hands.matchups import tally_file

    path = file or config.MATCHUP_FILE
    if not path.is_file():
        _fail(f"File not found: {path}")

    result = tally_file(path, strict=strict or None)

    console.print(result.player1_wins)
    if result.invalid:
        console.print(f"[yellow]Skipped {result.invalid} malformed line(s) in {path.name}.[/yellow]")
    if details:
        TableFormatter(console).print_tally(result)


@app.command()
def deal(
    seed: Optional[int] = typer.Option(None, "--seed", "-s",
                                       help="Random seed for a repeatable deal"),
):
    """Deal two random hands from a shuffled deck and compare them."""
    from poker_hands.formatters.table import TableFormatter
    from poker_hands.matchups import Matchup
    from poker_hands.models.deck import Deck
    from poker_hands.models.hand import Hand

    deck = Deck(seed)
    deck.shuffle()
    matchup = Matchup(Hand(deck.deal(5)), Hand(deck.deal(5)))
    TableFormatter(console).print_matchup(matchup)


if __name__ == "__main__":
    app()
