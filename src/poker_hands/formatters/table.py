"""Rich table formatting for terminal output."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker_hands.evaluation.comparator import rank_signature
from poker_hands.evaluation.ranker import Category
from poker_hands.matchups import Matchup, Tally
from poker_hands.models.card import Suit, rank_name
from poker_hands.models.hand import Hand

SUIT_STYLES = {
    Suit.CLUBS: "green",
    Suit.DIAMONDS: "blue",
    Suit.HEARTS: "red",
    Suit.SPADES: "white",
}


def hand_text(hand: Hand) -> Text:
    """Hand cards as coloured rich text, e.g. 'A♠ K♥ ...'."""
    text = Text()
    for i, card in enumerate(hand.cards):
        if i:
            text.append(" ")
        text.append(card.pretty, style=SUIT_STYLES[card.suit])
    return text


def signature_str(hand: Hand) -> str:
    return " ".join(rank_name(r) for r in rank_signature(hand))


class TableFormatter:
    """Format hands and results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_analysis(self, hand: Hand, title: str = "Hand") -> None:
        """Print a single hand's category as a Rich panel."""
        analysis = hand.analysis
        content = Text()
        content.append_text(hand_text(hand))
        content.append(f"\n{analysis.category.display_name}", style="bold cyan")
        content.append(f"\nMade with: {' '.join(str(c) for c in analysis.cards)}")
        content.append(f"\nSignature: {signature_str(hand)}", style="dim")
        self.console.print(Panel(content, title=title))

    def print_matchup(self, matchup: Matchup) -> None:
        """Print both hands side by side and the winner."""
        table = Table(title="Matchup")
        table.add_column("Player", style="cyan")
        table.add_column("Cards")
        table.add_column("Category")
        table.add_column("Signature", style="dim")

        winner = matchup.winner()
        for player, hand in ((1, matchup.player1), (2, matchup.player2)):
            label = f"Player {player}"
            if winner == player:
                label = f"[bold green]{label} ★[/bold green]"
            table.add_row(label, hand_text(hand),
                          hand.category.display_name, signature_str(hand))

        self.console.print(table)
        if winner == 0:
            self.console.print("[yellow]Tie.[/yellow]")
        else:
            self.console.print(f"[green]Player {winner} wins.[/green]")

    def print_tally(self, result: Tally) -> None:
        """Print aggregate results and winning-hand categories."""
        if not result.total:
            self.console.print("[dim]No matchups found.[/dim]")
            if result.invalid:
                self.console.print(f"[yellow]{result.invalid} malformed line(s) skipped.[/yellow]")
            return

        table = Table(title=f"Results ({result.total} matchups)")
        table.add_column("Outcome", style="cyan")
        table.add_column("Count", justify="right", style="green")
        table.add_column("Share", justify="right")
        for label, count in (("Player 1 wins", result.player1_wins),
                             ("Player 2 wins", result.player2_wins),
                             ("Ties", result.ties)):
            table.add_row(label, str(count), f"{100.0 * count / result.total:.1f}%")
        if result.invalid:
            table.add_row("[yellow]Skipped (malformed)[/yellow]", str(result.invalid), "")
        self.console.print(table)

        if not result.winning_categories:
            return
        by_category = Table(title="Winning Hands by Category")
        by_category.add_column("Category", style="cyan")
        by_category.add_column("Wins", justify="right")
        for category in sorted(Category, reverse=True):
            count = result.winning_categories.get(category, 0)
            if count:
                by_category.add_row(category.display_name, str(count))
        self.console.print(by_category)
