"""Preflop strength heat map."""

from typing import Iterable, Optional, Union

import numpy as np
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from pokerheat.game.cards import (
    RANK_STR, RANKS, CardInput, StartingHand, parse_cards,
)
from pokerheat.game.preflop import (
    PreflopCategory, categorize, score_starting_hand,
)


# Standard hand matrix layout (13x13)
# Pairs on diagonal, suited above, offsuit below
HAND_MATRIX = []
for i, r1 in enumerate(RANKS):
    row = []
    for j, r2 in enumerate(RANKS):
        if i == j:
            row.append(f"{r1}{r2}")  # Pair
        elif i < j:
            row.append(f"{r1}{r2}s")  # Suited (above diagonal)
        else:
            row.append(f"{r2}{r1}o")  # Offsuit (below diagonal)
    HAND_MATRIX.append(row)

CATEGORY_STYLES = {
    PreflopCategory.PREMIUM: Style(bgcolor="green", color="white"),
    PreflopCategory.STRONG: Style(bgcolor="yellow", color="black"),
    PreflopCategory.PLAYABLE: Style(bgcolor="orange3", color="black"),
    PreflopCategory.SPECULATIVE: Style(bgcolor="grey30", color="grey70"),
}
HIGHLIGHT_STYLE = Style(bgcolor="blue", color="white", bold=True)


def preflop_matrix() -> np.ndarray:
    """13x13 matrix of preflop strengths in HAND_MATRIX layout."""
    matrix = np.zeros((13, 13))
    for i in range(13):
        for j in range(13):
            hand = StartingHand.from_string(HAND_MATRIX[i][j])
            matrix[i, j] = score_starting_hand(hand)
    return matrix


def matrix_position(canonical: str) -> tuple[int, int]:
    """Row and column of a canonical hand ('AKs', 'T9o', 'QQ') in the grid."""
    hand = StartingHand.from_string(canonical)
    hi = RANKS.index(RANK_STR[hand.card1.rank])
    lo = RANKS.index(RANK_STR[hand.card2.rank])
    if hand.is_pair or hand.is_suited:
        return hi, lo
    return lo, hi


class HeatmapDisplay:
    """
    Display preflop strengths as a 13x13 matrix in the terminal.

    Cells are coloured by preflop category and show the score x100.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.matrix = preflop_matrix()

    def build_table(self, title: str = "Preflop Strength", highlight: Optional[str] = None) -> Table:
        """Build the rich table, optionally highlighting one canonical hand."""
        table = Table(title=title, show_header=True, header_style="bold")

        table.add_column("", style="bold")
        for rank in RANKS:
            table.add_column(rank, justify="center")

        marked = matrix_position(highlight) if highlight else None

        for i, rank in enumerate(RANKS):
            row = [rank]
            for j in range(13):
                strength = float(self.matrix[i, j])
                if marked == (i, j):
                    style = HIGHLIGHT_STYLE
                else:
                    style = CATEGORY_STYLES[categorize(strength)]
                cell = f"{strength*100:.0f}"
                row.append(Text(cell.center(3), style=style))
            table.add_row(*row)

        return table

    def display_terminal(self, title: str = "Preflop Strength", highlight: Optional[str] = None) -> None:
        """Print the heat map with a category legend."""
        self.console.print(self.build_table(title=title, highlight=highlight))

        self.console.print("\nLegend: ", end="")
        for category, style in CATEGORY_STYLES.items():
            self.console.print(Text(f" {category.value} ", style=style), end=" ")
        self.console.print()


def display_heatmap(
    hole_cards: Optional[Union[str, Iterable[CardInput]]] = None,
    title: str = "Preflop Strength",
    console: Optional[Console] = None,
) -> None:
    """
    Convenience function to print the heat map.

    Args:
        hole_cards: Optional hole cards whose cell is highlighted
        title: Display title
        console: Console to print to (a new one by default)
    """
    highlight = None
    parsed = parse_cards(hole_cards)
    if len(parsed) >= 2:
        highlight = StartingHand(parsed[0], parsed[1]).canonical

    HeatmapDisplay(console).display_terminal(title=title, highlight=highlight)
