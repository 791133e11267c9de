#!/usr/bin/env python3
"""Evaluate a hold'em hand from the command line.

Shows the made hand, preflop strength, draws and approximate equity,
and optionally compares against an opponent's hole cards.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pokerheat.game import (
    Board, ParseError, parse_card,
    calculate_draws, compare_results, evaluate_poker_hand, get_preflop_strength,
)


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate a hold'em hand and its drawing potential"
    )
    parser.add_argument(
        "hole",
        help="Hole cards, comma separated (e.g. Ah,Kh)",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Community cards in dealing order (e.g. Qh,Jh,2s,9c)",
    )
    parser.add_argument(
        "--vs",
        help="Opponent hole cards to compare against",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging (dropped card tokens)",
    )

    args = parser.parse_args()
    console = Console()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )

    # Strict parsing: every token must be a card
    try:
        hole = _strict_cards(args.hole)
        board = Board.from_cards(_strict_cards(args.board))
        villain = _strict_cards(args.vs) if args.vs else None
    except ParseError as e:
        console.print(f"[red]{e}[/]")
        return 1

    result = evaluate_poker_hand(hole, board)
    preflop = get_preflop_strength(hole)
    draws = calculate_draws(hole, board)

    table = Table(
        title=f"{' '.join(str(c) for c in hole)} on {board.street}: {board or '-'}",
        show_header=False,
        box=box.ROUNDED,
    )
    table.add_column("", style="bold")
    table.add_column("")
    table.add_row("Hand", f"[cyan]{result.description}[/] ({result.rank_name})")
    table.add_row("Kickers", " ".join(str(k) for k in result.kickers) or "-")
    table.add_row("Strength", f"{result.strength:.4f} (tier {result.tier})")
    table.add_row(
        "Preflop",
        f"{preflop.description} {preflop.strength:.2f} ({preflop.category.value})",
    )
    if board.cards_to_come and len(board) >= 3:
        table.add_row("Draws", draws.description)
        table.add_row("Equity (approx.)", f"{draws.approximate_equity:.0%}")
    console.print(table)

    if villain:
        villain_result = evaluate_poker_hand(villain, board)
        outcome = compare_results(result, villain_result)
        if outcome > 0:
            verdict = "[green]Hero wins[/]"
        elif outcome < 0:
            verdict = "[red]Villain wins[/]"
        else:
            verdict = "[yellow]Split pot[/]"
        console.print(Panel(
            f"Villain: {villain_result.description}\n{verdict}",
            title="Showdown",
            box=box.ROUNDED,
        ))

    return 0


def _strict_cards(text: str) -> list:
    """Parse a comma-separated card list, raising on any bad token."""
    return [parse_card(token.strip()) for token in text.split(",") if token.strip()]


if __name__ == "__main__":
    sys.exit(main())
