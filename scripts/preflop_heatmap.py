#!/usr/bin/env python3
"""Print the 13x13 preflop strength heat map."""

import argparse
import sys
from pathlib import Path

import numpy as np
from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pokerheat.game import get_all_hands, get_preflop_strength
from pokerheat.game.cards import StartingHand
from pokerheat.viz import HeatmapDisplay


def main():
    parser = argparse.ArgumentParser(
        description="Display preflop starting hand strengths"
    )
    parser.add_argument(
        "hand",
        nargs="?",
        help="Hole cards to highlight (e.g. AhKh)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=0,
        help="Also list the N strongest starting hands",
    )

    args = parser.parse_args()
    console = Console()

    highlight = None
    if args.hand:
        try:
            hand = StartingHand.from_string(args.hand)
        except ValueError:
            console.print(f"[red]Invalid hand: {args.hand}[/]")
            return 1
        highlight = hand.canonical
        assessment = get_preflop_strength([hand.card1, hand.card2])
        console.print(
            f"[bold]{assessment.description}[/]: {assessment.strength:.3f} "
            f"({assessment.category.value})"
        )

    display = HeatmapDisplay(console)
    display.display_terminal(highlight=highlight)

    if args.top > 0:
        hands = get_all_hands()
        scores = np.array([
            get_preflop_strength(_sample_cards(h)).strength for h in hands
        ])
        console.print(f"\n[bold]Top {args.top} starting hands[/]")
        for idx in np.argsort(-scores, kind="stable")[:args.top]:
            console.print(f"  {hands[idx]:<4} {scores[idx]:.3f}")

    return 0


def _sample_cards(canonical: str) -> list:
    hand = StartingHand.from_string(canonical)
    return [hand.card1, hand.card2]


if __name__ == "__main__":
    sys.exit(main())
