"""
PokerHeat: Hold'em Hand Evaluation and Strength Heuristics

Classifies 0-7 card poker hands, orders hands for showdowns, and scores
starting hands and drawing hands for auto-play and heat map displays.
"""

__version__ = "0.1.0"

from .game import (
    Board,
    Card,
    DrawAssessment,
    HandCategory,
    HandResult,
    ParseError,
    PreflopAssessment,
    PreflopCategory,
    calculate_draws,
    compare_hands,
    evaluate_hand,
    evaluate_poker_hand,
    get_preflop_strength,
    get_rank_value,
    parse_card,
    parse_cards,
)

__all__ = [
    "Board",
    "Card",
    "DrawAssessment",
    "HandCategory",
    "HandResult",
    "ParseError",
    "PreflopAssessment",
    "PreflopCategory",
    "calculate_draws",
    "compare_hands",
    "evaluate_hand",
    "evaluate_poker_hand",
    "get_preflop_strength",
    "get_rank_value",
    "parse_card",
    "parse_cards",
]
