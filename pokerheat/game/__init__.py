"""Hand evaluation module."""

from .cards import (
    Card, Rank, Suit, ParseError, StartingHand,
    parse_card, parse_cards, get_rank_value, get_all_hands,
)
from .board import Board
from .evaluator import (
    HandCategory, HandResult, STRAIGHT_PATTERNS,
    evaluate_hand, evaluate_poker_hand, compare_hands, compare_results, find_winners,
)
from .strength import normalize_strength
from .preflop import PreflopAssessment, PreflopCategory, get_preflop_strength
from .draws import DrawAssessment, calculate_draws

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "ParseError",
    "StartingHand",
    "parse_card",
    "parse_cards",
    "get_rank_value",
    "get_all_hands",
    "Board",
    "HandCategory",
    "HandResult",
    "STRAIGHT_PATTERNS",
    "evaluate_hand",
    "evaluate_poker_hand",
    "compare_hands",
    "compare_results",
    "find_winners",
    "normalize_strength",
    "PreflopAssessment",
    "PreflopCategory",
    "get_preflop_strength",
    "DrawAssessment",
    "calculate_draws",
]
