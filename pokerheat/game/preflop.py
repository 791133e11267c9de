"""Preflop starting hand heuristic.

A hand-tuned formula over the two hole cards. The weights are not derived
from equity tables; they are fixed because callers depend on the exact
category boundaries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from .cards import CardInput, RANK_STR, StartingHand, parse_cards


class PreflopCategory(str, Enum):
    """Coarse starting hand categories, weakest first."""
    SPECULATIVE = "speculative"
    PLAYABLE = "playable"
    STRONG = "strong"
    PREMIUM = "premium"


# Base score from the higher card: high_rank / 14 * HIGH_CARD_WEIGHT
HIGH_CARD_WEIGHT = 0.3

# Pocket pair bonus: PAIR_BASE + high_rank / 14 * PAIR_SCALE
PAIR_BASE = 0.2
PAIR_SCALE = 0.2

SUITED_BONUS = 0.05
CONNECTED_BONUS = 0.03
SMALL_GAP_BONUS = 0.01
MAX_SMALL_GAP = 3

PREMIUM_PAIR_BONUS = 0.1
PREMIUM_PAIR_MIN_RANK = 10
BIG_ACE_BONUS = 0.08
BIG_ACE_MIN_KICKER = 10

# Lower bounds (exclusive) for each category
CATEGORY_THRESHOLDS = [
    (0.6, PreflopCategory.PREMIUM),
    (0.45, PreflopCategory.STRONG),
    (0.35, PreflopCategory.PLAYABLE),
]


@dataclass(frozen=True)
class PreflopAssessment:
    """Heuristic assessment of a two-card starting hand."""
    strength: float
    category: PreflopCategory
    is_pair: bool = False
    is_suited: bool = False
    is_connected: bool = False
    gap: int = 0
    description: str = ""


def categorize(strength: float) -> PreflopCategory:
    """Map a preflop strength score to its category."""
    for threshold, category in CATEGORY_THRESHOLDS:
        if strength > threshold:
            return category
    return PreflopCategory.SPECULATIVE


def score_starting_hand(hand: StartingHand) -> float:
    """Raw heuristic score for a starting hand, clamped to [0, 1]."""
    high = int(hand.card1.rank)
    low = int(hand.card2.rank)
    gap = high - low

    strength = (high / 14) * HIGH_CARD_WEIGHT

    if hand.is_pair:
        strength += PAIR_BASE + (high / 14) * PAIR_SCALE
    if hand.is_suited:
        strength += SUITED_BONUS

    if gap == 1:
        strength += CONNECTED_BONUS
    elif gap <= MAX_SMALL_GAP:
        # Pairs (gap 0) fall in here too
        strength += SMALL_GAP_BONUS

    if hand.is_pair and high >= PREMIUM_PAIR_MIN_RANK:
        strength += PREMIUM_PAIR_BONUS
    if not hand.is_pair and high == 14 and low >= BIG_ACE_MIN_KICKER:
        strength += BIG_ACE_BONUS

    return min(1.0, max(0.0, strength))


def get_preflop_strength(hole_cards: Union[str, Iterable[CardInput]]) -> PreflopAssessment:
    """
    Score a two-card starting hand in isolation.

    Only the first two parsed cards are used. Fewer than two cards gives a
    zero-strength speculative assessment.

    Example:
        get_preflop_strength(["Ah", "Ad"]).category == "premium"
    """
    parsed = parse_cards(hole_cards)
    if len(parsed) < 2:
        return PreflopAssessment(
            strength=0.0,
            category=PreflopCategory.SPECULATIVE,
            description="Need 2 cards",
        )

    hand = StartingHand(parsed[0], parsed[1])
    strength = score_starting_hand(hand)

    if hand.is_pair:
        description = f"Pocket {RANK_STR[hand.card1.rank]}s"
    else:
        description = hand.canonical

    return PreflopAssessment(
        strength=strength,
        category=categorize(strength),
        is_pair=hand.is_pair,
        is_suited=hand.is_suited,
        is_connected=hand.gap == 1,
        gap=hand.gap,
        description=description,
    )
