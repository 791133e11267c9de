"""Scalar hand strength for sorting and display.

The score is lossy. Winner determination goes through
:func:`pokerheat.game.evaluator.compare_hands`, never through this value.
"""

from typing import Sequence

# Width of each category band
CATEGORY_BAND = 0.1

# Fraction of a band the kicker bonus may occupy
KICKER_WEIGHT = 0.9

MAX_KICKERS = 5
MAX_RANK_VALUE = 14
STRENGTH_CAP = 0.99


def kicker_bonus(kickers: Sequence[int]) -> float:
    """
    Weighted kicker contribution inside a category band.

    Each position is worth a tenth of the previous one, so the bonus for
    five aces stays below CATEGORY_BAND.
    """
    bonus = 0.0
    for position, kicker in enumerate(kickers[:MAX_KICKERS]):
        weight = CATEGORY_BAND ** (position + 1)
        bonus += (int(kicker) / MAX_RANK_VALUE) * weight * KICKER_WEIGHT
    return bonus


def normalize_strength(category: int, kickers: Sequence[int]) -> float:
    """
    Map a hand category and its kickers to a score in [0, 0.99].

    Args:
        category: Category index, 0 (high card) to 8 (straight flush)
        kickers: Kicker rank values, most significant first

    Returns:
        Strength score; higher categories always score strictly higher
    """
    base = int(category) * CATEGORY_BAND
    return min(STRENGTH_CAP, base + kicker_bonus(kickers))
