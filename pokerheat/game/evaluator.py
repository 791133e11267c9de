"""Hand classification and comparison.

Classifies 0-7 cards into the best five-card poker category with a
kicker sequence, and orders hands by category then kickers.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from itertools import zip_longest
from typing import Iterable, Optional, Sequence, Union

from .board import BoardInput, combine
from .cards import Card, CardInput, Rank, RANK_STR, parse_cards
from .strength import normalize_strength


class HandCategory(IntEnum):
    """Poker hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}

# Integer strength used by the workflow backend's hand model
WORKFLOW_TIERS = {
    HandCategory.HIGH_CARD: 0,
    HandCategory.PAIR: 2,
    HandCategory.TWO_PAIR: 3,
    HandCategory.THREE_OF_A_KIND: 4,
    HandCategory.STRAIGHT: 5,
    HandCategory.FLUSH: 6,
    HandCategory.FULL_HOUSE: 7,
    HandCategory.FOUR_OF_A_KIND: 8,
    HandCategory.STRAIGHT_FLUSH: 9,
}

# Straight rank windows, best first. The first rank of each window is the
# reported high card, so the wheel reports 5.
STRAIGHT_PATTERNS = [
    (14, 13, 12, 11, 10),  # Broadway
    (13, 12, 11, 10, 9),
    (12, 11, 10, 9, 8),
    (11, 10, 9, 8, 7),
    (10, 9, 8, 7, 6),
    (9, 8, 7, 6, 5),
    (8, 7, 6, 5, 4),
    (7, 6, 5, 4, 3),
    (6, 5, 4, 3, 2),
    (5, 4, 3, 2, 14),  # Wheel, ace plays low
]


@dataclass(frozen=True)
class HandResult:
    """Result of evaluating a set of cards."""
    category: HandCategory
    kickers: tuple[Rank, ...]
    strength: float
    rank_name: str
    description: str

    @property
    def tier(self) -> int:
        """Coarse integer strength (0, 2-9) for the workflow backend."""
        return WORKFLOW_TIERS[self.category]

    @property
    def kicker_values(self) -> tuple[int, ...]:
        return tuple(int(k) for k in self.kickers)

    def __str__(self) -> str:
        return self.description


NO_CARDS = HandResult(
    category=HandCategory.HIGH_CARD,
    kickers=(),
    strength=0.0,
    rank_name="No Cards",
    description="No cards",
)

HandInput = Union[str, Iterable[CardInput]]


def find_straight_high(ranks: Iterable[int]) -> Optional[int]:
    """
    Find the best straight among a set of ranks.

    Returns:
        High card value of the best straight (5 for the wheel), or None
    """
    present = {int(r) for r in ranks}
    for pattern in STRAIGHT_PATTERNS:
        if all(r in present for r in pattern):
            return pattern[0]
    return None


def _top_ranks(rank_counts: Counter, exclude: Sequence[int], count: int) -> list[int]:
    """Best remaining distinct ranks, highest first."""
    remaining = sorted((r for r in rank_counts if r not in exclude), reverse=True)
    return remaining[:count]


def _name(rank: int) -> str:
    return RANK_STR[int(rank)]


def _result(category: HandCategory, kickers: Sequence[int], description: str,
            rank_name: Optional[str] = None) -> HandResult:
    return HandResult(
        category=category,
        kickers=tuple(Rank(int(k)) for k in kickers),
        strength=normalize_strength(category, kickers),
        rank_name=rank_name or category.display_name,
        description=description,
    )


def evaluate_cards(cards: Sequence[Card]) -> HandResult:
    """
    Classify already parsed cards.

    Any number of cards is accepted; duplicates are counted at face value.
    """
    if not cards:
        return NO_CARDS

    rank_counts = Counter(int(c.rank) for c in cards)
    suit_counts = Counter(int(c.suit) for c in cards)

    flush_suit = None
    for suit in sorted(suit_counts):
        if suit_counts[suit] >= 5:
            flush_suit = suit
            break

    # Straight flush, tested on the flush-suited cards alone
    flush_ranks: list[int] = []
    if flush_suit is not None:
        flush_ranks = sorted((int(c.rank) for c in cards if c.suit == flush_suit), reverse=True)
        high = find_straight_high(flush_ranks)
        if high is not None:
            if high == Rank.ACE:
                return _result(HandCategory.STRAIGHT_FLUSH, [high], "Royal Flush", "Royal Flush")
            return _result(
                HandCategory.STRAIGHT_FLUSH, [high], f"Straight Flush, {_name(high)}-high"
            )

    straight_high = find_straight_high(rank_counts)

    quads = sorted((r for r, n in rank_counts.items() if n >= 4), reverse=True)
    trips = sorted((r for r, n in rank_counts.items() if n == 3), reverse=True)
    pairs = sorted((r for r, n in rank_counts.items() if n == 2), reverse=True)

    if quads:
        quad = quads[0]
        kickers = [quad] + _top_ranks(rank_counts, [quad], 1)
        return _result(HandCategory.FOUR_OF_A_KIND, kickers, f"Four {_name(quad)}s")

    if trips and (pairs or len(trips) >= 2):
        trip = trips[0]
        # A second set plays as the pair when it beats the best pair
        pair = max(trips[1:] + pairs)
        return _result(
            HandCategory.FULL_HOUSE,
            [trip, pair],
            f"Full House, {_name(trip)}s full of {_name(pair)}s",
        )

    if flush_suit is not None:
        kickers = flush_ranks[:5]
        return _result(HandCategory.FLUSH, kickers, f"Flush, {_name(kickers[0])}-high")

    if straight_high is not None:
        return _result(
            HandCategory.STRAIGHT, [straight_high], f"Straight, {_name(straight_high)}-high"
        )

    if trips:
        trip = trips[0]
        kickers = [trip] + _top_ranks(rank_counts, [trip], 2)
        return _result(HandCategory.THREE_OF_A_KIND, kickers, f"Three {_name(trip)}s")

    if len(pairs) >= 2:
        high, low = pairs[0], pairs[1]
        kickers = [high, low] + _top_ranks(rank_counts, [high, low], 1)
        return _result(
            HandCategory.TWO_PAIR, kickers, f"Two Pair, {_name(high)}s and {_name(low)}s"
        )

    if pairs:
        pair = pairs[0]
        kickers = [pair] + _top_ranks(rank_counts, [pair], 3)
        return _result(HandCategory.PAIR, kickers, f"Pair of {_name(pair)}s")

    kickers = _top_ranks(rank_counts, [], 5)
    return _result(HandCategory.HIGH_CARD, kickers, f"High Card {_name(kickers[0])}")


def evaluate_hand(cards: HandInput) -> HandResult:
    """
    Evaluate the best poker hand in a set of cards.

    Args:
        cards: Card tokens as a list or comma-separated string, or Card
            objects. Malformed tokens are ignored.

    Returns:
        HandResult; an empty input gives a "No Cards" high card result
    """
    return evaluate_cards(parse_cards(cards))


def evaluate_poker_hand(hole_cards: HandInput, board: BoardInput = None) -> HandResult:
    """
    Evaluate hole cards together with the community cards.

    Args:
        hole_cards: Player's hole cards
        board: Board, street mapping ({"flop": [...], "turn": [...],
            "river": [...]}) or flat card list
    """
    return evaluate_cards(combine(hole_cards, board))


def compare_results(result_a: HandResult, result_b: HandResult) -> int:
    """
    Compare two evaluated hands.

    Returns:
        1 if the first hand wins, -1 if the second wins, 0 on a tie
    """
    if result_a.category != result_b.category:
        return 1 if result_a.category > result_b.category else -1

    # Missing kicker positions count as zero
    for ka, kb in zip_longest(result_a.kicker_values, result_b.kicker_values, fillvalue=0):
        if ka != kb:
            return 1 if ka > kb else -1

    return 0


def compare_hands(hand_a: HandInput, hand_b: HandInput) -> int:
    """
    Compare two hands by category, then kicker by kicker.

    Returns:
        1 if hand_a wins, -1 if hand_b wins, 0 on an exact tie
    """
    return compare_results(evaluate_hand(hand_a), evaluate_hand(hand_b))


def find_winners(hands: Sequence[HandInput]) -> list[int]:
    """
    Indices of the winning hands. More than one index means a split pot.
    """
    if not hands:
        return []

    results = [evaluate_hand(h) for h in hands]
    winners = [0]
    for idx in range(1, len(results)):
        cmp = compare_results(results[idx], results[winners[0]])
        if cmp > 0:
            winners = [idx]
        elif cmp == 0:
            winners.append(idx)
    return winners
