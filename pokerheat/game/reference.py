"""Adapter to the treys evaluator, used to cross-check our classifier."""

from typing import Sequence

from treys import Card as TreysCard, Evaluator

from .cards import Card
from .evaluator import HandCategory

# treys rank classes (1 is best). Some releases report royal flushes as 0.
TREYS_CLASS_TO_CATEGORY = {
    0: HandCategory.STRAIGHT_FLUSH,
    1: HandCategory.STRAIGHT_FLUSH,
    2: HandCategory.FOUR_OF_A_KIND,
    3: HandCategory.FULL_HOUSE,
    4: HandCategory.FLUSH,
    5: HandCategory.STRAIGHT,
    6: HandCategory.THREE_OF_A_KIND,
    7: HandCategory.TWO_PAIR,
    8: HandCategory.PAIR,
    9: HandCategory.HIGH_CARD,
}


def to_treys(card: Card) -> int:
    """Convert to treys library card format."""
    return TreysCard.new(str(card))


class ReferenceEvaluator:
    """
    Wraps treys for 5-7 distinct cards.

    treys ranks run from 1 (royal flush) to 7462 (worst high card).
    """

    def __init__(self):
        self.evaluator = Evaluator()

    def rank(self, cards: Sequence[Card]) -> int:
        """treys rank of the best hand; lower is better."""
        if not 5 <= len(cards) <= 7:
            raise ValueError("treys needs 5 to 7 cards")
        treys_cards = [to_treys(c) for c in cards]
        return self.evaluator.evaluate(treys_cards[:2], treys_cards[2:])

    def category(self, cards: Sequence[Card]) -> HandCategory:
        """Hand category according to treys."""
        rank_class = self.evaluator.get_rank_class(self.rank(cards))
        return TREYS_CLASS_TO_CATEGORY[rank_class]

    def compare(self, cards_a: Sequence[Card], cards_b: Sequence[Card]) -> int:
        """1 if cards_a wins, -1 if cards_b wins, 0 on a tie."""
        rank_a = self.rank(cards_a)
        rank_b = self.rank(cards_b)
        if rank_a < rank_b:
            return 1
        elif rank_a > rank_b:
            return -1
        return 0
