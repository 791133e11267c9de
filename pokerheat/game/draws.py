"""Drawing hand outs and rule-of-2-and-4 equity.

These are rule-of-thumb numbers, not exact probabilities. Flush and
straight outs on a combo draw are summed without removing the cards that
complete both.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Union

from .board import BoardInput, to_board
from .cards import CardInput, parse_cards
from .evaluator import STRAIGHT_PATTERNS

FLUSH_DRAW_OUTS = 9
OPEN_ENDED_OUTS = 8
GUTSHOT_OUTS = 4

# Rule of 4 with two cards to come, rule of 2 with one
OUTS_MULTIPLIER = {2: 4, 1: 2}
MAX_DRAW_EQUITY = 0.5

MIN_COMMUNITY_CARDS = 3


@dataclass(frozen=True)
class DrawAssessment:
    """Outs and approximate equity of a drawing hand."""
    flush_draw_outs: int = 0
    straight_draw_outs: int = 0
    total_outs: int = 0
    approximate_equity: float = 0.0

    @property
    def has_draw(self) -> bool:
        return self.total_outs > 0

    @property
    def is_combo_draw(self) -> bool:
        return self.flush_draw_outs > 0 and self.straight_draw_outs > 0

    @property
    def description(self) -> str:
        parts = []
        if self.flush_draw_outs:
            parts.append("flush draw")
        if self.straight_draw_outs == OPEN_ENDED_OUTS:
            parts.append("open-ended straight draw")
        elif self.straight_draw_outs:
            parts.append("gutshot")
        if not parts:
            return "No draw"
        return f"{' + '.join(parts).capitalize()} ({self.total_outs} outs)"


NO_DRAW = DrawAssessment()


def flush_draw_outs(suits: Iterable[int]) -> int:
    """9 outs when some suit has exactly four cards; a made flush is not a draw."""
    counts = Counter(suits)
    if any(n == 4 for n in counts.values()):
        return FLUSH_DRAW_OUTS
    return 0


def straight_draw_outs(ranks: Iterable[int]) -> int:
    """
    Outs to a straight from the distinct rank values present.

    Four consecutive ranks are open-ended (8 outs) unless the run touches
    the deuce or the ace, in which case they count as a gutshot (4 outs).
    Otherwise any straight window with exactly four of five ranks present
    is a gutshot.
    """
    values = sorted({int(r) for r in ranks})

    outs = 0
    for i in range(len(values) - 3):
        low, high = values[i], values[i + 3]
        if high - low == 3:
            if low > 2 and high < 14:
                outs = OPEN_ENDED_OUTS
                break
            outs = max(outs, GUTSHOT_OUTS)

    if outs == 0:
        present = set(values)
        for pattern in STRAIGHT_PATTERNS:
            if sum(1 for r in pattern if r in present) == 4:
                outs = GUTSHOT_OUTS
                break

    return outs


def calculate_draws(
    hole_cards: Union[str, Iterable[CardInput]],
    community: BoardInput = None,
) -> DrawAssessment:
    """
    Estimate drawing outs and equity after the flop or turn.

    Args:
        hole_cards: Player's hole cards
        community: Board, street mapping ({"flop": [...], "turn": [...],
            "river": [...]}) or flat card list

    Returns:
        DrawAssessment; all zero before the flop and on the river
    """
    board = to_board(community)
    to_come = board.cards_to_come
    if len(board) < MIN_COMMUNITY_CARDS or to_come not in OUTS_MULTIPLIER:
        return NO_DRAW

    cards = parse_cards(hole_cards) + board.cards

    flush_outs = flush_draw_outs(c.suit for c in cards)
    straight_outs = straight_draw_outs(c.rank for c in cards)
    total = flush_outs + straight_outs

    equity = min(MAX_DRAW_EQUITY, total * OUTS_MULTIPLIER[to_come] / 100)

    return DrawAssessment(
        flush_draw_outs=flush_outs,
        straight_draw_outs=straight_outs,
        total_outs=total,
        approximate_equity=equity,
    )
