"""Community cards grouped by street."""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from .cards import Card, CardInput, parse_cards

logger = logging.getLogger(__name__)


STREETS = ("flop", "turn", "river")

# Cards dealt on each street
STREET_SIZES = {"flop": 3, "turn": 1, "river": 1}

BoardInput = Union["Board", Mapping[str, Iterable[CardInput]], str, Iterable[CardInput], None]


@dataclass(frozen=True)
class Board:
    """
    Community cards as dealt street by street.

    The engine does not enforce street sizes; whatever cards are given
    for a street are kept in order.
    """
    flop: tuple[Card, ...] = ()
    turn: tuple[Card, ...] = ()
    river: tuple[Card, ...] = ()

    @property
    def cards(self) -> list[Card]:
        """All community cards in dealing order."""
        return [*self.flop, *self.turn, *self.river]

    @property
    def street(self) -> str:
        """Name of the current street, judged by the number of cards out."""
        n = len(self)
        if n < 3:
            return "preflop"
        elif n == 3:
            return "flop"
        elif n == 4:
            return "turn"
        return "river"

    @property
    def cards_to_come(self) -> int:
        """Community cards still to be dealt."""
        return max(0, 5 - len(self))

    def __len__(self) -> int:
        return len(self.flop) + len(self.turn) + len(self.river)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    @classmethod
    def from_streets(cls, streets: Mapping[str, Iterable[CardInput]]) -> "Board":
        """
        Build a board from a street mapping.

        Example:
            {"flop": ["Qh", "Jh", "2s"], "turn": ["9c"]}
        """
        return cls(**{street: tuple(parse_cards(streets.get(street))) for street in STREETS})

    @classmethod
    def from_cards(cls, cards: Union[str, Iterable[CardInput]]) -> "Board":
        """
        Build a board from a flat card list, split into streets by position.

        Cards past the river are dropped.
        """
        parsed = parse_cards(cards)
        grouped = {}
        start = 0
        for street in STREETS:
            end = start + STREET_SIZES[street]
            grouped[street] = tuple(parsed[start:end])
            start = end

        if len(parsed) > start:
            logger.debug("Dropping %d cards past the river: %s", len(parsed) - start, parsed[start:])
        return cls(**grouped)


def to_board(value: BoardInput) -> Board:
    """Coerce a Board, street mapping, card list or card string into a Board."""
    if value is None:
        return Board()
    if isinstance(value, Board):
        return value
    if isinstance(value, Mapping):
        return Board.from_streets(value)
    return Board.from_cards(value)


def combine(hole_cards: Optional[Union[str, Iterable[CardInput]]], board: BoardInput) -> list[Card]:
    """Parse hole cards and board into one card list (hole cards first)."""
    return parse_cards(hole_cards) + to_board(board).cards
