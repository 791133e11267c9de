"""Card and starting hand representation utilities."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when a card token cannot be parsed."""


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return RANK_STR[self.value]


class Suit(IntEnum):
    """Card suits. The numeric value is only an identifier, suits are unordered."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        return SUIT_STR[self.value]


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}
STR_RANK["10"] = 10

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

# Grid order used by the 169-hand matrix
RANKS = "AKQJT98765432"


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Parse card from string like 'As', 'Th', '10h' or '2c'.

        Rank and suit are case-insensitive; '10' is normalized to 'T'.

        Raises:
            ParseError: If the token is malformed
        """
        if not isinstance(s, str):
            raise ParseError(f"Invalid card token: {s!r}")
        s = s.strip()
        if len(s) < 2:
            raise ParseError(f"Invalid card string: {s!r}")
        rank_token = s[:-1].upper()
        suit_char = s[-1].lower()

        if rank_token not in STR_RANK:
            raise ParseError(f"Invalid rank: {rank_token}")
        if suit_char not in STR_SUIT:
            raise ParseError(f"Invalid suit: {suit_char}")

        return cls(rank=Rank(STR_RANK[rank_token]), suit=Suit(STR_SUIT[suit_char]))


CardInput = Union[str, Card]


def parse_card(token: CardInput) -> Card:
    """
    Parse a single card token.

    Card instances are passed through unchanged.

    Raises:
        ParseError: If the token is malformed
    """
    if isinstance(token, Card):
        return token
    return Card.from_string(token)


def parse_cards(tokens: Optional[Union[str, Iterable[CardInput]]]) -> list[Card]:
    """
    Parse a comma-separated string or a sequence of tokens into cards.

    Malformed tokens are dropped. Callers that need strict parsing should
    compare the length of the result with the number of tokens supplied.

    Examples:
        "Ah, Kd,10s" -> [Ah, Kd, Ts]
        ["Ah", "Xx", "2c"] -> [Ah, 2c]
    """
    if not tokens:
        return []

    if isinstance(tokens, str):
        tokens = [t.strip() for t in tokens.split(",")]

    cards = []
    for token in tokens:
        if isinstance(token, str) and not token:
            continue
        try:
            cards.append(parse_card(token))
        except ParseError as e:
            logger.debug("Dropping card token %r: %s", token, e)
    return cards


def get_rank_value(rank: Union[str, int]) -> int:
    """
    Get the numeric value (2-14) of a rank.

    Accepts a rank character ('A', 't', '10') or a Rank. Unknown ranks
    have value 0.
    """
    if isinstance(rank, int):
        return int(rank) if 2 <= rank <= 14 else 0
    return STR_RANK.get(rank.strip().upper(), 0)


def _rank_from_char(char: str) -> Rank:
    value = STR_RANK.get(char.upper())
    if value is None:
        raise ParseError(f"Invalid rank: {char}")
    return Rank(value)


@dataclass
class StartingHand:
    """A two-card starting hand."""
    card1: Card
    card2: Card

    def __post_init__(self):
        # Ensure card1 has higher or equal rank
        if self.card1.rank < self.card2.rank:
            self.card1, self.card2 = self.card2, self.card1

    @property
    def is_pair(self) -> bool:
        """Check if hand is a pocket pair."""
        return self.card1.rank == self.card2.rank

    @property
    def is_suited(self) -> bool:
        """Check if hand is suited."""
        return self.card1.suit == self.card2.suit

    @property
    def gap(self) -> int:
        """Rank distance between the two cards (0 for pairs)."""
        return self.card1.rank - self.card2.rank

    @property
    def canonical(self) -> str:
        """
        Get canonical hand notation (e.g., 'AKs', 'QQ', '72o').

        This groups equivalent hands regardless of specific suits.
        """
        r1 = RANK_STR[self.card1.rank]
        r2 = RANK_STR[self.card2.rank]

        if self.is_pair:
            return f"{r1}{r2}"
        elif self.is_suited:
            return f"{r1}{r2}s"
        else:
            return f"{r1}{r2}o"

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"

    def __repr__(self) -> str:
        return f"StartingHand({self.card1}, {self.card2})"

    @classmethod
    def from_string(cls, s: str) -> "StartingHand":
        """
        Parse hand from string like 'AsKh', 'AA' or 'AKs'.

        Raises:
            ValueError: If the string is not a valid hand
        """
        if len(s) == 4:
            # Specific cards: 'AsKh'
            return cls(Card.from_string(s[:2]), Card.from_string(s[2:]))
        elif len(s) == 2:
            # Pair: 'AA'
            if s[0].upper() != s[1].upper():
                raise ValueError(f"Invalid hand string: {s}")
            rank = _rank_from_char(s[0])
            return cls(Card(rank, Suit.SPADES), Card(rank, Suit.HEARTS))
        elif len(s) == 3:
            # Suited or offsuit: 'AKs' or 'AKo'
            r1 = _rank_from_char(s[0])
            r2 = _rank_from_char(s[1])
            kind = s[2].lower()
            if kind not in ("s", "o") or r1 == r2:
                raise ValueError(f"Invalid hand string: {s}")
            suited = kind == "s"

            if suited:
                return cls(Card(r1, Suit.SPADES), Card(r2, Suit.SPADES))
            else:
                return cls(Card(r1, Suit.SPADES), Card(r2, Suit.HEARTS))
        else:
            raise ValueError(f"Invalid hand string: {s}")


def get_all_hands() -> list[str]:
    """Generate all 169 unique starting hands in canonical form."""
    hands = []

    # Pairs
    for r in RANKS:
        hands.append(f"{r}{r}")

    # Non-pairs
    for i, r1 in enumerate(RANKS):
        for r2 in RANKS[i+1:]:
            hands.append(f"{r1}{r2}s")  # Suited
            hands.append(f"{r1}{r2}o")  # Offsuit

    return hands
