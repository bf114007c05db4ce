"""
Playing card type definitions.

Defines the suit and rank enums plus the function signatures shared by the
deck builder and its options.
"""

from enum import IntEnum
from typing import Callable, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .card import Card


class Suit(IntEnum):
    """
    Card suit enum.

    The integer value is the suit's position in new-deck order. JOKER is a
    sentinel suit that never appears in a standard deck and sorts last.
    """

    SPADES = 0
    DIAMONDS = 1
    CLUBS = 2
    HEARTS = 3
    JOKER = 4

    def __str__(self) -> str:
        return self.name.capitalize()


class Rank(IntEnum):
    """
    Card rank enum.

    Ace is low (1) and King is high (13).
    """

    ACE = 1
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

    def __str__(self) -> str:
        return self.name.capitalize()


# The four playable suits, in new-deck order
STANDARD_SUITS: Tuple[Suit, ...] = (Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS)

# Number of ranks per suit, used to build sort keys
RANKS_PER_SUIT = len(Rank)

Transform = Callable[[List["Card"]], List["Card"]]
LessFunc = Callable[[int, int], bool]
LessFactory = Callable[[List["Card"]], LessFunc]


def get_all_suits() -> List[Suit]:
    """
    Get the playable suits.

    Returns:
        List[Suit]: the four standard suits, JOKER excluded
    """
    return list(STANDARD_SUITS)


def get_all_ranks() -> List[Rank]:
    """
    Get every rank.

    Returns:
        List[Rank]: Ace through King in ascending order
    """
    return list(Rank)
