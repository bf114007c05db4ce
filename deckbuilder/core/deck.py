"""
Deck construction.

Builds the canonical 52-card deck and runs it through a chain of options.
"""

import logging
from typing import List

from .card import Card
from .types import Transform, get_all_suits, get_all_ranks

logger = logging.getLogger(__name__)


def new_deck() -> List[Card]:
    """
    Create a standard 52-card deck in new-deck order.

    Ace to King of Spades, Diamonds, Clubs, then Hearts. No jokers.

    Returns:
        List[Card]: a fresh list owned by the caller
    """
    return [
        Card(rank, suit)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    ]


def build_deck(*options: Transform) -> List[Card]:
    """
    Build a deck and apply options to it.

    Options run in the order given, each receiving the previous one's
    output. Their results are not validated: an empty deck or one larger
    than 52 cards is fine.

    Args:
        *options: transforms such as shuffle, num_decks(6), with_jokers(2)

    Returns:
        List[Card]: the resulting deck

    Examples:
        >>> deck = build_deck(num_decks(2), with_jokers(4), shuffle)
        >>> len(deck)
        108
    """
    deck = new_deck()
    for option in options:
        deck = option(deck)
        logger.debug(f"applied {getattr(option, '__name__', repr(option))}: {len(deck)} cards")
    return deck
