"""
Core deck module.

Modules:
    types: suit and rank enums, option signatures
    card: immutable Card value
    options: deck transforms (filter, multiply, jokers, shuffle, cut, sort)
    deck: canonical deck and option chain
    exceptions: error types
"""

from .types import Suit, Rank, STANDARD_SUITS, Transform
from .card import Card
from .deck import new_deck, build_deck
from .options import (
    filter_cards, num_decks, with_jokers,
    shuffle, cut, clean_cut,
    default_sort, default_less, custom_sort,
    seeded,
)
from .exceptions import DeckError, InvalidOptionError, DeckConfigError

__all__ = [
    'Suit', 'Rank', 'STANDARD_SUITS', 'Transform',
    'Card',
    'new_deck', 'build_deck',
    'filter_cards', 'num_decks', 'with_jokers',
    'shuffle', 'cut', 'clean_cut',
    'default_sort', 'default_less', 'custom_sort',
    'seeded',
    'DeckError', 'InvalidOptionError', 'DeckConfigError',
]
