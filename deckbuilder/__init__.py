"""
deckbuilder - build and manipulate decks of playing cards.

A deck is a plain list of Card values. build_deck starts from the standard
52-card deck and applies options in order:

    >>> from deckbuilder import build_deck, num_decks, with_jokers, shuffle
    >>> deck = build_deck(num_decks(2), with_jokers(2), shuffle)
    >>> len(deck)
    106
"""

from .core import (
    Suit, Rank, STANDARD_SUITS, Transform,
    Card,
    new_deck, build_deck,
    filter_cards, num_decks, with_jokers,
    shuffle, cut, clean_cut,
    default_sort, default_less, custom_sort,
    seeded,
    DeckError, InvalidOptionError, DeckConfigError,
)
from .config import DeckConfig

__version__ = "1.0.0"

__all__ = [
    # card types
    'Suit', 'Rank', 'STANDARD_SUITS', 'Card', 'Transform',

    # deck construction
    'new_deck', 'build_deck',

    # options
    'filter_cards', 'num_decks', 'with_jokers',
    'shuffle', 'cut', 'clean_cut',
    'default_sort', 'default_less', 'custom_sort',
    'seeded',

    # configuration
    'DeckConfig',

    # errors
    'DeckError', 'InvalidOptionError', 'DeckConfigError',
]
