"""
Deck options.

Every option is a transform taking a list of cards and returning a list of
cards, so options compose in any order when passed to build_deck. Options
with parameters are factories returning the transform; the rest are
transforms themselves.

shuffle and cut draw from a module-owned random.Random seeded from OS
entropy. Pass rng= (directly, via functools.partial, or via seeded) for
reproducible results.
"""

import functools
import logging
import random
from typing import Callable, List, Optional

from .card import Card
from .exceptions import InvalidOptionError
from .types import Transform, LessFunc, LessFactory

logger = logging.getLogger(__name__)

_default_rng = random.Random()


def _check_count(name: str, n: int) -> None:
    """Reject counts that are not non-negative ints."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidOptionError(f"{name} count must be an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidOptionError(f"{name} count must be non-negative, got {n}")


def filter_cards(predicate: Callable[[Card], bool]) -> Transform:
    """
    Remove cards matching a predicate.

    Args:
        predicate: returns True for every card to drop

    Returns:
        Transform: keeps the remaining cards in their original order

    Raises:
        InvalidOptionError: when predicate is not callable
    """
    if not callable(predicate):
        raise InvalidOptionError("filter predicate must be callable")

    def _filter_cards(cards: List[Card]) -> List[Card]:
        return [card for card in cards if not predicate(card)]

    return _filter_cards


def num_decks(n: int) -> Transform:
    """
    Combine n copies of the deck, e.g. a six-deck blackjack shoe.

    Args:
        n: number of copies, 0 gives an empty deck

    Raises:
        InvalidOptionError: when n is negative or not an int
    """
    _check_count("num_decks", n)

    def _num_decks(cards: List[Card]) -> List[Card]:
        return list(cards) * n

    return _num_decks


def with_jokers(n: int) -> Transform:
    """
    Append n jokers to the end of the deck.

    Returns:
        Transform: returns a new list, the input deck is left untouched

    Raises:
        InvalidOptionError: when n is negative or not an int
    """
    _check_count("with_jokers", n)

    def _with_jokers(cards: List[Card]) -> List[Card]:
        return cards + [Card.joker() for _ in range(n)]

    return _with_jokers


def shuffle(cards: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """
    Shuffle the cards in place.

    Args:
        cards: the deck, reordered in place
        rng: random source, defaults to the module generator

    Returns:
        List[Card]: the same list, uniformly permuted
    """
    (rng or _default_rng).shuffle(cards)
    return cards


def cut(cards: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """
    Cut the deck at a random point and complete the cut.

    The card at the cut point becomes the top card and the cards above it
    move to the bottom. An empty deck is returned unchanged.

    Args:
        cards: the deck
        rng: random source, defaults to the module generator
    """
    if not cards:
        return cards
    point = (rng or _default_rng).randrange(len(cards))
    logger.debug(f"cutting {len(cards)} cards at {point}")
    return cards[point:] + cards[:point]


def clean_cut(cards: List[Card]) -> List[Card]:
    """Cut the deck exactly in the middle and complete the cut."""
    point = len(cards) // 2
    return cards[point:] + cards[:point]


def default_less(cards: List[Card]) -> LessFunc:
    """
    Less-function factory for new-deck order.

    Ace to King of Spades, then Diamonds, Clubs, Hearts, then jokers. A joker
    with an unset rank has the same key as the King of Hearts.

    Args:
        cards: the sequence the returned function indexes into

    Returns:
        LessFunc: less(i, j) comparing cards[i] and cards[j]
    """
    def less(i: int, j: int) -> bool:
        return cards[i].sort_key < cards[j].sort_key

    return less


def default_sort(cards: List[Card]) -> List[Card]:
    """Stable in-place sort into new-deck order."""
    cards.sort(key=lambda card: card.sort_key)
    return cards


def custom_sort(less: LessFactory) -> Transform:
    """
    Sort with a caller-supplied ordering.

    Args:
        less: given the deck, returns less(i, j) over its indices. Cards
            neither less than the other keep their relative order.

    Raises:
        InvalidOptionError: when less is not callable
    """
    if not callable(less):
        raise InvalidOptionError("custom_sort less factory must be callable")

    def _custom_sort(cards: List[Card]) -> List[Card]:
        is_less = less(cards)

        def compare(i: int, j: int) -> int:
            if is_less(i, j):
                return -1
            if is_less(j, i):
                return 1
            return 0

        order = sorted(range(len(cards)), key=functools.cmp_to_key(compare))
        cards[:] = [cards[i] for i in order]
        return cards

    return _custom_sort


def seeded(transform: Callable[..., List[Card]], seed: int) -> Transform:
    """
    Bind a fixed seed to shuffle or cut.

    Each call of the returned transform uses a fresh random.Random(seed), so
    the same input always produces the same output.

    Args:
        transform: an option accepting an rng keyword, i.e. shuffle or cut
        seed: random seed
    """
    @functools.wraps(transform)
    def _seeded(cards: List[Card]) -> List[Card]:
        return transform(cards, rng=random.Random(seed))

    return _seeded
