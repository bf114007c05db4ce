"""Assertion helpers shared by the deckbuilder tests."""

from typing import List

from deckbuilder.core import Card


def assert_new_deck_order(cards: List[Card]):
    """Assert sort keys never decrease across the deck"""
    for i in range(len(cards) - 1):
        assert cards[i].sort_key <= cards[i + 1].sort_key, \
            f"{cards[i]!r} at {i} sorts after {cards[i + 1]!r}"


def count_jokers(cards: List[Card]) -> int:
    return sum(1 for card in cards if card.is_joker)
