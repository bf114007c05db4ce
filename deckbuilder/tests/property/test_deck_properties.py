"""
Property-based tests for deck options.

Uses hypothesis to check counting and ordering invariants over arbitrary
counts, seeds and option chains.
"""

import random

import pytest
from hypothesis import given, settings, strategies as st

from deckbuilder import (
    Rank, Suit, new_deck, build_deck,
    filter_cards, num_decks, with_jokers,
    shuffle, cut, clean_cut, default_sort, default_less, custom_sort,
)
from deckbuilder.tests.helpers import assert_new_deck_order, count_jokers


count_strategy = st.integers(min_value=0, max_value=200)
seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)
rank_sets = st.sets(st.sampled_from(list(Rank)))
suit_sets = st.sets(st.sampled_from([Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS]))


@pytest.mark.property_test
@given(count_strategy)
def test_with_jokers_count(n: int):
    """52 + n cards, exactly n of them jokers."""
    deck = build_deck(with_jokers(n))

    assert len(deck) == 52 + n
    assert count_jokers(deck) == n


@pytest.mark.property_test
@given(st.integers(min_value=0, max_value=20))
def test_num_decks_count(n: int):
    deck = build_deck(num_decks(n))

    assert len(deck) == 52 * n
    for card in new_deck():
        assert deck.count(card) == n


@pytest.mark.property_test
@given(rank_sets, suit_sets)
def test_filter_removes_all_and_only_matches(ranks, suits):
    def excluded(card):
        return card.rank in ranks or card.suit in suits

    deck = build_deck(filter_cards(excluded))

    assert deck == [card for card in new_deck() if not excluded(card)]


@pytest.mark.property_test
@given(seed_strategy)
def test_shuffle_then_default_sort_round_trip(seed: int):
    deck = default_sort(shuffle(new_deck(), rng=random.Random(seed)))

    assert deck == new_deck()


@pytest.mark.property_test
@given(seed_strategy, st.integers(min_value=0, max_value=10))
def test_default_sort_orders_any_deck(seed: int, jokers: int):
    deck = build_deck(num_decks(2), with_jokers(jokers), lambda cards: shuffle(cards, rng=random.Random(seed)))

    assert_new_deck_order(default_sort(deck))


@pytest.mark.property_test
@given(seed_strategy)
def test_custom_sort_agrees_with_default_sort(seed: int):
    shuffled = shuffle(new_deck(), rng=random.Random(seed))

    assert custom_sort(default_less)(list(shuffled)) == default_sort(list(shuffled))


@pytest.mark.property_test
@given(seed_strategy, st.integers(min_value=0, max_value=60))
def test_cut_is_rotation(seed: int, size: int):
    cards = build_deck(with_jokers(8))[:size]
    result = cut(list(cards), rng=random.Random(seed))

    assert len(result) == size
    if size:
        doubled = cards + cards
        assert any(doubled[k:k + size] == result for k in range(size))


@pytest.mark.property_test
@settings(max_examples=50)
@given(st.integers(min_value=0, max_value=60))
def test_clean_cut_rotates_by_half(size: int):
    cards = build_deck(with_jokers(8))[:size]
    result = clean_cut(list(cards))

    half = size // 2
    assert result == cards[half:] + cards[:half]
