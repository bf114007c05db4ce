"""
deckbuilder test configuration.

Shared fixtures and marker registration for the unit and property tests.
"""

import random
from typing import List

import pytest

from deckbuilder.core import Card, new_deck


@pytest.fixture
def canonical_deck() -> List[Card]:
    """A fresh unshuffled 52-card deck"""
    return new_deck()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible shuffles and cuts"""
    return random.Random(42)


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "property_test: hypothesis property-based tests"
    )
    config.addinivalue_line(
        "markers", "integration: tests combining several options or the config layer"
    )
