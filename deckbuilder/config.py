"""
Deck configuration.

Declarative description of a deck, turned into an option chain for
build_deck. Useful when the deck shape comes from settings rather than code.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from .core.card import Card
from .core.deck import build_deck
from .core.exceptions import DeckConfigError
from .core import options
from .core.types import Suit, Rank, Transform

logger = logging.getLogger(__name__)

E = TypeVar("E", Suit, Rank)


def _parse_enum(enum_cls: Type[E], value: Union[E, str, int]) -> E:
    """Accept an enum member, its name (any case) or its integer value."""
    if isinstance(value, enum_cls):
        return value
    try:
        if isinstance(value, str):
            return enum_cls[value.strip().upper()]
        if isinstance(value, int) and not isinstance(value, bool):
            return enum_cls(value)
    except (KeyError, ValueError):
        pass
    raise DeckConfigError(f"invalid {enum_cls.__name__.lower()}: {value!r}")


@dataclass
class DeckConfig:
    """
    Deck configuration.

    Options are applied as: exclusions, deck copies, jokers, then shuffle.
    """
    num_decks: int = 1                                       # copies of the standard deck
    jokers: int = 0                                          # jokers added after copying
    excluded_ranks: List[Rank] = field(default_factory=list)
    excluded_suits: List[Suit] = field(default_factory=list)
    shuffle: bool = False
    seed: Optional[int] = None                               # fixed shuffle seed, requires shuffle=True

    def __post_init__(self):
        """Normalise and validate the configuration."""
        for name in ("excluded_ranks", "excluded_suits"):
            value = getattr(self, name)
            if not isinstance(value, (list, tuple)):
                raise DeckConfigError(f"{name} must be a list: {value!r}")
        self.excluded_ranks = [_parse_enum(Rank, r) for r in self.excluded_ranks]
        self.excluded_suits = [_parse_enum(Suit, s) for s in self.excluded_suits]
        self._validate()

    def _validate(self):
        for name in ("num_decks", "jokers"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise DeckConfigError(f"{name} must be an int: {value!r}")
            if value < 0:
                raise DeckConfigError(f"{name} cannot be negative: {value}")

        if self.seed is not None and not isinstance(self.seed, int):
            raise DeckConfigError(f"seed must be an int: {self.seed!r}")
        if self.seed is not None and not self.shuffle:
            raise DeckConfigError("seed is only used when shuffle is enabled")

        if Suit.JOKER in self.excluded_suits:
            raise DeckConfigError("set jokers=0 instead of excluding the JOKER suit")

    def _is_excluded(self, card: Card) -> bool:
        return card.rank in self.excluded_ranks or card.suit in self.excluded_suits

    def to_transforms(self) -> List[Transform]:
        """
        Translate the configuration into build_deck options.

        Returns:
            List[Transform]: options in application order
        """
        transforms: List[Transform] = []
        if self.excluded_ranks or self.excluded_suits:
            transforms.append(options.filter_cards(self._is_excluded))
        if self.num_decks != 1:
            transforms.append(options.num_decks(self.num_decks))
        if self.jokers:
            transforms.append(options.with_jokers(self.jokers))
        if self.shuffle:
            transforms.append(
                options.seeded(options.shuffle, self.seed) if self.seed is not None else options.shuffle
            )
        return transforms

    def build(self) -> List[Card]:
        """Build the configured deck."""
        logger.debug(f"building deck from {self}")
        return build_deck(*self.to_transforms())

    def to_dict(self) -> Dict[str, Any]:
        """Export as a plain dict, enums by name."""
        return {
            "num_decks": self.num_decks,
            "jokers": self.jokers,
            "excluded_ranks": [rank.name for rank in self.excluded_ranks],
            "excluded_suits": [suit.name for suit in self.excluded_suits],
            "shuffle": self.shuffle,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeckConfig':
        """
        Create a configuration from a plain mapping.

        Args:
            data: keys matching the DeckConfig fields

        Raises:
            DeckConfigError: on unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise DeckConfigError(f"unknown deck config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def standard(cls) -> 'DeckConfig':
        """Single 52-card deck, unshuffled."""
        return cls()

    @classmethod
    def euchre(cls) -> 'DeckConfig':
        """
        24-card euchre deck: Nine through King plus Ace in each suit.
        """
        return cls(excluded_ranks=[
            Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE,
            Rank.SIX, Rank.SEVEN, Rank.EIGHT,
        ])

    @classmethod
    def blackjack_shoe(cls, decks: int = 6, seed: Optional[int] = None) -> 'DeckConfig':
        """Shuffled multi-deck shoe as used for casino blackjack."""
        return cls(num_decks=decks, shuffle=True, seed=seed)
