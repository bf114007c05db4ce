"""
Playing card data structure.

Defines the immutable Card class with its display and parsing helpers.
"""

from dataclasses import dataclass
from typing import Optional

from .types import Suit, Rank, RANKS_PER_SUIT


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Immutable value type compared and hashed on (rank, suit). A Joker has
    suit JOKER and its rank is ignored; jokers built by the deck options
    carry rank None.

    Attributes:
        rank: card rank, None only for jokers
        suit: card suit

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> str(card)
        'Ace of Spades'
        >>> str(Card.joker())
        'Joker'
    """

    rank: Optional[Rank]
    suit: Suit

    def __post_init__(self) -> None:
        """
        Validate the card fields.

        Raises:
            TypeError: when suit is not a Suit, or rank is not a Rank on a
                non-joker card
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit).__name__}")
        if self.rank is None and self.suit is Suit.JOKER:
            return
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")

    @classmethod
    def joker(cls) -> 'Card':
        """Return a Joker with an unset rank."""
        return cls(None, Suit.JOKER)

    @property
    def is_joker(self) -> bool:
        return self.suit is Suit.JOKER

    @property
    def sort_key(self) -> int:
        """
        Position of the card in new-deck order.

        Returns:
            int: 13 * suit + rank, with an unset rank counted as 0
        """
        rank_value = int(self.rank) if self.rank is not None else 0
        return RANKS_PER_SUIT * int(self.suit) + rank_value

    def __str__(self) -> str:
        if self.is_joker:
            return "Joker"
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        rank_name = self.rank.name if self.rank is not None else None
        return f"Card({rank_name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        Parse a card from its display string.

        Args:
            card_str: text such as "Ace of Spades" or "Joker", case-insensitive

        Returns:
            Card: the parsed card

        Raises:
            TypeError: when card_str is not a string
            ValueError: when the text does not name a card
        """
        if not isinstance(card_str, str):
            raise TypeError(f"card string must be str, got {type(card_str).__name__}")

        text = card_str.strip()
        if text.lower() == "joker":
            return cls.joker()

        parts = text.split()
        if len(parts) != 3 or parts[1].lower() != "of":
            raise ValueError(f"malformed card string: {card_str!r}")

        rank_str, suit_str = parts[0].upper(), parts[2].upper()
        if rank_str not in Rank.__members__:
            raise ValueError(f"invalid rank: {parts[0]}")
        if suit_str not in Suit.__members__ or suit_str == Suit.JOKER.name:
            raise ValueError(f"invalid suit: {parts[2]}")

        return cls(Rank[rank_str], Suit[suit_str])
