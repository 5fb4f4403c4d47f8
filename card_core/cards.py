"""Suit, Rank and Card - immutable card representations."""

from dataclasses import dataclass, replace
from enum import Enum


class Suit(Enum):
    """Card suits, valued by ordinal. NONE marks an absent suit (jokers)."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3
    NONE = 4

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
            Suit.NONE: "-",
        }
        return symbols[self]

    def _comparable(self, other: object) -> bool:
        # NONE sits outside the suit order
        return (
            isinstance(other, Suit)
            and self is not Suit.NONE
            and other is not Suit.NONE
        )

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self.value >= other.value

    @property
    def ordinal(self) -> int:
        """Return the ordinal value (0-3, 4 for NONE)."""
        return self.value

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Suit":
        """Convert an ordinal to a suit. Anything outside 0-3 is NONE."""
        if 0 <= ordinal <= 3:
            return cls(ordinal)
        return cls.NONE

    @classmethod
    def standard(cls) -> list["Suit"]:
        """Return the four real suits in deck order."""
        return [s for s in cls if s is not cls.NONE]


class Rank(Enum):
    """Card ranks, valued by ordinal. JOKER is not part of a standard deck."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12
    JOKER = 13

    def __str__(self) -> str:
        if Rank.TWO <= self <= Rank.NINE:
            return str(self.value + 1)
        return {
            Rank.ACE: "A",
            Rank.TEN: "T",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.JOKER: "JOKER",
        }[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value >= other.value

    @property
    def ordinal(self) -> int:
        """Return the ordinal value (0-12, 13 for JOKER)."""
        return self.value

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Rank":
        """Convert an ordinal to a rank. Anything outside 0-12 is JOKER."""
        if 0 <= ordinal <= 12:
            return cls(ordinal)
        return cls.JOKER

    @classmethod
    def standard(cls) -> list["Rank"]:
        """Return the thirteen playable ranks, Ace to King."""
        return [r for r in cls if r is not cls.JOKER]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self is Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank scores 10 in blackjack."""
        return Rank.TEN <= self <= Rank.KING


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card. Defaults to the Ace of Clubs."""

    rank: Rank = Rank.ACE
    suit: Suit = Suit.CLUBS

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_ordinals(cls, suit: int, rank: int) -> "Card":
        """
        Build a card from ordinal values.

        Out-of-range ordinals degrade to Suit.NONE / Rank.JOKER instead of
        raising, so this never fails.
        """
        return cls(Rank.from_ordinal(rank), Suit.from_ordinal(suit))

    @property
    def ordinal(self) -> int:
        """Position of this card in a standard deck (suit * 13 + rank)."""
        return self.suit.ordinal * 13 + self.rank.ordinal

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card scores 10."""
        return self.rank.is_ten_value

    @property
    def is_joker(self) -> bool:
        """Check if this card is a joker."""
        return self.rank is Rank.JOKER

    def with_rank(self, rank: Rank) -> "Card":
        """Return a copy of this card with a different rank."""
        return replace(self, rank=rank)

    def with_suit(self, suit: Suit) -> "Card":
        """Return a copy of this card with a different suit."""
        return replace(self, suit=suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Th' or '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(n): Rank.from_ordinal(n - 1) for n in range(2, 11)}
        rank_map.update(
            {
                "T": Rank.TEN,
                "J": Rank.JACK,
                "Q": Rank.QUEEN,
                "K": Rank.KING,
                "A": Rank.ACE,
            }
        )

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])
