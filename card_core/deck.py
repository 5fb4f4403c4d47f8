"""Deck - an ordered, mutable container of cards."""

from typing import Iterable, Iterator

from card_core.cards import Card

STANDARD_DECK_SIZE = 52


class Deck:
    """
    An ordered collection of cards.

    The end of the sequence is the top of the deck: ``draw`` takes from there
    and ``add`` puts cards back there. Draw operations return ``None`` instead
    of raising when no card is available.
    """

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        """
        Initialize a deck.

        Args:
            cards: Initial cards, bottom first. Defaults to the 52 standard
                cards ordered by suit, then rank (no jokers).
        """
        if cards is None:
            self._cards = [
                Card.from_ordinals(i // 13, i % 13)
                for i in range(STANDARD_DECK_SIZE)
            ]
        else:
            self._cards = list(cards)

    @classmethod
    def empty(cls) -> "Deck":
        """Create a deck with no cards."""
        return cls([])

    @classmethod
    def shoe(cls, num_decks: int) -> "Deck":
        """Combine ``num_decks`` standard decks into one, in construction order."""
        if num_decks < 1:
            raise ValueError("Shoe must have at least 1 deck")

        shoe = cls.empty()
        for _ in range(num_decks):
            shoe.add_deck(cls())
        return shoe

    def draw(self) -> Card | None:
        """Remove and return the last card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def draw_nth(self, n: int) -> Card | None:
        """
        Remove and return the card at position ``n`` (0 is the bottom).

        Later cards shift down by one. Returns None when ``n`` is not a valid
        index; negative positions are never wrapped.
        """
        if not 0 <= n < len(self._cards):
            return None
        return self._cards.pop(n)

    def add(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self._cards.append(card)

    def add_deck(self, other: "Deck") -> None:
        """Move every card of ``other`` on top of this deck, keeping order."""
        if other is self:
            raise ValueError("Cannot merge a deck into itself")
        self._cards.extend(other._cards)
        other._cards.clear()

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
