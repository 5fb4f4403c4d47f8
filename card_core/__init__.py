"""Card and deck model with a blackjack engine on top - UI-agnostic."""

from card_core.cards import Card, Rank, Suit
from card_core.deck import Deck
from card_core.errors import CardCoreError, InvalidCardError, ShoeExhaustedError

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "CardCoreError",
    "InvalidCardError",
    "ShoeExhaustedError",
]
