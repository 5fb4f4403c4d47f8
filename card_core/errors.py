"""Exceptions raised by the card engine."""


class CardCoreError(Exception):
    """Base class for card engine errors."""


class ShoeExhaustedError(CardCoreError, IndexError):
    """The shoe cannot supply the cards a deal needs."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(
            f"Shoe exhausted: need {needed} cards, {available} available"
        )
        self.needed = needed
        self.available = available


class InvalidCardError(CardCoreError, ValueError):
    """
    A card that cannot be scored reached the evaluator.

    Standard decks never contain jokers, so this means a precondition was
    broken upstream. Library code never catches it.
    """
