"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, Sequence

from card_core.cards import Card, Rank
from card_core.errors import InvalidCardError

BLACKJACK = 21


@dataclass(frozen=True, slots=True)
class HandTotal:
    """
    Hard and soft running totals of a hand.

    The hard total counts every Ace as 11, the soft total counts every Ace
    as 1. All other cards add the same amount to both.
    """

    hard_total: int = 0
    soft_total: int = 0

    def __add__(self, other: "HandTotal") -> "HandTotal":
        if not isinstance(other, HandTotal):
            return NotImplemented
        return HandTotal(
            self.hard_total + other.hard_total,
            self.soft_total + other.soft_total,
        )

    @property
    def best_total(self) -> int:
        """
        Resolve the two readings into one total.

        Uses the larger reading unless the hard total busts, in which case the
        smaller one. Several Aces can make the soft total small while the hard
        total busts (A-A is 2, not 12).
        """
        if self.hard_total > BLACKJACK:
            return min(self.hard_total, self.soft_total)
        return max(self.hard_total, self.soft_total)

    @property
    def is_bust(self) -> bool:
        """Check if the best total exceeds 21."""
        return self.best_total > BLACKJACK


class Outcome(Enum):
    """Who won a player-vs-dealer comparison."""

    DEALER_WINS = auto()
    PLAYER_WINS = auto()
    PUSH = auto()


@dataclass(frozen=True, slots=True)
class HandResult:
    """Outcome of comparing a player hand with the dealer hand."""

    outcome: Outcome
    is_blackjack: bool = False

    @classmethod
    def dealer_wins(cls, is_blackjack: bool) -> "HandResult":
        return cls(Outcome.DEALER_WINS, is_blackjack)

    @classmethod
    def player_wins(cls, is_blackjack: bool) -> "HandResult":
        return cls(Outcome.PLAYER_WINS, is_blackjack)

    @classmethod
    def push(cls) -> "HandResult":
        return cls(Outcome.PUSH)

    def as_int(self) -> int:
        """
        Return the result as a number.

        Returns:
            1 if player wins
            -1 if dealer wins
            0 if push (tie)
        """
        return {
            Outcome.PLAYER_WINS: 1,
            Outcome.DEALER_WINS: -1,
            Outcome.PUSH: 0,
        }[self.outcome]

    def __str__(self) -> str:
        text = self.outcome.name.replace("_", " ").title()
        if self.is_blackjack:
            text += " (blackjack)"
        return text


def get_card_value(card: Card) -> HandTotal:
    """Return the hard/soft contribution of a single card."""
    rank = card.rank
    if rank is Rank.JOKER:
        raise InvalidCardError(f"Cannot score {card!r}: jokers are not in play")
    if rank.is_ace:
        return HandTotal(hard_total=11, soft_total=1)
    if rank.is_ten_value:
        return HandTotal(hard_total=10, soft_total=10)
    value = rank.ordinal + 1
    return HandTotal(hard_total=value, soft_total=value)


def hand_value(cards: Iterable[Card]) -> HandTotal:
    """Sum the card values of a hand. An empty hand totals (0, 0)."""
    return sum((get_card_value(card) for card in cards), HandTotal())


def is_natural(cards: Sequence[Card]) -> bool:
    """Check for a natural blackjack (exactly two cards totalling 21)."""
    return len(cards) == 2 and hand_value(cards).best_total == BLACKJACK


def compare_hands(player: Sequence[Card], dealer: Sequence[Card]) -> HandResult:
    """
    Compare a player hand against the dealer hand.

    Naturals are checked first, so a two-card 21 beats a three-card 21.
    A busted player loses even when the dealer also busts. A dealer bust is
    not checked: best totals are compared as plain numbers, so a busted
    dealer total beats any standing player total.
    """
    player_natural = is_natural(player)
    dealer_natural = is_natural(dealer)

    if player_natural:
        if dealer_natural:
            return HandResult.push()
        return HandResult.player_wins(True)
    if dealer_natural:
        return HandResult.dealer_wins(True)

    player_total = hand_value(player)
    dealer_total = hand_value(dealer)

    if player_total.is_bust:
        return HandResult.dealer_wins(False)

    player_best = player_total.best_total
    dealer_best = dealer_total.best_total
    if player_best > dealer_best:
        return HandResult.player_wins(False)
    if player_best < dealer_best:
        return HandResult.dealer_wins(False)
    return HandResult.push()


@dataclass
class Hand:
    """The cards held by one seat at the table."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def total(self) -> HandTotal:
        """Hard/soft totals, recomputed from the current cards."""
        return hand_value(self.cards)

    @property
    def best_total(self) -> int:
        """Return the resolved total of the hand."""
        return self.total.best_total

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return is_natural(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.total.is_bust

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.best_total})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        elif self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"
