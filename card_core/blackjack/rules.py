"""Blackjack table configuration."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config import TableDefaults


@dataclass(frozen=True)
class TableConfig:
    """
    Blackjack table configuration.

    Only ``num_boxes`` and ``decks_per_shoe`` change how a table deals. The
    split and payout fields are validated and carried so callers can read
    them, but the table does not act on them.
    """

    # Player positions dealt each round
    num_boxes: int = 5

    # Split rules
    max_splits_per_box: int = 3
    split_aces: bool = True

    # Shoe configuration
    decks_per_shoe: int = 6

    # Blackjack payout (3:2 = 1.5, 6:5 = 1.2)
    blackjack_payout: float = 1.5

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if self.num_boxes < 1:
            raise ValueError("num_boxes must be at least 1")
        if self.decks_per_shoe < 1 or self.decks_per_shoe > 8:
            raise ValueError("decks_per_shoe must be between 1 and 8")
        if self.max_splits_per_box < 0:
            raise ValueError("max_splits_per_box cannot be negative")
        if self.blackjack_payout < 1.0:
            raise ValueError("blackjack_payout must be at least 1.0")

    @property
    def cards_per_round(self) -> int:
        """Cards needed for an initial deal: two per box, one for the dealer."""
        return 2 * self.num_boxes + 1

    @classmethod
    def from_defaults(cls, defaults: "TableDefaults") -> "TableConfig":
        """Build a configuration from environment-driven defaults."""
        return cls(
            num_boxes=defaults.num_boxes,
            max_splits_per_box=defaults.max_splits_per_box,
            split_aces=defaults.split_aces,
            decks_per_shoe=defaults.decks_per_shoe,
            blackjack_payout=defaults.blackjack_payout,
        )

    @classmethod
    def single_deck(cls) -> "TableConfig":
        """Heads-up single deck table."""
        return cls(
            num_boxes=1,
            max_splits_per_box=1,
            split_aces=False,
            decks_per_shoe=1,
            blackjack_payout=1.5,
        )

    @classmethod
    def six_deck(cls) -> "TableConfig":
        """Full seven-box table on a six deck shoe."""
        return cls(
            num_boxes=7,
            max_splits_per_box=3,
            split_aces=True,
            decks_per_shoe=6,
            blackjack_payout=1.5,
        )
