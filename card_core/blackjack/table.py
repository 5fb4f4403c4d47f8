"""Multi-box blackjack table dealing from a shared shoe."""

import logging
from dataclasses import dataclass, field
from random import Random
from typing import TYPE_CHECKING, Callable

from transitions import Machine

from card_core.cards import Card
from card_core.deck import STANDARD_DECK_SIZE, Deck
from card_core.errors import ShoeExhaustedError
from card_core.blackjack.events import EventEmitter, EventType, TableEvent
from card_core.blackjack.hand import Hand, HandResult, HandTotal, compare_hands
from card_core.blackjack.rules import TableConfig
from card_core.blackjack.state import TableState

if TYPE_CHECKING:
    from config import AppConfig

logger = logging.getLogger(__name__)


@dataclass
class BlackjackBox(Hand):
    """
    One player position at the table.

    ``splits`` holds the child boxes a split would create. Splitting is not
    played, so it always stays empty.
    """

    splits: list["BlackjackBox"] = field(default_factory=list)

    @property
    def is_split(self) -> bool:
        """Check if this box has been split into child boxes."""
        return bool(self.splits)


class BlackjackTable:
    """
    Deals one round of blackjack to several boxes and a dealer.

    The table only moves cards: callers decide when each box or the dealer
    stops drawing, and read totals and results back.
    """

    # State machine states
    STATES = [s.name.lower() for s in TableState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_deal", "source": "waiting_for_deal", "dest": "drawing"},
    ]

    def __init__(
        self,
        rules: TableConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a table with a fresh shoe.

        Args:
            rules: Table configuration (uses defaults if not provided)
            rng: Random number generator used to pick cards from the shoe
        """
        self.rules = rules or TableConfig()
        self._rng = rng or Random()
        self.shoe = Deck.shoe(self.rules.decks_per_shoe)
        self.boxes = [BlackjackBox() for _ in range(self.rules.num_boxes)]
        self.dealer = Hand()
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_deal",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        logger.debug(
            "Table created: %d boxes, %d card shoe",
            self.rules.num_boxes,
            len(self.shoe),
        )
        self.events.emit_new(
            EventType.TABLE_CREATED,
            num_boxes=self.rules.num_boxes,
            shoe_size=len(self.shoe),
        )

    @classmethod
    def from_app_config(
        cls,
        app_config: "AppConfig | None" = None,
        rng: Random | None = None,
    ) -> "BlackjackTable":
        """
        Create a table from application config, seeding the RNG if configured.

        Args:
            app_config: Configuration to use (the global config if not provided)
            rng: Random number generator, overriding any configured seed
        """
        if app_config is None:
            from config import config

            app_config = config
        if rng is None and app_config.seed is not None:
            rng = Random(app_config.seed)
        return cls(rules=TableConfig.from_defaults(app_config.table), rng=rng)

    @property
    def state(self) -> TableState:
        """Get current table state as enum."""
        return TableState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[TableEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to table events."""
        self.events.subscribe(handler, event_type)

    def draw_card(self) -> Card | None:
        """Remove a uniformly chosen card from the shoe, or None if it is empty."""
        if not self.shoe:
            logger.warning("Draw attempted on an empty shoe")
            self.events.emit_new(EventType.SHOE_EMPTY)
            return None
        return self.shoe.draw_nth(self._rng.randrange(len(self.shoe)))

    def deal_cards(self) -> None:
        """
        Deal the initial round.

        Two passes over the boxes in order, the dealer taking one card after
        the first pass only. The shoe is checked before any card moves.

        Raises:
            ShoeExhaustedError: if the shoe cannot cover every box and the dealer
            MachineError: if the table has already dealt
        """
        needed = self.rules.cards_per_round
        if len(self.shoe) < needed:
            raise ShoeExhaustedError(needed=needed, available=len(self.shoe))

        self.start_deal()

        for first_pass in (True, False):
            for index in range(len(self.boxes)):
                self._deal_to_box(index)
            # Dealer hole card is not dealt
            if first_pass:
                self._deal_to_dealer()

        logger.debug("Round dealt, %d cards left in shoe", len(self.shoe))
        self.events.emit_new(EventType.ROUND_DEALT, shoe_remaining=len(self.shoe))

    def draw_card_for_box(self, index: int) -> Card | None:
        """Draw one card onto a box. Returns None if the shoe is empty."""
        self._box(index)
        return self._deal_to_box(index)

    def draw_card_for_dealer(self) -> Card | None:
        """Draw one card onto the dealer hand. Returns None if the shoe is empty."""
        return self._deal_to_dealer()

    def box_total(self, index: int) -> HandTotal:
        """Return the current hard/soft total of a box."""
        return self._box(index).total

    def dealer_total(self) -> HandTotal:
        """Return the current hard/soft total of the dealer hand."""
        return self.dealer.total

    def box(self, index: int) -> BlackjackBox:
        """Return the box at ``index``."""
        return self._box(index)

    def results(self) -> list[HandResult]:
        """Compare every box against the dealer hand, in box order."""
        return [compare_hands(box.cards, self.dealer.cards) for box in self.boxes]

    @property
    def cards_in_play(self) -> int:
        """Number of cards held by the boxes and the dealer."""
        return sum(len(box) for box in self.boxes) + len(self.dealer)

    @property
    def shoe_capacity(self) -> int:
        """Number of cards in a full shoe."""
        return self.rules.decks_per_shoe * STANDARD_DECK_SIZE

    def _box(self, index: int) -> BlackjackBox:
        if not 0 <= index < len(self.boxes):
            raise IndexError(f"No box {index}, table has {len(self.boxes)}")
        return self.boxes[index]

    def _deal_to_box(self, index: int) -> Card | None:
        card = self.draw_card()
        if card is None:
            return None
        self.boxes[index].add_card(card)
        logger.debug("Box %d dealt %s", index, card)
        self.events.emit_new(EventType.CARD_DEALT, target="box", box=index, card=str(card))
        return card

    def _deal_to_dealer(self) -> Card | None:
        card = self.draw_card()
        if card is None:
            return None
        self.dealer.add_card(card)
        logger.debug("Dealer dealt %s", card)
        self.events.emit_new(EventType.CARD_DEALT, target="dealer", box=None, card=str(card))
        return card
