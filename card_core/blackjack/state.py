"""Table state enumeration."""

from enum import Enum, auto


class TableState(Enum):
    """
    Table state machine states.

    Flow: WAITING_FOR_DEAL → DRAWING

    There is no end-of-round state: a table is discarded after one round.
    """

    # Shoe built, nothing dealt yet
    WAITING_FOR_DEAL = auto()

    # Initial cards dealt, callers draw per box / dealer
    DRAWING = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
