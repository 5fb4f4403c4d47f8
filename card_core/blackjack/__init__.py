"""Blackjack evaluation and table dealing."""

from card_core.blackjack.events import EventEmitter, EventType, TableEvent
from card_core.blackjack.hand import (
    Hand,
    HandResult,
    HandTotal,
    Outcome,
    compare_hands,
    get_card_value,
    hand_value,
    is_natural,
)
from card_core.blackjack.rules import TableConfig
from card_core.blackjack.state import TableState
from card_core.blackjack.table import BlackjackBox, BlackjackTable

__all__ = [
    "EventEmitter",
    "EventType",
    "TableEvent",
    "Hand",
    "HandResult",
    "HandTotal",
    "Outcome",
    "compare_hands",
    "get_card_value",
    "hand_value",
    "is_natural",
    "TableConfig",
    "TableState",
    "BlackjackBox",
    "BlackjackTable",
]
