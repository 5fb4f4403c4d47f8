"""Pytest fixtures for card engine tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from card_core.cards import Card, Rank, Suit
from card_core.deck import Deck
from card_core.blackjack import BlackjackTable, Hand, TableConfig


def make_cards(*labels: str) -> list[Card]:
    """Build a card list from short labels like 'AC', 'TH', '7S'."""
    return [Card.from_string(label) for label in labels]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck():
    """A standard deck in construction order."""
    return Deck()


@pytest.fixture
def empty_deck():
    """A deck with no cards."""
    return Deck.empty()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return Hand(make_cards("AS", "KH"))


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand(make_cards("AS", "6H"))


@pytest.fixture
def bust_hand():
    """A busted hand (7-8-9)."""
    return Hand(make_cards("7S", "8D", "9C"))


@pytest.fixture
def rules():
    """A small table: three boxes on a two deck shoe."""
    return TableConfig(num_boxes=3, decks_per_shoe=2)


@pytest.fixture
def table(rules, rng):
    """A new table instance."""
    return BlackjackTable(rules=rules, rng=rng)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random playable card."""
    rank = draw(st.sampled_from(Rank.standard()))
    suit = draw(st.sampled_from(Suit.standard()))
    return Card(rank, suit)


@st.composite
def cards_strategy(draw, min_cards=0, max_cards=8):
    """Generate a random list of playable cards."""
    return draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
