"""Tests for Suit, Rank and Card."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from card_core.cards import Card, Rank, Suit


class TestSuit:
    """Tests for the Suit enum."""

    def test_from_ordinal(self):
        """Test ordinal to suit conversion."""
        assert Suit.from_ordinal(0) == Suit.CLUBS
        assert Suit.from_ordinal(1) == Suit.DIAMONDS
        assert Suit.from_ordinal(2) == Suit.HEARTS
        assert Suit.from_ordinal(3) == Suit.SPADES
        assert Suit.from_ordinal(4) == Suit.NONE

    def test_to_ordinal(self):
        """Test suit to ordinal conversion."""
        assert [s.ordinal for s in Suit] == [0, 1, 2, 3, 4]

    def test_out_of_range_is_none(self):
        """Test that invalid ordinals degrade to NONE."""
        assert Suit.from_ordinal(-1) == Suit.NONE
        assert Suit.from_ordinal(12) == Suit.NONE
        assert Suit.from_ordinal(255) == Suit.NONE

    def test_ordering(self):
        """Test real suits order Clubs < Diamonds < Hearts < Spades."""
        assert Suit.CLUBS < Suit.DIAMONDS < Suit.HEARTS < Suit.SPADES
        assert Suit.SPADES > Suit.CLUBS
        assert Suit.HEARTS >= Suit.HEARTS
        assert sorted(reversed(Suit.standard())) == Suit.standard()

    def test_none_is_unordered(self):
        """Test that NONE does not compare against real suits."""
        with pytest.raises(TypeError):
            Suit.NONE < Suit.CLUBS
        with pytest.raises(TypeError):
            Suit.SPADES > Suit.NONE
        with pytest.raises(TypeError):
            Suit.CLUBS < 1

    def test_standard_suits(self):
        """Test that NONE is not a standard suit."""
        assert Suit.standard() == [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES]


class TestRank:
    """Tests for the Rank enum."""

    def test_from_ordinal(self):
        """Test ordinal to rank conversion."""
        assert Rank.from_ordinal(0) == Rank.ACE
        assert Rank.from_ordinal(1) == Rank.TWO
        assert Rank.from_ordinal(8) == Rank.NINE
        assert Rank.from_ordinal(9) == Rank.TEN
        assert Rank.from_ordinal(10) == Rank.JACK
        assert Rank.from_ordinal(11) == Rank.QUEEN
        assert Rank.from_ordinal(12) == Rank.KING
        assert Rank.from_ordinal(13) == Rank.JOKER

    def test_to_ordinal(self):
        """Test rank to ordinal conversion."""
        assert [r.ordinal for r in Rank] == list(range(14))

    def test_out_of_range_is_joker(self):
        """Test that invalid ordinals degrade to JOKER."""
        assert Rank.from_ordinal(-3) == Rank.JOKER
        assert Rank.from_ordinal(113) == Rank.JOKER

    def test_ordering(self):
        """Test that ranks order by ordinal."""
        assert Rank.ACE < Rank.TWO < Rank.KING < Rank.JOKER
        assert Rank.QUEEN > Rank.JACK
        assert Rank.TEN >= Rank.TEN
        assert Rank.FIVE <= Rank.SIX

    def test_ordering_with_other_types(self):
        """Test that ranks do not order against other types."""
        with pytest.raises(TypeError):
            Rank.ACE < 3

    def test_ten_value(self):
        """Test ten-value detection."""
        assert all(r.is_ten_value for r in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING))
        assert not Rank.NINE.is_ten_value
        assert not Rank.ACE.is_ten_value
        assert not Rank.JOKER.is_ten_value

    def test_str(self):
        """Test short rank labels."""
        assert str(Rank.ACE) == "A"
        assert str(Rank.TWO) == "2"
        assert str(Rank.NINE) == "9"
        assert str(Rank.TEN) == "T"
        assert str(Rank.KING) == "K"
        assert str(Rank.JOKER) == "JOKER"


class TestCard:
    """Tests for the Card class."""

    def test_default_card(self):
        """Test that the default card is the Ace of Clubs."""
        card = Card()
        assert card.rank == Rank.ACE
        assert card.suit == Suit.CLUBS

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_from_ordinals(self):
        """Test building cards from ordinals."""
        assert Card.from_ordinals(0, 12) == Card(Rank.KING, Suit.CLUBS)
        assert Card.from_ordinals(1, 11) == Card(Rank.QUEEN, Suit.DIAMONDS)
        assert Card.from_ordinals(2, 10) == Card(Rank.JACK, Suit.HEARTS)
        assert Card.from_ordinals(3, 9) == Card(Rank.TEN, Suit.SPADES)

    def test_joker_from_ordinals(self):
        """Test that any invalid ordinals build a joker."""
        joker = Card(Rank.JOKER, Suit.NONE)
        assert Card.from_ordinals(4, 13) == joker
        assert Card.from_ordinals(12, 113) == joker
        assert Card.from_ordinals(12, 113).is_joker

    def test_partial_sentinel(self):
        """Test that suit and rank degrade independently."""
        assert Card.from_ordinals(7, 0) == Card(Rank.ACE, Suit.NONE)
        assert Card.from_ordinals(2, 20) == Card(Rank.JOKER, Suit.HEARTS)

    @given(st.integers(0, 3), st.integers(0, 12))
    def test_from_ordinals_round_trip(self, suit, rank):
        """Test that in-range ordinals round trip."""
        card = Card.from_ordinals(suit, rank)
        assert card.suit == Suit.from_ordinal(suit)
        assert card.rank == Rank.from_ordinal(rank)
        assert card.suit.ordinal == suit
        assert card.rank.ordinal == rank
        assert card.ordinal == suit * 13 + rank

    @given(st.integers(), st.integers())
    def test_from_ordinals_is_total(self, suit, rank):
        """Test that construction never fails and degrades to sentinels."""
        card = Card.from_ordinals(suit, rank)
        if not 0 <= suit <= 3:
            assert card.suit == Suit.NONE
        if not 0 <= rank <= 12:
            assert card.rank == Rank.JOKER

    def test_with_rank_and_suit(self):
        """Test replacing fields on a copy."""
        card = Card()
        hearts = card.with_suit(Suit.HEARTS)
        assert hearts == Card(Rank.ACE, Suit.HEARTS)
        assert card == Card(Rank.ACE, Suit.CLUBS)

        five = hearts.with_rank(Rank.FIVE)
        assert five == Card(Rank.FIVE, Suit.HEARTS)
        assert five.with_rank(Rank.TEN).rank == Rank.TEN

    def test_sentinels_never_equal_real_values(self):
        """Test that sentinel cards differ from every standard card."""
        joker = Card(Rank.JOKER, Suit.NONE)
        standard = [Card.from_ordinals(i // 13, i % 13) for i in range(52)]
        assert joker not in standard
        assert all(Suit.NONE != s for s in Suit.standard())
        assert all(Rank.JOKER != r for r in Rank.standard())

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("td") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("KC") == Card(Rank.KING, Suit.CLUBS)
        assert Card.from_string("A♠") == Card(Rank.ACE, Suit.SPADES)

    def test_card_from_string_invalid(self):
        """Test that bad labels are rejected."""
        with pytest.raises(ValueError):
            Card.from_string("A")
        with pytest.raises(ValueError):
            Card.from_string("1S")
        with pytest.raises(ValueError):
            Card.from_string("AX")

    def test_card_str(self):
        """Test string representation."""
        assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"
        assert str(Card(Rank.JOKER, Suit.NONE)) == "JOKER-"

    def test_card_hash(self):
        """Test that cards can be used in sets/dicts."""
        cards = {Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}
        assert len(cards) == 1
