"""Tests for hand construction and the category detectors."""

import pytest

from poker_hands.errors import (
    DuplicateCard, InvalidCardFormat, InvalidCardType, InvalidHandSize, PokerHandError,
)
from poker_hands.evaluation.classifier import HandClassifier
from poker_hands.models.card import Card, Suit
from poker_hands.models.hand import Hand


def classify(text: str) -> HandClassifier:
    return HandClassifier(Hand.parse(text))


class TestHandConstruction:
    """Tests for building a Hand."""

    def test_from_strings(self):
        """Test building a hand from notation, keeping the supplied order."""
        hand = Hand(["5H", "5C", "6S", "7S", "KD"])
        assert [str(c) for c in hand.cards] == ["5H", "5C", "6S", "7S", "KD"]

    def test_mixed_items(self):
        """Test mixing Card objects and notation."""
        hand = Hand([Card(14, Suit.SPADES), "KS", "QS", Card.parse("JS"), "TS"])
        assert len(hand) == 5
        assert hand.cards[0].key == (14, Suit.SPADES)

    def test_parse(self):
        """Test building a hand from a single string."""
        assert str(Hand.parse("5H 5C 6S 7S KD")) == "5H 5C 6S 7S KD"

    @pytest.mark.parametrize("cards", [[], ["5H"] * 4, ["5H", "5C", "6S", "7S", "KD", "2C"]])
    def test_wrong_size(self, cards):
        """Test that a hand must hold exactly five cards."""
        with pytest.raises(InvalidHandSize):
            Hand(cards)

    def test_malformed_card(self):
        """Test that a malformed card aborts the hand."""
        with pytest.raises(InvalidCardFormat):
            Hand(["5H", "5C", "6S", "7S", "XX"])

    def test_wrong_item_type(self):
        """Test that items must be cards or strings."""
        with pytest.raises(InvalidCardType):
            Hand(["5H", "5C", "6S", "7S", 13])
        with pytest.raises(TypeError):
            Hand(["5H", "5C", "6S", "7S", None])

    @pytest.mark.parametrize("cards", [None, 5, Card.parse("5H")])
    def test_not_iterable(self, cards):
        """Test that a non-iterable argument raises an engine error."""
        with pytest.raises(InvalidCardType):
            Hand(cards)
        with pytest.raises(PokerHandError):
            Hand(cards)

    def test_duplicates_allowed_by_default(self):
        """Test that duplicate cards are accepted when not strict."""
        hand = Hand(["5H", "5H", "6S", "7S", "KD"], strict=False)
        assert hand.category.name == "ONE_PAIR"

    def test_duplicates_rejected_when_strict(self):
        """Test that strict hands reject the same card twice."""
        with pytest.raises(DuplicateCard, match="5H"):
            Hand(["5H", "5H", "6S", "7S", "KD"], strict=True)

    def test_strict_allows_same_rank_other_suit(self):
        """Test that strict hands still allow pairs of different suits."""
        hand = Hand(["5H", "5C", "5S", "7S", "KD"], strict=True)
        assert hand.category.name == "THREE_OF_A_KIND"

    def test_strict_from_config(self, monkeypatch):
        """Test that the configured default turns on strict checking."""
        from poker_hands import config
        monkeypatch.setattr(config, "STRICT_DECK", True)
        with pytest.raises(DuplicateCard):
            Hand(["5H", "5H", "6S", "7S", "KD"])

    def test_cards_by_val_is_stable(self):
        """Test that sorting by rank keeps supplied order for equal ranks."""
        hand = Hand.parse("KD 5H 7S 5C 6S")
        assert [str(c) for c in hand.cards_by_val] == ["5H", "5C", "6S", "7S", "KD"]
        # supplied order is untouched
        assert str(hand.cards[0]) == "KD"

    def test_ranks(self):
        """Test the sorted rank list."""
        assert Hand.parse("KD 5H 7S 5C 6S").ranks == [5, 5, 6, 7, 13]


class TestGroups:
    """Tests for grouping cards by rank."""

    def test_groups_of_size(self):
        """Test filtering groups by size."""
        c = classify("5H 5C 6S 6D 6H")
        assert [[str(x) for x in g] for g in c.groups_of_size(3)] == [["6S", "6D", "6H"]]
        assert [[str(x) for x in g] for g in c.groups_of_size(2)] == [["5H", "5C"]]
        assert c.groups_of_size(4) == []

    def test_size_zero_returns_every_group(self):
        """Test that size zero skips the filter."""
        groups = classify("5H 5C 6S 7S KD").groups_of_size(0)
        assert [len(g) for g in groups] == [2, 1, 1, 1]


class TestDetectors:
    """Tests for the individual category detectors."""

    def test_high_card(self):
        """Test that the high card is the top-ranked card."""
        assert [str(c) for c in classify("2H 9C 4S KD 7S").high_card()] == ["KD"]

    def test_one_pair(self):
        """Test detecting a single pair."""
        c = classify("5H 5C 6S 7S KD")
        assert [str(x) for x in c.one_pair()] == ["5H", "5C"]
        assert c.two_pairs() is None

    def test_one_pair_rejects_two_pairs(self):
        """Test that two pairs are not one pair."""
        assert classify("5H 5C 6S 6D KD").one_pair() is None

    def test_two_pairs(self):
        """Test detecting two pairs."""
        c = classify("9H 9C 5S 5D 3D")
        assert sorted(x.rank for x in c.two_pairs()) == [5, 5, 9, 9]

    def test_three_of_a_kind(self):
        """Test detecting three of a kind."""
        c = classify("2D 9C AS AH AC")
        assert [x.rank for x in c.three_of_a_kind()] == [14, 14, 14]
        assert c.one_pair() is None

    def test_straight(self):
        """Test detecting a straight."""
        c = classify("9H TC JS QD KD")
        assert [x.rank for x in c.straight()] == [9, 10, 11, 12, 13]

    def test_straight_unsorted(self):
        """Test that card order does not matter for a straight."""
        assert classify("QD 9H KD JS TC").straight() is not None

    def test_broadway_straight(self):
        """Test that ten to ace is a straight."""
        assert classify("TH JC QS KD AD").straight() is not None

    def test_no_ace_low_straight(self):
        """Test that ace to five is not a straight."""
        assert classify("AH 2C 3S 4D 5D").straight() is None

    def test_no_wraparound(self):
        """Test that runs do not wrap past the ace."""
        assert classify("QH KC AS 2D 3D").straight() is None

    def test_gap_is_not_straight(self):
        """Test that a gap breaks the straight."""
        assert classify("2H 3C 4S 5D 7D").straight() is None

    def test_flush(self):
        """Test detecting a flush."""
        assert classify("3D 6D 7D TD QD").flush() is not None
        assert classify("3D 6D 7D TD QH").flush() is None

    def test_full_house(self):
        """Test detecting a full house."""
        c = classify("2H 2D 4C 4D 4S")
        assert [x.rank for x in c.full_house()] == [4, 4, 4, 2, 2]

    def test_full_house_needs_pair(self):
        """Test that trips alone are not a full house."""
        assert classify("2H 3D 4C 4D 4S").full_house() is None

    def test_four_of_a_kind(self):
        """Test detecting four of a kind."""
        c = classify("7H 7D 7C 7S KD")
        assert [x.rank for x in c.four_of_a_kind()] == [7, 7, 7, 7]
        assert c.three_of_a_kind() is None

    def test_straight_flush(self):
        """Test detecting a straight flush."""
        c = classify("5S 6S 7S 8S 9S")
        assert [x.rank for x in c.straight_flush()] == [5, 6, 7, 8, 9]
        assert c.royal_flush() is None

    def test_royal_flush(self):
        """Test detecting a royal flush."""
        c = classify("AH KH QH JH TH")
        assert len(c.royal_flush()) == 5
        assert c.straight_flush() is not None

    def test_ace_high_non_flush_is_not_royal(self):
        """Test that a royal flush needs one suit."""
        assert classify("AH KH QH JH TS").royal_flush() is None
