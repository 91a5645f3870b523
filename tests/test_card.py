import dataclasses

import pytest

from cardtour.card import Card
from cardtour.rank import Rank
from cardtour.suit import Suit


def test_three_of_spades_description():
    card = Card(Rank.three, Suit.spades)
    assert card.simple_description() == "The 3 of spades"


def test_face_card_description():
    assert Card(Rank.queen, Suit.hearts).simple_description() == "The queen of hearts"


def test_card_is_value_type():
    card = Card(Rank.ace, Suit.clubs)
    copy = dataclasses.replace(card, suit=Suit.diamonds)
    assert card.suit is Suit.clubs
    assert copy == Card(Rank.ace, Suit.diamonds)
    assert Card(Rank.ace, Suit.clubs) == card
    assert hash(Card(Rank.ace, Suit.clubs)) == hash(card)

    with pytest.raises(dataclasses.FrozenInstanceError):
        card.rank = Rank.king


def test_deck_length_and_ends(deck):
    assert len(deck) == 52
    assert deck[0] == Card(Rank.ace, Suit.spades)
    assert deck[-1] == Card(Rank.king, Suit.clubs)
    assert len(set(deck)) == 52


def test_deck_order(deck):
    expected = [Card(rank, suit) for suit in Suit for rank in Rank]
    assert deck == expected
    assert deck[13] == Card(Rank.ace, Suit.hearts)


def test_create_deck_does_not_depend_on_card(deck):
    assert Card(Rank.three, Suit.spades).create_deck() == deck
    assert Card(Rank.king, Suit.diamonds).create_deck() == deck
