"""
Card ranks for Cards Tour.
Ace is low: raw values run 1 (ace) through 13 (king).
"""

from cardtour.raw_value import RawValueEnum


class Rank(RawValueEnum):
    """Playing card rank backed by an integer raw value."""
    ace = 1
    two = 2
    three = 3
    four = 4
    five = 5
    six = 6
    seven = 7
    eight = 8
    nine = 9
    ten = 10
    jack = 11
    queen = 12
    king = 13

    def simple_description(self) -> str:
        names = {1: 'ace', 11: 'jack', 12: 'queen', 13: 'king'}
        return names.get(self.raw_value, str(self.raw_value))


def max_card(card1: Rank, card2: Rank) -> int:
    """Return the larger raw value of two ranks.

    Equal ranks fall through to card2, so a tie reports card2's raw value.
    """
    if card1.raw_value > card2.raw_value:
        return card1.raw_value
    else:
        return card2.raw_value
