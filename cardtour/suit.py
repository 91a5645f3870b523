"""
Card suits for Cards Tour.
Raw values run 1 (spades) through 4 (clubs).
"""

from cardtour.raw_value import RawValueEnum


class Suit(RawValueEnum):
    """Playing card suit backed by an integer raw value."""
    spades = 1
    hearts = 2
    diamonds = 3
    clubs = 4

    def simple_description(self) -> str:
        return {
            Suit.spades: 'spades',
            Suit.hearts: 'hearts',
            Suit.diamonds: 'diamonds',
            Suit.clubs: 'clubs',
        }[self]

    def color(self) -> str:
        """Return "black" for spades and clubs, "red" for hearts and diamonds."""
        if self in (Suit.spades, Suit.clubs):
            return 'black'
        return 'red'
