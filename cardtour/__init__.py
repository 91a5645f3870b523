"""
Cards Tour: enumerations and structures through a deck of playing cards.
"""

from cardtour.card import Card
from cardtour.deck import make_deck
from cardtour.month import Month
from cardtour.rank import Rank, max_card
from cardtour.server_response import (
    Failure,
    Owner,
    Result,
    ServerResponse,
    describe_response,
    make_failure,
    make_owner,
    make_result,
)
from cardtour.suit import Suit

__all__ = [
    'Card',
    'Failure',
    'Month',
    'Owner',
    'Rank',
    'Result',
    'ServerResponse',
    'Suit',
    'describe_response',
    'make_deck',
    'make_failure',
    'make_owner',
    'make_result',
    'max_card',
]
