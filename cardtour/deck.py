"""
Deck construction for Cards Tour.
"""

import logging
from typing import List

from cardtour.card import Card
from cardtour.rank import Rank
from cardtour.suit import Suit


def make_deck() -> List[Card]:
    """Create one card for every suit and rank combination.

    Suits and ranks are probed by raw value starting at 1 until a lookup
    comes back empty, so the deck is ordered spades..clubs, ace..king.
    """
    deck = []
    n = 1
    suit = Suit.from_raw_value(n)
    # loop through each suit
    while suit is not None:
        # loop through each rank
        m = 1
        rank = Rank.from_raw_value(m)
        while rank is not None:
            deck.append(Card(rank, suit))
            m += 1
            rank = Rank.from_raw_value(m)
        n += 1
        suit = Suit.from_raw_value(n)
    logging.debug(f"Built deck of {len(deck)} cards from {n - 1} suits")
    return deck
