"""
Card record for Cards Tour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from cardtour.rank import Rank
from cardtour.suit import Suit


@dataclass(frozen=True)
class Card:
    """A single playing card. Frozen, so copies never share mutations."""

    rank: Rank
    suit: Suit

    def simple_description(self) -> str:
        return f"The {self.rank.simple_description()} of {self.suit.simple_description()}"

    def create_deck(self) -> List[Card]:
        """Build a full deck. The result does not depend on this card."""
        from cardtour.deck import make_deck
        return make_deck()
