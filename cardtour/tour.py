"""
Guided tour of enumerations and structures.

Replays each demonstration on its own and returns the printed lines, so the
command line driver and the tests share one source of output.
"""

import logging
from typing import Any, Dict, List, Optional

from cardtour.card import Card
from cardtour.deck import make_deck
from cardtour.month import Month
from cardtour.rank import Rank, max_card
from cardtour.server_response import describe_response, make_failure, make_owner, make_result
from cardtour.suit import Suit
from cardtour.ui import Colors


def rank_lines() -> List[str]:
    """Compare ranks by raw value."""
    ace, king, seven = Rank.ace, Rank.king, Rank.seven
    return [
        f"{max_card(ace, king)} should be 13",
        f"{max_card(king, seven)} should be 13",
        f"{max_card(seven, ace)} should be 7",
    ]


def conversion_lines() -> List[str]:
    """Convert raw values back into ranks; 0 and 15 have no rank."""
    lines = []
    for raw_value in (1, 11, 0, 15):
        rank = Rank.from_raw_value(raw_value)
        if rank is None:
            lines.append(f"Rank({raw_value}) is not a rank")
        else:
            lines.append(f"Rank({raw_value}) is {rank.simple_description()}")
    return lines


def suit_lines() -> List[str]:
    return [
        f"{suit.simple_description()} are {suit.color()}"
        for suit in (Suit.hearts, Suit.clubs)
    ]


def month_lines() -> List[str]:
    return [f"{month.name} is month {month.month_number()}" for month in (Month.dec, Month.jan)]


def response_lines(settings: Dict[str, Any]) -> List[str]:
    """Match each kind of server response."""
    responses = [
        make_result(settings['sunrise'], settings['sunset']),
        make_owner(settings['owner']),
        make_failure(settings['failure']),
    ]
    return [describe_response(response) for response in responses]


def card_lines() -> List[str]:
    three_of_spades = Card(Rank.three, Suit.spades)
    deck = three_of_spades.create_deck()
    return [
        three_of_spades.simple_description(),
        f"A full deck has {len(deck)} cards",
    ]


def run_tour(settings: Optional[Dict[str, Any]] = None) -> List[str]:
    """Run every demonstration and return the output lines in order."""
    if settings is None:
        from cardtour.config import get_tour_settings
        settings = get_tour_settings()

    sections = [
        ("Ranks", rank_lines()),
        ("Raw values", conversion_lines()),
        ("Suits", suit_lines()),
        ("Months", month_lines()),
        ("Server responses", response_lines(settings)),
        ("Cards", card_lines()),
    ]

    out = []
    for title, lines in sections:
        logging.debug(f"Tour section {title}: {len(lines)} lines")
        out.append(f"{Colors.BOLD}{Colors.CYAN}{title}{Colors.RESET}")
        out.extend(lines)
        out.append("")
    return out
