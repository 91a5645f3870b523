"""
Card rendering utilities for Cards Tour.
Handles ASCII art card visualization and layout.
"""

from typing import Iterable, List

from cardtour.card import Card
from cardtour.suit import Suit
from .colors import Colors


# Card suit symbols
SUIT_SYMBOLS = {
    Suit.spades: '♠',
    Suit.hearts: '♥',
    Suit.diamonds: '♦',
    Suit.clubs: '♣',
}

# Keyed by Suit.color()
SUIT_COLORS = {
    'red': Colors.RED,
    'black': Colors.BLACK,
}

RANK_LABELS = {1: 'A', 11: 'J', 12: 'Q', 13: 'K'}


def card_str(card: Card) -> List[str]:
    """Format a single card as ASCII art lines."""
    rank = RANK_LABELS.get(card.rank.raw_value, str(card.rank.raw_value))
    symbol = SUIT_SYMBOLS[card.suit]
    color = SUIT_COLORS[card.suit.color()]

    # rank is 1 or 2 characters, pad to 2
    rank_left = f"{rank:<2}"
    rank_right = f"{rank:>2}"

    top = f"{Colors.BOLD}{Colors.BG_WHITE}{color}╭───╮{Colors.RESET}"
    mid1 = f"{Colors.BOLD}{Colors.BG_WHITE}{color}│{rank_left}{symbol}│{Colors.RESET}"
    mid2 = f"{Colors.BOLD}{Colors.BG_WHITE}{color}│   │{Colors.RESET}"
    mid3 = f"{Colors.BOLD}{Colors.BG_WHITE}{color}│{symbol}{rank_right}│{Colors.RESET}"
    bot = f"{Colors.BOLD}{Colors.BG_WHITE}{color}╰───╯{Colors.RESET}"

    return [top, mid1, mid2, mid3, bot]


def cards_horizontal(cards: Iterable[Card]) -> str:
    """Render multiple cards side-by-side horizontally."""
    card_lines = [card_str(card) for card in cards]
    if not card_lines:
        return ""

    result_lines = []
    for line_idx in range(5):  # Each card has 5 lines
        result_lines.append(" ".join(lines[line_idx] for lines in card_lines))

    return "\n".join(result_lines)


def deck_grid(deck: List[Card], per_row: int = 13) -> str:
    """Render a deck as rows of per_row cards."""
    if per_row < 1:
        raise ValueError(f"per_row must be at least 1, got {per_row}")

    rows = [cards_horizontal(deck[i:i + per_row]) for i in range(0, len(deck), per_row)]
    return "\n".join(rows)
