"""
UI module for Cards Tour.
Provides terminal UI components for consistent presentation.
"""

from .colors import Colors, strip_colors
from .cards import card_str, cards_horizontal, deck_grid, SUIT_SYMBOLS, SUIT_COLORS

__all__ = ['Colors', 'strip_colors', 'card_str', 'cards_horizontal', 'deck_grid', 'SUIT_SYMBOLS', 'SUIT_COLORS']
