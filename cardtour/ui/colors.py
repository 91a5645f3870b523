"""
ANSI color codes for Cards Tour terminal output.
"""

import re


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    BLACK = '\033[30m'
    CYAN = '\033[36m'
    BOLD = '\033[1m'
    RESET = '\033[0m'
    BG_WHITE = '\033[47m'


_ANSI_RE = re.compile(r'\033\[[0-9;]*m')


def strip_colors(text: str) -> str:
    """Remove ANSI color sequences, for plain terminals and logs."""
    return _ANSI_RE.sub('', text)
