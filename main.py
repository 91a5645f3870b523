"""
Entry point for Cards Tour
Prints the guided tour of enumerations and structures.
"""

import argparse
import logging

from cardtour.config import get_tour_settings
from cardtour.deck import make_deck
from cardtour.tour import run_tour
from cardtour.ui import deck_grid, strip_colors


def main(argv=None):
    parser = argparse.ArgumentParser(description="Tour enumerations and structures with a deck of cards")
    parser.add_argument("--deck", action="store_true", help="Also draw the full deck")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--env-file", default=".env", help="Settings file to read")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        settings = get_tour_settings(args.env_file)
        use_color = settings['color'] and not args.no_color
        logging.info(f"Cards Tour {settings['version']} ({settings['build_date']})")

        out = run_tour(settings)
        if args.deck:
            out.append(deck_grid(make_deck()))

        text = "\n".join(out)
        if not use_color:
            text = strip_colors(text)
        print(text)
    except KeyboardInterrupt:
        print("\n👋 Bye")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
