"""
Configuration for Cards Tour.
Loads tour settings from the environment and an optional .env file.
"""

import logging
import os
from typing import Any, Dict

from dotenv import dotenv_values

from .version import get_version_info

DEFAULTS = {
    'TOUR_SUNRISE': '6:00 am',
    'TOUR_SUNSET': '8:09 pm',
    'TOUR_OWNER': 'Brett',
    'TOUR_FAILURE': 'Out of cheese.',
    'TOUR_COLOR': '1',
}

FALSE_VALUES = {'0', 'false', 'no', 'off'}


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Load variables from a .env file, empty if the file does not exist"""
    if not os.path.isfile(filepath):
        return {}
    # keep values as written; keys without "=" come back as None
    return {k: v for k, v in dotenv_values(filepath, interpolate=False).items() if v is not None}


def get_tour_settings(filepath: str = ".env") -> Dict[str, Any]:
    """Get tour settings; the real environment wins over .env, .env over defaults"""
    env_vars = load_env_file(filepath)

    settings = {}
    for key, default in DEFAULTS.items():
        settings[key] = os.getenv(key) or env_vars.get(key, default)

    logging.debug(f"Tour settings loaded ({len(env_vars)} values from {filepath})")

    return {
        'sunrise': settings['TOUR_SUNRISE'],
        'sunset': settings['TOUR_SUNSET'],
        'owner': settings['TOUR_OWNER'],
        'failure': settings['TOUR_FAILURE'],
        'color': settings['TOUR_COLOR'].strip().lower() not in FALSE_VALUES,
        **get_version_info()
    }
