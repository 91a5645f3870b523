import pytest

from cardtour.config import DEFAULTS, get_tour_settings
from cardtour.deck import make_deck


@pytest.fixture
def deck():
    """Fresh deck for each test."""
    return make_deck()


@pytest.fixture
def tour_settings(tmp_path):
    """Default settings, read from an empty directory so no .env leaks in."""
    return get_tour_settings(str(tmp_path / ".env"))


@pytest.fixture(autouse=True)
def clean_tour_environment(monkeypatch):
    """Ensure TOUR_* variables from the caller's shell do not affect tests."""

    for key in DEFAULTS:
        monkeypatch.delenv(key, raising=False)
