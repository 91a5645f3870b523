from cardtour.config import get_tour_settings, load_env_file
from cardtour.version import get_version_info


def test_load_env_file(tmp_path):
    env_path = tmp_path / ".env"
    env_path.write_text("TOUR_OWNER=Tim\nTOUR_SUNSET=9:00 pm\n# comment\nNAME=value=with=equals\nTOUR_FAILURE=Out of ${CHEESE}.\n")
    env_vars = load_env_file(str(env_path))
    assert env_vars["TOUR_OWNER"] == "Tim"
    assert env_vars["TOUR_SUNSET"] == "9:00 pm"
    # Ensure values with multiple equals are preserved
    assert env_vars["NAME"] == "value=with=equals"
    # ${...} is not expanded
    assert env_vars["TOUR_FAILURE"] == "Out of ${CHEESE}."


def test_load_env_file_missing(tmp_path):
    assert load_env_file(str(tmp_path / "nope.env")) == {}


def test_defaults(tour_settings):
    assert tour_settings["sunrise"] == "6:00 am"
    assert tour_settings["sunset"] == "8:09 pm"
    assert tour_settings["owner"] == "Brett"
    assert tour_settings["failure"] == "Out of cheese."
    assert tour_settings["color"] is True
    for key, value in get_version_info().items():
        assert tour_settings[key] == value


def test_environment_wins_over_env_file(monkeypatch, tmp_path):
    env_path = tmp_path / ".env"
    env_path.write_text("TOUR_OWNER=Tim\nTOUR_FAILURE=Out of milk.\nTOUR_COLOR=no\n")

    monkeypatch.setenv("TOUR_OWNER", "Ana")

    settings = get_tour_settings(str(env_path))
    assert settings["owner"] == "Ana"
    assert settings["failure"] == "Out of milk."
    assert settings["color"] is False
    assert settings["sunrise"] == "6:00 am"
