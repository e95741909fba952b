import json
from pathlib import Path
from settings_handler import get_settings, reset_settings, save_settings, DEFAULT_SETTINGS


def test_missing_settings_file_is_created(tmp_path):
    path = tmp_path / "settings.json"
    settings = get_settings(path)
    assert settings == DEFAULT_SETTINGS
    with open(path) as f:
        assert json.load(f) == DEFAULT_SETTINGS


def test_missing_keys_fall_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    save_settings({"tolerance": 0.5}, path)
    settings = get_settings(path)
    assert settings["tolerance"] == 0.5
    assert settings["copySecret"] == DEFAULT_SETTINGS["copySecret"]


def test_reset_settings(tmp_path):
    path = tmp_path / "settings.json"
    save_settings({**DEFAULT_SETTINGS, "showValidation": "no"}, path)
    assert reset_settings(path) == DEFAULT_SETTINGS
    assert get_settings(path) == DEFAULT_SETTINGS


def test_bundled_settings_file_matches_defaults():
    with open(Path(__file__).parent / "settings.json") as f:
        assert json.load(f) == DEFAULT_SETTINGS
