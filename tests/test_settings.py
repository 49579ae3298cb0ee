"""
Tests for settings loading.
"""
import json

import pytest

from errors import SettingsError
from settings import DEFAULT_SETTINGS, load_settings


def _write(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


class TestLoadSettings:

    def test_defaults_without_file(self):
        settings = load_settings()
        assert settings == DEFAULT_SETTINGS
        assert settings is not DEFAULT_SETTINGS

    def test_file_overrides_defaults(self, tmp_path):
        path = _write(tmp_path, {"canvas_width": 1024, "reflect_mode": "points"})
        settings = load_settings(path)
        assert settings["canvas_width"] == 1024
        assert settings["reflect_mode"] == "points"
        assert settings["canvas_height"] == DEFAULT_SETTINGS["canvas_height"]

    def test_unknown_keys_are_ignored(self, tmp_path):
        settings = load_settings(_write(tmp_path, {"zoom": 3}))
        assert "zoom" not in settings

    def test_invalid_reflect_mode_falls_back(self, tmp_path):
        settings = load_settings(_write(tmp_path, {"reflect_mode": "mirror"}))
        assert settings["reflect_mode"] == "parameters"

    def test_invalid_size_falls_back(self, tmp_path):
        settings = load_settings(_write(tmp_path, {"canvas_height": "tall"}))
        assert settings["canvas_height"] == DEFAULT_SETTINGS["canvas_height"]

    def test_invalid_json(self, tmp_path):
        with pytest.raises(SettingsError):
            load_settings(_write(tmp_path, "{not json"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(SettingsError):
            load_settings(tmp_path / "nope.json")

    def test_non_object(self, tmp_path):
        with pytest.raises(SettingsError):
            load_settings(_write(tmp_path, [1, 2]))
