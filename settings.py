"""
Application settings: defaults plus an optional JSON file merged over them.

Example file::

    {"canvas_width": 1024, "canvas_height": 768, "reflect_mode": "points"}
"""
import json
import logging

from errors import SettingsError
from transform import REFLECT_MODES

log = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "canvas_width": 800,
    "canvas_height": 600,
    "canvas_bg_color": "#1a1a1a",
    "pixel_color": "#FFFFFF",
    "reflect_mode": "parameters",
    "log_level": "INFO",
}


def load_settings(path=None):
    """读取设置；path 为 None 时返回默认值"""
    settings = dict(DEFAULT_SETTINGS)
    if path is None:
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SettingsError(f"cannot load settings from {path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"settings file {path} must contain a JSON object")

    for key, value in data.items():
        if key not in DEFAULT_SETTINGS:
            log.warning("ignoring unknown setting %r", key)
            continue
        settings[key] = value

    if settings["reflect_mode"] not in REFLECT_MODES:
        log.warning("invalid reflect_mode %r, using %r",
                    settings["reflect_mode"], DEFAULT_SETTINGS["reflect_mode"])
        settings["reflect_mode"] = DEFAULT_SETTINGS["reflect_mode"]

    for key in ("canvas_width", "canvas_height"):
        try:
            settings[key] = max(1, int(settings[key]))
        except (TypeError, ValueError):
            log.warning("invalid %s %r, using default", key, settings[key])
            settings[key] = DEFAULT_SETTINGS[key]

    return settings
