import yaml

from wortkarte.core.dict_path import merge_in
from wortkarte.core.logging_utils import log
from wortkarte.core.paths import config_path, words_path


DEFAULT_SETTINGS = {
    "settings": {
        "words_file": "words_a1_2.csv",
        "delimiter": ",",
        "theme": {
            "preset": "watch",
            "custom_colors": {},
        },
        "gui": {
            "word_font_size": 34,
            "translation_font_size": 24,
            "min_font_size": 6,
            "padding": 16,
            "reveal_offset": 100,
            "animation_duration": 0.3,
            "window_size": [454, 454],
        },
        "gestures": {
            "threshold": 20,
            "swipe_policy": "bidirectional",
        },
        "autofit": {
            "decay": 0.9,
            "max_iterations": 50,
        },
    }
}


def load_settings(filename=None):
    """
    Load config.yml on top of DEFAULT_SETTINGS.

    Missing keys keep their defaults; a missing or broken file gives the
    defaults alone (the app must still start on the watch).
    """
    filename = filename or config_path()
    try:
        with open(filename, "r", encoding="utf-8") as file:
            config_readable = yaml.safe_load(file) or {}
    except (OSError, yaml.YAMLError) as e:
        log(f"could not load settings from {filename}: {e}; using defaults", level="warning")
        return merge_in(DEFAULT_SETTINGS, {})

    if not isinstance(config_readable, dict):
        log(f"ignoring settings in {filename}: top level is not a mapping", level="warning")
        return merge_in(DEFAULT_SETTINGS, {})

    return merge_in(DEFAULT_SETTINGS, config_readable)


def word_list_settings(config):
    """Word file path and delimiter from the config; empty values use the defaults."""
    settings = config.get("settings") or {}
    defaults = DEFAULT_SETTINGS["settings"]
    filename = settings.get("words_file") or defaults["words_file"]
    delimiter = settings.get("delimiter") or defaults["delimiter"]
    return words_path(str(filename)), str(delimiter)
