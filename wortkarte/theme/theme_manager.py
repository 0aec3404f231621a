from kivy.core.window import Window

from wortkarte.core.logging_utils import log
from .palettes import DEFAULT_PRESET, THEME_PRESETS


def build_palette(config: dict) -> dict:
    """
    Effective color palette from config:
      - preset: watch/light
      - custom_colors: partial rgba overrides on top of the preset
    """
    theme_cfg = config.get("settings", {}).get("theme", {}) or {}
    preset = theme_cfg.get("preset", DEFAULT_PRESET)
    if preset not in THEME_PRESETS:
        log(f"unknown theme preset {preset!r}, using {DEFAULT_PRESET}", level="warning")
        preset = DEFAULT_PRESET

    palette = dict(THEME_PRESETS[preset])
    overrides = theme_cfg.get("custom_colors", {}) or {}
    for k, rgba in overrides.items():
        try:
            palette[k] = tuple(float(c) for c in rgba)
        except (TypeError, ValueError):
            log(f"ignoring invalid color override {k}={rgba!r}", level="warning")

    return palette


def apply_theme_from_config(config: dict) -> dict:
    """Build the palette and apply Window.clearcolor."""
    palette = build_palette(config)
    Window.clearcolor = palette["bg"]
    return palette
