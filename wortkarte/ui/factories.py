from kivy.metrics import dp, sp
from kivy.uix.label import Label

import labels
from wortkarte.core import gestures
from wortkarte.core.autofit import DEFAULT_DECAY
from wortkarte.core.dict_path import float_cast, get_in
from wortkarte.core.logging_utils import log
from wortkarte.ui.widgets.autofit_label import AutoFitLabel
from wortkarte.ui.widgets.chevron import Chevron
from wortkarte.ui.widgets.time_text import TimeText


class UIFactoryMixin:
    """
    Shared UI factories. Uses:
      self.config_data (dict)
      self.colors (dict)
    """

    def cfg_int(self, path, default=0) -> int:
        return int(self.cfg_float(path, default))

    def cfg_float(self, path, default=0.0) -> float:
        return float_cast(get_in(self.config_data, path, default), default)

    def cfg_swipe_policy(self) -> str:
        policy = get_in(self.config_data, ["settings", "gestures", "swipe_policy"], gestures.BIDIRECTIONAL)
        if policy not in gestures.SWIPE_POLICIES:
            log(f"unknown swipe policy {policy!r}, using {gestures.BIDIRECTIONAL}", level="warning")
            return gestures.BIDIRECTIONAL
        return policy

    def cfg_decay(self) -> float:
        decay = self.cfg_float(["settings", "autofit", "decay"], DEFAULT_DECAY)
        if not 0 < decay < 1:
            log(f"autofit decay must be between 0 and 1, got {decay}; using {DEFAULT_DECAY}", level="warning")
            return DEFAULT_DECAY
        return decay

    def cfg_font_size(self, key, default) -> float:
        size = self.cfg_float(["settings", "gui", key], default)
        if size <= 0:
            log(f"{key} must be positive, got {size}; using {default}", level="warning")
            return float(default)
        return size

    def _autofit_kwargs(self):
        return {
            "min_font_size": sp(self.cfg_float(["settings", "gui", "min_font_size"], 6)),
            "decay": self.cfg_decay(),
            "max_iterations": self.cfg_int(["settings", "autofit", "max_iterations"], 50),
            "side_padding": dp(self.cfg_float(["settings", "gui", "padding"], 16)),
        }

    def make_word_label(self, text="", **kwargs):
        return AutoFitLabel(
            text=text,
            bold=True,
            color=self.colors["primary"],
            max_font_size=sp(self.cfg_font_size("word_font_size", 34)),
            size_hint=(1, None),
            height=dp(60),
            **self._autofit_kwargs(),
            **kwargs,
        )

    def make_translation_label(self, text="", **kwargs):
        return AutoFitLabel(
            text=text,
            color=self.colors["secondary"],
            max_font_size=sp(self.cfg_font_size("translation_font_size", 24)),
            size_hint=(1, None),
            height=dp(48),
            **self._autofit_kwargs(),
            **kwargs,
        )

    def make_text_label(self, text, **kwargs):
        lbl = Label(
            text=text,
            color=self.colors["muted"],
            font_size=sp(16),
            **kwargs,
        )
        lbl.halign = kwargs.get("halign", "center")
        lbl.valign = "middle"
        lbl.bind(size=lambda inst, val: setattr(inst, "text_size", val))
        return lbl

    def make_hint_chevron(self, direction):
        description = labels.hint_reveal if direction == "up" else labels.hint_hide
        return Chevron(
            direction=direction,
            color=self.colors["text"],
            description=description,
            size_hint=(None, None),
            size=(dp(24), dp(24)),
        )

    def make_time_text(self, **kwargs):
        return TimeText(
            color=self.colors["text"],
            font_size=sp(14),
            size_hint=(None, None),
            size=(dp(80), dp(24)),
            **kwargs,
        )
