from kivy.clock import Clock
from kivy.metrics import sp
from kivy.properties import NumericProperty
from kivy.uix.label import Label

from wortkarte.core.autofit import (
    DEFAULT_DECAY,
    DEFAULT_MAX_ITERATIONS,
    fit_font_size,
)


class AutoFitLabel(Label):
    """
    Single-line label that shrinks its font until the text fits its width.

    Starts at max_font_size and multiplies by `decay` per measurement.
    Stays transparent while fitting so oversized text never flashes.
    """

    max_font_size = NumericProperty(sp(34))
    min_font_size = NumericProperty(sp(6))
    decay = NumericProperty(DEFAULT_DECAY)
    max_iterations = NumericProperty(DEFAULT_MAX_ITERATIONS)
    # horizontal space kept free on each side
    side_padding = NumericProperty(0)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.opacity = 0
        self.halign = "center"
        self.valign = "middle"
        self._refit_trigger = Clock.create_trigger(self._refit, 0)
        self.bind(
            text=self._on_fit_input,
            width=self._on_fit_input,
            max_font_size=self._on_fit_input,
            side_padding=self._on_fit_input,
        )
        self._refit_trigger()

    def available_width(self) -> float:
        return max(0.0, self.width - 2 * self.side_padding)

    def _on_fit_input(self, *_args):
        self.opacity = 0
        self._refit_trigger()

    def _measure(self, text, size):
        self.font_size = size
        self.texture_update()
        return self.texture_size[0]

    def _refit(self, *_args):
        self.font_size = fit_font_size(
            self.text,
            self.max_font_size,
            self.available_width(),
            self._measure,
            decay=self.decay,
            min_size=self.min_font_size,
            max_iterations=int(self.max_iterations),
        )
        self.opacity = 1
