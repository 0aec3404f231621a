from kivy.graphics import Color, Line
from kivy.metrics import dp
from kivy.properties import OptionProperty
from kivy.uix.widget import Widget


class Chevron(Widget):
    """Arrow hint (^ or v) drawn as a single polyline."""

    direction = OptionProperty("up", options=["up", "down"])

    def __init__(self, color=(1, 1, 1, 1), line_width=None, description="", **kwargs):
        self._color_value = color
        self._line_width = line_width or dp(2)
        # spoken by screen readers on the watch, not drawn
        self.description = description
        super().__init__(**kwargs)
        with self.canvas:
            self._color_instr = Color(*self._color_value)
            self._line = Line(points=[], width=self._line_width, joint="round", cap="round")
        self.bind(pos=self._update_line, size=self._update_line, direction=self._update_line)
        self._update_line()

    def _update_line(self, *_args):
        half_w = self.width * 0.4
        half_h = self.height * 0.2
        cx, cy = self.center
        tip = cy + half_h if self.direction == "up" else cy - half_h
        base = cy - half_h if self.direction == "up" else cy + half_h
        self._line.points = [cx - half_w, base, cx, tip, cx + half_w, base]
