import time

from kivy.clock import Clock
from kivy.uix.label import Label

import labels


class TimeText(Label):
    """Current time at the top of the watch face."""

    def __init__(self, time_format=None, **kwargs):
        super().__init__(**kwargs)
        self.time_format = time_format or labels.time_format
        self._tick()
        self._event = Clock.schedule_interval(self._tick, 1.0)

    def _tick(self, *_args):
        self.text = time.strftime(self.time_format)

    def stop(self):
        if self._event is not None:
            self._event.cancel()
            self._event = None
