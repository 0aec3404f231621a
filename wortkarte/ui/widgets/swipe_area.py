from kivy.uix.floatlayout import FloatLayout

from wortkarte.core import gestures
from wortkarte.core.gestures import GestureClassifier


class SwipeArea(FloatLayout):
    """
    Full-screen layout that turns drags into intents.

    Every touch move is classified on its own (incremental delta), and each
    intent other than NONE is dispatched as on_intent(intent).
    """

    __events__ = ("on_intent",)

    def __init__(self, classifier=None, **kwargs):
        self.classifier = classifier or GestureClassifier()
        super().__init__(**kwargs)

    def on_touch_down(self, touch):
        if self.collide_point(*touch.pos):
            touch.grab(self)
            return True
        return super().on_touch_down(touch)

    def on_touch_move(self, touch):
        if touch.grab_current is not self:
            return False
        # Kivy's y axis points up, the classifier expects screen orientation
        intent = self.classifier.classify(touch.dx, -touch.dy)
        if intent != gestures.NONE:
            self.dispatch("on_intent", intent)
        return True

    def on_touch_up(self, touch):
        if touch.grab_current is self:
            touch.ungrab(self)
            return True
        return super().on_touch_up(touch)

    def on_intent(self, intent):
        pass
