from kivy.metrics import dp
from kivy.properties import NumericProperty
from kivy.uix.floatlayout import FloatLayout


class CardLayout(FloatLayout):
    """
    Holds the word and its translation.

    `lift` moves the word up (animated on reveal); the translation sits
    `gap` below the word and is only attached while shown.
    """

    lift = NumericProperty(0)
    gap = NumericProperty(dp(100))

    def __init__(self, word_label, translation_label, **kwargs):
        super().__init__(**kwargs)
        self.word_label = word_label
        self.translation_label = translation_label
        self.add_widget(word_label)
        self.bind(pos=self._reposition, size=self._reposition, lift=self._reposition, gap=self._reposition)

    @property
    def translation_shown(self) -> bool:
        return self.translation_label.parent is self

    def show_translation(self, shown: bool):
        if shown and not self.translation_shown:
            self.add_widget(self.translation_label)
        elif not shown and self.translation_shown:
            self.remove_widget(self.translation_label)
        self._reposition()

    def _reposition(self, *_args):
        word = self.word_label
        word.x = self.x
        word.center_y = self.center_y + self.lift

        trans = self.translation_label
        trans.x = self.x
        trans.center_y = word.center_y - self.gap
