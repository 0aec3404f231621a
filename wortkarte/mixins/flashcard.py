from kivy.animation import Animation
from kivy.metrics import dp
from kivy.uix.anchorlayout import AnchorLayout
from kivy.uix.floatlayout import FloatLayout

import labels
from wortkarte.core.card_state import CardState
from wortkarte.core.gestures import GestureClassifier
from wortkarte.core.logging_utils import log
from wortkarte.ui.widgets.card_layout import CardLayout
from wortkarte.ui.widgets.swipe_area import SwipeArea


class FlashcardMixin:
    """
    The flashcard screen:
      - horizontal swipe: next random word
      - swipe up: reveal translation, swipe down: hide it
    Uses self.word_store, self.window and the UIFactoryMixin helpers.
    """

    # ------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------

    def show_flashcards(self):
        log(f"opened flashcards ({len(self.word_store)} words)")
        self.window.clear_widgets()

        if len(self.word_store) == 0:
            self._show_loading_screen()
            return
        if len(self.word_store) == 1:
            log("only one word available, next-word swipes keep it", level="warning")

        self.card_state = CardState(self.word_store)

        classifier = GestureClassifier(
            threshold=dp(self.cfg_float(["settings", "gestures", "threshold"], 20)),
            policy=self.cfg_swipe_policy(),
        )
        self.swipe_area = SwipeArea(classifier=classifier)
        self.swipe_area.bind(on_intent=self.on_card_intent)

        # word + translation
        self.word_label = self.make_word_label()
        self.translation_label = self.make_translation_label()
        self.card_layout = CardLayout(
            self.word_label,
            self.translation_label,
            gap=dp(self.cfg_float(["settings", "gui", "reveal_offset"], 100)),
        )
        self.swipe_area.add_widget(self.card_layout)

        # clock on top
        top = AnchorLayout(anchor_x="center", anchor_y="top", padding=dp(8))
        self.time_text = self.make_time_text()
        top.add_widget(self.time_text)
        self.swipe_area.add_widget(top)

        # hint chevrons, both stacked at the bottom; only one is visible
        bottom = AnchorLayout(anchor_x="center", anchor_y="bottom", padding=dp(8))
        hints = FloatLayout(size_hint=(None, None), size=(dp(24), dp(24)))
        self.hint_up = self.make_hint_chevron("up")
        self.hint_down = self.make_hint_chevron("down")
        for hint in (self.hint_up, self.hint_down):
            hint.pos_hint = {"x": 0, "y": 0}
            hints.add_widget(hint)
        bottom.add_widget(hints)
        self.swipe_area.add_widget(bottom)

        self.window.add_widget(self.swipe_area)
        self.refresh_card(animate=False)

    def _show_loading_screen(self):
        self.window.add_widget(self.make_text_label(labels.loading_text))

    # ------------------------------------------------------------
    # Gesture handling
    # ------------------------------------------------------------

    def on_card_intent(self, _area, intent):
        if self.card_state.apply(intent):
            log(f"{intent} -> {self.card_state!r}", level="debug")
            self.refresh_card()

    # ------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------

    def refresh_card(self, animate=True):
        word = self.card_state.current_word
        revealed = self.card_state.revealed

        self.word_label.text = word.term
        self.translation_label.text = word.translation
        self.card_layout.show_translation(revealed)

        lift = self.card_layout.gap if revealed else 0
        duration = self.cfg_float(["settings", "gui", "animation_duration"], 0.3)

        Animation.cancel_all(self.card_layout, "lift")
        Animation.cancel_all(self.hint_up, "opacity")
        Animation.cancel_all(self.hint_down, "opacity")

        if animate and duration > 0:
            Animation(lift=lift, duration=duration, t="out_quad").start(self.card_layout)
            Animation(opacity=0 if revealed else 1, duration=duration / 2).start(self.hint_up)
            Animation(opacity=1 if revealed else 0, duration=duration / 2).start(self.hint_down)
        else:
            self.card_layout.lift = lift
            self.hint_up.opacity = 0 if revealed else 1
            self.hint_down.opacity = 1 if revealed else 0
