from kivy.app import App
from kivy.config import Config
from kivy.core.window import Window
from kivy.uix.floatlayout import FloatLayout
from kivy.utils import platform

import labels
import save

from wortkarte.core.dict_path import get_in
from wortkarte.core.logging_utils import log
from wortkarte.core.words import WordStore
from wortkarte.theme.theme_manager import apply_theme_from_config

from wortkarte.ui.factories import UIFactoryMixin

from wortkarte.mixins.flashcard import FlashcardMixin


class WortkarteApp(App, UIFactoryMixin, FlashcardMixin):
    """
    German flashcards for the watch.
    The word list is loaded once here; the screen itself lives in FlashcardMixin.
    """

    title = labels.app_title

    def build(self):
        # Disable multitouch only on desktop (right click would leave red dots)
        if platform in ("win", "linux", "macosx"):
            Config.set("input", "mouse", "mouse,disable_multitouch")

        self.config_data = save.load_settings()
        self.colors = apply_theme_from_config(self.config_data)

        if platform in ("win", "linux", "macosx"):
            size = get_in(self.config_data, ["settings", "gui", "window_size"], [454, 454])
            try:
                Window.size = (int(size[0]), int(size[1]))
            except (TypeError, ValueError, IndexError) as e:
                log(f"Could not set window size {size!r}: {e}", level="warning")

        self.word_store = self.load_word_store()

        self.window = FloatLayout()
        self.show_flashcards()
        return self.window

    def load_word_store(self) -> WordStore:
        path, delimiter = save.word_list_settings(self.config_data)
        return WordStore.from_file(path, delimiter)

    def on_stop(self):
        time_text = getattr(self, "time_text", None)
        if time_text is not None:
            time_text.stop()
