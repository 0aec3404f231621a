from __future__ import annotations

from wortkarte.core import gestures
from wortkarte.core.words import WordEntry, WordStore


class EmptyWordListError(ValueError):
    """Raised when a card is requested for a word store without entries."""


class CardState:
    """
    The flashcard screen state: which word is shown and whether its
    translation is revealed.

    All changes go through apply(); advance/reveal/hide are shortcuts.
    """

    def __init__(self, store: WordStore, index: int | None = None, revealed: bool = False):
        if len(store) == 0:
            raise EmptyWordListError("word store is empty")
        self._store = store
        if index is None:
            index = store.random_index()
        if not 0 <= index < len(store):
            raise IndexError(f"index {index} out of range for {len(store)} words")
        self._index = index
        self._revealed = bool(revealed)

    @property
    def store(self) -> WordStore:
        return self._store

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def revealed(self) -> bool:
        return self._revealed

    @property
    def current_word(self) -> WordEntry:
        return self._store[self._index]

    def apply(self, intent: str) -> bool:
        """Run one transition. Returns True if index or reveal flag changed."""
        if intent not in gestures.INTENTS:
            raise ValueError(f"unknown intent: {intent!r}")

        before = (self._index, self._revealed)

        if intent == gestures.NEXT_WORD:
            self._index = self._store.random_index_excluding(self._index)
            self._revealed = False
        elif intent == gestures.REVEAL:
            self._revealed = True
        elif intent == gestures.HIDE:
            self._revealed = False

        return (self._index, self._revealed) != before

    def advance(self) -> bool:
        return self.apply(gestures.NEXT_WORD)

    def reveal(self) -> bool:
        return self.apply(gestures.REVEAL)

    def hide(self) -> bool:
        return self.apply(gestures.HIDE)

    def __repr__(self):
        return f"CardState(index={self._index}, revealed={self._revealed})"
