import os
import sys

# Kivy must not parse pytest's argv or write log files during tests
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import random

import pytest

from wortkarte.core.words import WordStore


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def store(rng):
    return WordStore(
        [
            ("der Hund", "the dog"),
            ("die Katze", "the cat"),
            ("das Haus", "the house"),
            ("der Tisch", "the table"),
            ("das Buch", "the book"),
        ],
        rng=rng,
    )
