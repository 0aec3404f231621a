from __future__ import annotations

import os
import random
from typing import Iterable, NamedTuple

from wortkarte.core.logging_utils import log


DEFAULT_DELIMITER = ","


class WordEntry(NamedTuple):
    term: str
    translation: str


# Shown when the word file cannot be read at all
FALLBACK_ENTRY = WordEntry("Fehler", "Error")


def parse_words(source: str | Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> list[WordEntry]:
    """
    Parse 'term<delimiter>translation' lines.

    - source may be the whole text or any iterable of lines (e.g. an open file)
    - no quoting / escaping, fields are kept as they are
    - lines with more or fewer than two fields are skipped
    """
    lines = source.splitlines() if isinstance(source, str) else source

    words = []
    for line in lines:
        tokens = line.rstrip("\r\n").split(delimiter)
        if len(tokens) == 2:
            words.append(WordEntry(tokens[0], tokens[1]))
    return words


def load_words(source, delimiter: str = DEFAULT_DELIMITER) -> list[WordEntry]:
    """
    Read a word list from a path or an open text file.
    Never raises for unreadable files: returns [FALLBACK_ENTRY] instead.
    """
    try:
        if hasattr(source, "read"):
            words = parse_words(source, delimiter)
        else:
            with open(source, "r", encoding="utf-8") as f:
                words = parse_words(f, delimiter)
    except (OSError, UnicodeDecodeError) as e:
        log(f"could not read word list {source!r}: {e}", level="error")
        return [FALLBACK_ENTRY]

    name = getattr(source, "name", None) if hasattr(source, "read") else source
    log(f"loaded {len(words)} words from {os.path.basename(str(name or 'stream'))}")
    return words


def random_index(n: int, rng=None) -> int:
    if n < 1:
        raise ValueError(f"cannot pick an index from {n} entries")
    return (rng or random).randrange(n)


def random_index_excluding(n: int, exclude: int, rng=None) -> int:
    """
    Uniform pick in [0, n) that differs from `exclude`.
    With a single entry there is nothing else to pick, so 0 is returned.
    """
    if n == 1:
        return 0
    if not 0 <= exclude < n:
        return random_index(n, rng)

    # draw from n-1 slots and step over the excluded one
    idx = (rng or random).randrange(n - 1)
    if idx >= exclude:
        idx += 1
    return idx


class WordStore:
    """Read-only snapshot of the loaded word list."""

    def __init__(self, entries: Iterable, rng=None):
        self._entries = tuple(WordEntry(*entry) for entry in entries)
        self._rng = rng

    @classmethod
    def from_file(cls, path, delimiter: str = DEFAULT_DELIMITER, rng=None) -> "WordStore":
        return cls(load_words(path, delimiter), rng=rng)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> WordEntry:
        return self._entries[index]

    def __iter__(self):
        return iter(self._entries)

    @property
    def entries(self) -> tuple:
        return self._entries

    def random_index(self) -> int:
        return random_index(len(self._entries), self._rng)

    def random_index_excluding(self, exclude: int) -> int:
        return random_index_excluding(len(self._entries), exclude, self._rng)
