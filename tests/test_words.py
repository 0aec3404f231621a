"""
Tests for the word list: parsing, loading with fallback and random picks.
"""

import io

import pytest

from wortkarte.core.words import (
    FALLBACK_ENTRY,
    WordEntry,
    WordStore,
    load_words,
    parse_words,
    random_index,
    random_index_excluding,
)


class TestParseWords:

    def test_skips_malformed_lines_and_keeps_order(self):
        words = parse_words("Hund,Dog\nbad\nKatze,Cat")
        assert words == [("Hund", "Dog"), ("Katze", "Cat")]

    def test_entries_are_word_entries(self):
        words = parse_words("Hund,Dog")
        assert isinstance(words[0], WordEntry)
        assert words[0].term == "Hund"
        assert words[0].translation == "Dog"

    def test_too_many_fields_are_skipped(self):
        assert parse_words("a,b,c\nHaus,house") == [("Haus", "house")]

    def test_empty_lines_are_skipped(self):
        assert parse_words("\n\nHaus,house\n\n") == [("Haus", "house")]

    def test_windows_line_endings(self):
        lines = ["Hund,Dog\r\n", "Katze,Cat\r\n"]
        assert parse_words(lines) == [("Hund", "Dog"), ("Katze", "Cat")]

    def test_no_quote_handling(self):
        # quotes are raw characters, so a quoted comma splits into 3 fields
        assert parse_words('"a,b",c\nx,y') == [("x", "y")]

    def test_custom_delimiter(self):
        assert parse_words("Hund;Dog\nKatze,Cat", delimiter=";") == [("Hund", "Dog")]

    def test_fields_are_not_stripped(self):
        assert parse_words(" Hund , Dog ") == [(" Hund ", " Dog ")]


class TestLoadWords:

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text("der Hund,the dog\nkaputt\ndie Katze,the cat\n", encoding="utf-8")
        assert load_words(path) == [("der Hund", "the dog"), ("die Katze", "the cat")]

    def test_load_from_open_file(self):
        assert load_words(io.StringIO("Tür,door\n")) == [("Tür", "door")]

    def test_missing_file_gives_fallback(self, tmp_path):
        words = load_words(tmp_path / "missing.csv")
        assert words == [FALLBACK_ENTRY]
        assert len(words) > 0

    def test_directory_gives_fallback(self, tmp_path):
        assert load_words(tmp_path) == [FALLBACK_ENTRY]

    def test_undecodable_file_gives_fallback(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes("Tür,door\n".encode("latin-1"))
        assert load_words(path) == [FALLBACK_ENTRY]

    def test_readable_but_empty_file_gives_empty_list(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("nothing here\n", encoding="utf-8")
        assert load_words(path) == []

    def test_bundled_word_list_loads(self):
        from wortkarte.core.paths import words_path

        words = load_words(words_path("words_a1_2.csv"))
        assert len(words) > 50
        assert FALLBACK_ENTRY not in words


class TestRandomIndex:

    def test_in_range(self, rng):
        for n in (1, 2, 7):
            for _ in range(50):
                assert 0 <= random_index(n, rng) < n

    def test_zero_entries_rejected(self, rng):
        with pytest.raises(ValueError):
            random_index(0, rng)

    def test_excluding_never_returns_excluded(self, rng):
        for n in range(2, 8):
            for exclude in range(n):
                for _ in range(30):
                    idx = random_index_excluding(n, exclude, rng)
                    assert 0 <= idx < n
                    assert idx != exclude

    def test_excluding_covers_all_other_indices(self, rng):
        seen = {random_index_excluding(4, 1, rng) for _ in range(300)}
        assert seen == {0, 2, 3}

    def test_single_entry_returns_only_index(self, rng):
        assert random_index_excluding(1, 0, rng) == 0

    def test_out_of_range_exclude_is_ignored(self, rng):
        for _ in range(30):
            assert 0 <= random_index_excluding(3, 7, rng) < 3

    def test_module_random_without_rng(self):
        assert random_index_excluding(2, 0) == 1
        assert random_index_excluding(2, 1) == 0


class TestWordStore:

    def test_snapshot_is_immutable(self):
        source = [("Hund", "Dog")]
        store = WordStore(source)
        source.append(("Katze", "Cat"))
        assert len(store) == 1
        assert isinstance(store.entries, tuple)

    def test_indexing_and_iteration(self, store):
        assert store[1] == ("die Katze", "the cat")
        assert list(store)[0].term == "der Hund"

    def test_random_index_excluding(self, store):
        for _ in range(30):
            assert store.random_index_excluding(2) != 2

    def test_from_file_missing(self, tmp_path):
        store = WordStore.from_file(tmp_path / "nope.csv")
        assert list(store) == [FALLBACK_ENTRY]
