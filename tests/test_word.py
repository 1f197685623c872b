"""Tests for Word records and text scanning."""

import pytest

from bstreelib import BSTree
from bstreelib.wordtracker import Word, scan_file, tokenize_line


class TestWord:

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            Word("")

    def test_ordering_by_text_only(self):
        a = Word("apple", {"a.txt": [1]})
        b = Word("banana")
        assert a < b
        assert b > a
        assert Word("apple") == a
        assert hash(Word("apple")) == hash(a)
        # Case sensitive, upper case sorts first
        assert Word("Zebra") < Word("apple")

    def test_add_occurrence(self):
        word = Word("tree")
        assert word.add_occurrence("notes.txt", 3) is True
        assert word.add_occurrence("notes.txt", 1) is True
        assert word.add_occurrence("notes.txt", 3) is False
        assert word.add_occurrence("other.txt", 2) is True

        assert word.files() == ["notes.txt", "other.txt"]
        assert word.lines_in("notes.txt") == [1, 3]
        assert word.lines_in("missing.txt") == []
        assert word.entry_count() == 3

    @pytest.mark.parametrize("line", [0, -1, True, 1.5, "2"])
    def test_invalid_line_numbers(self, line):
        with pytest.raises(ValueError):
            Word("tree").add_occurrence("notes.txt", line)

    def test_merge(self):
        word = Word("tree", {"a.txt": [1, 2]})
        word.merge(Word("tree", {"a.txt": [2, 5], "b.txt": [7]}))
        assert word.lines_in("a.txt") == [1, 2, 5]
        assert word.files() == ["a.txt", "b.txt"]

        with pytest.raises(ValueError):
            word.merge(Word("bush"))

    def test_dict_form(self):
        word = Word("tree", {"b.txt": [9, 4], "a.txt": [1]})
        data = word.to_dict()
        assert data == {"word": "tree", "occurrences": {"b.txt": [4, 9], "a.txt": [1]}}

        restored = Word.from_dict(data)
        assert restored == word
        assert restored.files() == ["b.txt", "a.txt"]
        assert Word.from_dict({"word": "bare"}).entry_count() == 0

    def test_str_and_repr(self):
        word = Word("tree", {"a.txt": [1]})
        assert str(word) == "tree"
        assert repr(word) == "Word('tree', entries=1)"

    def test_words_in_a_tree(self):
        tree = BSTree.from_iterable([Word("m"), Word("c"), Word("x")])
        assert [str(word) for word in tree] == ["c", "m", "x"]
        assert tree.search(Word("x")) is not None


class TestTokenize:

    @pytest.mark.parametrize("line,expected", [
        ("The quick, brown fox.", ["The", "quick", "brown", "fox"]),
        ("  spaced\tout  words \n", ["spaced", "out", "words"]),
        ("don't e-mail (me)", ["don't", "e-mail", "me"]),
        ("--- ... !!!", []),
        ("", []),
        ("\"quoted\" 42", ["quoted", "42"]),
    ])
    def test_tokenize(self, line, expected):
        assert tokenize_line(line) == expected

    def test_ignore_case(self):
        assert tokenize_line("Tree TREE tree", ignore_case=True) == ["tree"] * 3


class TestScanFile:

    def test_line_numbers_start_at_one(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("alpha beta\n\ngamma, alpha\n", encoding="utf-8")

        assert list(scan_file(source)) == [
            (1, "alpha"), (1, "beta"), (3, "gamma"), (3, "alpha"),
        ]

    def test_accepts_string_path(self, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("One", encoding="utf-8")
        assert list(scan_file(str(source), ignore_case=True)) == [(1, "one")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(scan_file(tmp_path / "absent.txt"))

    def test_encoding_mismatch(self, tmp_path):
        source = tmp_path / "latin.txt"
        source.write_bytes("café\n".encode("latin-1"))

        with pytest.raises(UnicodeDecodeError):
            list(scan_file(source, encoding="utf-8"))
        assert list(scan_file(source, encoding="latin-1")) == [(1, "caf")]
