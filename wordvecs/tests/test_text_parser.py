"""Tests for the text embedding parser."""

import numpy as np
import pytest

from wordvecs.exceptions import EmptyVocabularyError
from wordvecs.formats.text import parse_text, parse_text_lines
from wordvecs.types import DTYPE


def write(tmp_path, content, name="vectors.txt"):
    f = tmp_path / name
    f.write_text(content, encoding="utf-8")
    return f


class TestParseText:
    """Parsing well-formed files."""

    def test_simple_valid_file(self, tmp_path):
        """Test the basic two-word file."""
        vocabulary, rows = parse_text(write(tmp_path, "king 0.1 0.2 0.3\nqueen 1 2 3\n"))

        assert vocabulary == ["king", "queen"]
        np.testing.assert_allclose(rows[0], [0.1, 0.2, 0.3], rtol=1e-6)
        np.testing.assert_allclose(rows[1], [1.0, 2.0, 3.0])

    def test_header_line_is_skipped(self, tmp_path):
        """Test the "V D" header is not counted as a word."""
        vocabulary, rows = parse_text(write(tmp_path, "3 5\nking 0.1 0.2 0.3 0.4 0.5\n"))

        assert vocabulary == ["king"]
        assert len(rows) == 1
        assert rows[0].shape == (5,)

    def test_empty_and_whitespace_lines(self, tmp_path):
        """Test blank lines and runs of spaces are tolerated."""
        vocabulary, rows = parse_text(write(tmp_path, "\n   \nqueen   1 2 3\n\n"))

        assert vocabulary == ["queen"]
        np.testing.assert_allclose(rows[0], [1.0, 2.0, 3.0])

    def test_scientific_notation(self, tmp_path):
        vocabulary, rows = parse_text(write(tmp_path, "atom 1e-3 2e+1 -3e-2\n"))

        assert vocabulary == ["atom"]
        np.testing.assert_allclose(rows[0], [1e-3, 20.0, -0.03], rtol=1e-6)

    def test_word_containing_digits(self, tmp_path):
        vocabulary, rows = parse_text(write(tmp_path, "mp3player 0.1 0.2 0.3\n"))

        assert vocabulary == ["mp3player"]

    def test_rows_are_float32(self, tmp_path):
        _, rows = parse_text(write(tmp_path, "king 0.1 0.2 0.3\n"))
        assert rows[0].dtype == DTYPE

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_text(tmp_path / "missing.txt")


class TestSkippedLines:
    """Lines that are not data rows are skipped, never raised."""

    def test_malformed_lines_are_skipped(self, tmp_path):
        """Test non-numeric vectors and numeric words are dropped."""
        content = (
            "king 0.1 0.2 0.3\n"
            "badline x y z\n"
            "numeric 1 2 3   # should be skipped (vector has text)\n"
            "123 1 2 3\n"
            "queen 4 5 6\n"
        )
        vocabulary, rows = parse_text(write(tmp_path, content))

        assert vocabulary == ["king", "queen"]
        np.testing.assert_allclose(rows[1], [4.0, 5.0, 6.0])

    def test_single_token_line_is_skipped(self):
        vocabulary, _ = parse_text_lines(["lonely\n", "pair 1.5\n"])
        assert vocabulary == ["pair"]

    def test_undecodable_line_is_skipped(self):
        """Test a line that isn't UTF-8 is dropped."""
        vocabulary, _ = parse_text_lines([b"\xff\xfe 1 2\n", b"ok 1 2\n"])
        assert vocabulary == ["ok"]

    def test_ragged_rows_are_kept(self):
        """Test rows of a different length are left for the store to reject."""
        vocabulary, rows = parse_text_lines(["a 1 2 3\n", "b 1 2\n"])

        assert vocabulary == ["a", "b"]
        assert [len(r) for r in rows] == [3, 2]

    def test_underscore_token_is_a_word(self):
        """Test a word like ``1_000`` is kept and a vector like ``0_5`` is skipped."""
        vocabulary, rows = parse_text_lines(["1_000 0.1 0.2\n", "half 0_5 0.5\n"])

        assert vocabulary == ["1_000"]
        np.testing.assert_allclose(rows[0], [0.1, 0.2], rtol=1e-6)


class TestDuplicatesAndEmpty:
    """Duplicate words and empty input."""

    def test_duplicate_words_keep_every_row(self, tmp_path):
        """Test duplicates stay in file order."""
        vocabulary, rows = parse_text(write(tmp_path, "cat 1 1 1\ncat 2 2 2\n"))

        assert vocabulary == ["cat", "cat"]
        np.testing.assert_allclose(rows[0], [1.0, 1.0, 1.0])
        np.testing.assert_allclose(rows[1], [2.0, 2.0, 2.0])

    def test_empty_file(self, tmp_path):
        with pytest.raises(EmptyVocabularyError):
            parse_text(write(tmp_path, ""))

    def test_header_only(self, tmp_path):
        """Test a file with only a header has no rows."""
        with pytest.raises(EmptyVocabularyError):
            parse_text(write(tmp_path, "3 5\n"))

    def test_no_valid_rows(self):
        with pytest.raises(EmptyVocabularyError):
            parse_text_lines(["hello world\n", "123 abc\n"])
