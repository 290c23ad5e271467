"""Tests for embedding format detection."""

import numpy as np
import pytest

from wordvecs.config import LoaderConfig
from wordvecs.formats.sniffer import (
    classify,
    classify_prefix,
    is_data_tokens,
    is_header_tokens,
    parse_float,
    probe_binary_header,
)
from wordvecs.types import EmbeddingFormat


class TestClassifyTextFiles:
    """Files the line scan recognises as text."""

    @pytest.mark.parametrize("content", [
        "king 0.1 0.2 0.3\nqueen 1 2 3\n",
        "3 5\nking 0.1 0.2 0.3 0.4 0.5\n",
        "\n\n\nqueen 1 2 3\n",
        "atom 1e-3 2e+1 -3e-2\n",
        "mp3player 0.1 0.2 0.3\n",
        "ümlaut 0.5 0.5\n",
    ])
    def test_text_content(self, tmp_path, content):
        """Test word + floats lines classify as text."""
        f = tmp_path / "vectors.txt"
        f.write_text(content, encoding="utf-8")
        assert classify(f) == EmbeddingFormat.TEXT

    def test_header_alone_does_not_decide(self):
        """Test a size header line is skipped rather than classifying the file."""
        config = LoaderConfig(fallback_format="text")
        assert classify_prefix(b"3 5\n", config=config) == EmbeddingFormat.TEXT
        assert classify_prefix(b"3 5\n") == EmbeddingFormat.BINARY


class TestClassifyBinaryFiles:
    """Files classified as binary."""

    def test_bin_extension_skips_content(self, tmp_path):
        """Test a .bin path is binary regardless of its bytes."""
        f = tmp_path / "bin.bin"
        f.write_bytes(bytes([0xFF, 0xD8, 0x00, 0xFF]))
        assert classify(f) == EmbeddingFormat.BINARY

        text_named_bin = tmp_path / "looks_like_text.BIN"
        text_named_bin.write_text("king 0.1 0.2 0.3\n")
        assert classify(text_named_bin) == EmbeddingFormat.BINARY

    def test_invalid_text_falls_back_to_binary(self, tmp_path):
        """Test a file with no word + floats line uses the binary fallback."""
        f = tmp_path / "invalid.txt"
        f.write_text("this is not a word2vec file\nhello world\n123 abc\n")
        assert classify(f) == EmbeddingFormat.BINARY

    def test_fallback_is_configurable(self, tmp_path):
        """Test the inconclusive default comes from the config."""
        f = tmp_path / "invalid.txt"
        f.write_text("hello world\n")
        config = LoaderConfig(fallback_format=EmbeddingFormat.TEXT)
        assert classify(f, config=config) == EmbeddingFormat.TEXT

    def test_int32_header_probe(self, tmp_path):
        """Test two small int32 values at the start classify as binary."""
        f = tmp_path / "vectors.dat"
        f.write_bytes(np.array([3, 50], dtype="<i4").tobytes() + b"king 0.1 0.2\n")
        assert classify(f) == EmbeddingFormat.BINARY

    def test_undecodable_line_is_binary(self, tmp_path):
        """Test a word2vec binary file without .bin suffix is detected."""
        f = tmp_path / "vectors.w2v"
        record = b"word " + np.array([1.0, -1.0], dtype="<f4").tobytes() + b"\n"
        f.write_bytes(b"1 2\n" + record)
        assert classify(f) == EmbeddingFormat.BINARY

    def test_missing_file(self, tmp_path):
        """Test a missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            classify(tmp_path / "missing.txt")


class TestBoundedScan:
    """The sniffer only looks at a bounded prefix."""

    def test_line_budget(self):
        """Test a text row beyond sniff_max_lines is not seen."""
        head = b"hello world\n" * 15 + b"king 0.1 0.2 0.3\n"
        assert classify_prefix(head, config=LoaderConfig(sniff_max_lines=10)) == EmbeddingFormat.BINARY
        assert classify_prefix(head, config=LoaderConfig(sniff_max_lines=20)) == EmbeddingFormat.TEXT

    def test_byte_budget(self, tmp_path):
        """Test content past sniff_max_bytes is not read."""
        f = tmp_path / "late.txt"
        f.write_text("x" * 100 + "\nking 0.1 0.2 0.3\n")
        assert classify(f, config=LoaderConfig(sniff_max_bytes=50)) == EmbeddingFormat.BINARY
        assert classify(f) == EmbeddingFormat.TEXT

    def test_truncated_partial_line_is_ignored(self):
        """Test a multi-byte character cut by the budget is not a decode failure."""
        config = LoaderConfig(fallback_format="text")
        head = b"hello world\n\xc3"
        assert classify_prefix(head, truncated=True, config=config) == EmbeddingFormat.TEXT
        assert classify_prefix(head, truncated=False, config=config) == EmbeddingFormat.BINARY


class TestHeuristics:
    """Token-level helpers."""

    def test_probe_binary_header(self):
        assert probe_binary_header(np.array([3, 999], dtype="<i4").tobytes(), 1000)
        assert not probe_binary_header(np.array([3, 1000], dtype="<i4").tobytes(), 1000)
        assert not probe_binary_header(np.array([-1, 5], dtype="<i4").tobytes(), 1000)
        assert not probe_binary_header(np.array([3, 0], dtype="<i4").tobytes(), 1000)
        assert not probe_binary_header(b"1234", 1000)

    def test_header_tokens(self):
        assert is_header_tokens(["3", "5"])
        assert not is_header_tokens(["3", "5.0"])
        assert not is_header_tokens(["3", "5", "7"])
        assert not is_header_tokens(["1_000", "5"])

    def test_data_tokens(self):
        assert is_data_tokens(["mp3player", "0.1", "0.2"])
        assert is_data_tokens(["atom", "1e-3", "-3e-2"])
        assert not is_data_tokens(["123", "1", "2", "3"])
        assert not is_data_tokens(["badline", "x", "y"])
        assert not is_data_tokens(["lonely"])

    def test_data_tokens_sample(self):
        """Test only the sampled vector tokens are checked."""
        tokens = ["word", "0.1", "0.2", "oops"]
        assert is_data_tokens(tokens, sample=2)
        assert not is_data_tokens(tokens)

    def test_underscore_groups_are_not_numbers(self):
        """Test ``1_000`` is a word, not a number."""
        assert parse_float("1_000") is None
        assert parse_float("1e-3") == pytest.approx(1e-3)
        assert is_data_tokens(["1_000", "0.1", "0.2"])
        assert not is_data_tokens(["word", "0_1", "0.2"])
