"""Binary parser for packed word2vec-style embedding files.

Layout:
    "<vocab_size> <dim>\\n"                      ASCII header line
    <word bytes> 0x20 <dim x float32> [0x0A]    repeated vocab_size times

Words are raw bytes up to the first space (UTF-8 in practice, so multi-byte
characters are allowed). Vectors are little-endian IEEE-754 float32 with no
separators. The line feed after a vector is optional. Bytes after the last
record are ignored.

Example:
    from wordvecs.formats.binary import parse_binary_file

    vocabulary, matrix = parse_binary_file("GoogleNews-vectors.bin")
"""

from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

import numpy as np

from ..config import LoaderConfig
from ..exceptions import InvalidHeaderError, MalformedRecordError, TruncatedFileError
from ..types import BINARY_FLOAT, DTYPE
from ..utils.logging import get_logger

logger = get_logger(__name__)


SPACE = b" "
NEWLINE = b"\n"


def parse_header(line: bytes) -> Tuple[int, int]:
    """Parse the ``"<vocab_size> <dim>"`` header line.

    Args:
        line: Raw header bytes (trailing newline allowed)

    Returns:
        Tuple of (vocab_size, dim)

    Raises:
        InvalidHeaderError: If the header isn't exactly two integers, or the
            sizes are out of range
    """
    try:
        tokens = line.decode("ascii").split()
    except UnicodeDecodeError:
        raise InvalidHeaderError(f"Header is not ASCII: {line[:40]!r}")

    if len(tokens) != 2:
        raise InvalidHeaderError(
            f"Header must have 2 tokens (vocab_size dim), got {len(tokens)}: {line[:40]!r}"
        )

    try:
        vocab_size, dim = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise InvalidHeaderError(f"Header tokens must be integers: {tokens}")

    if vocab_size < 0 or dim <= 0:
        raise InvalidHeaderError(f"Invalid header sizes: vocab_size={vocab_size}, dim={dim}")

    return vocab_size, dim


def _read_word(stream: BinaryIO, first: bytes, record: int, max_word_bytes: int) -> bytes:
    """Read bytes up to (not including) the next space."""
    buf = bytearray()
    c = first or stream.read(1)
    while True:
        if not c:
            raise TruncatedFileError(f"Unexpected end of file while reading word of record {record}")
        if c == SPACE:
            return bytes(buf)
        buf += c
        if len(buf) > max_word_bytes:
            raise MalformedRecordError(
                f"Word of record {record} exceeds {max_word_bytes} bytes without a space delimiter",
                record=record,
            )
        c = stream.read(1)


def parse_binary(
    stream: BinaryIO,
    config: Optional[LoaderConfig] = None,
) -> Tuple[List[str], np.ndarray]:
    """Parse a packed binary embedding stream.

    Args:
        stream: Binary stream positioned at the header
        config: Parser limits (defaults to LoaderConfig())

    Returns:
        Tuple of (vocabulary, matrix) where matrix has shape (vocab_size, dim)

    Raises:
        InvalidHeaderError: If the header line is malformed
        TruncatedFileError: If the stream ends before vocab_size records
        MalformedRecordError: If a word is empty, too long or undecodable
    """
    config = config or LoaderConfig()

    header = stream.readline(config.max_header_bytes)
    if header and not header.endswith(NEWLINE) and len(header) >= config.max_header_bytes:
        raise InvalidHeaderError(f"Header line exceeds {config.max_header_bytes} bytes")
    vocab_size, dim = parse_header(header)
    logger.debug(f"Binary header: vocab_size={vocab_size}, dim={dim}")

    vector_bytes = dim * BINARY_FLOAT.itemsize
    vocabulary: List[str] = []
    matrix = np.empty((vocab_size, dim), dtype=DTYPE)

    pending = b""
    for i in range(vocab_size):
        raw_word = _read_word(stream, pending, i, config.max_word_bytes)
        if not raw_word:
            raise MalformedRecordError(f"Empty word in record {i}", record=i)

        try:
            word = raw_word.decode("utf-8", errors=config.unicode_errors)
        except UnicodeDecodeError as e:
            raise MalformedRecordError(f"Word of record {i} is not valid UTF-8: {e}", record=i)

        data = stream.read(vector_bytes)
        if len(data) < vector_bytes:
            raise TruncatedFileError(
                f"Unexpected end of file in vector of record {i}: "
                f"got {len(data)} of {vector_bytes} bytes"
            )

        vocabulary.append(word)
        matrix[i] = np.frombuffer(data, dtype=BINARY_FLOAT)

        # optional line feed after each vector
        pending = stream.read(1)
        if pending == NEWLINE:
            pending = b""

    return vocabulary, matrix


def parse_binary_file(
    path: Union[str, Path],
    config: Optional[LoaderConfig] = None,
) -> Tuple[List[str], np.ndarray]:
    """Parse a packed binary embedding file.

    Args:
        path: Path to the binary file
        config: Parser limits (defaults to LoaderConfig())

    Returns:
        Tuple of (vocabulary, matrix)

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidHeaderError: If the header line is malformed
        TruncatedFileError: If the file ends before all records are read
        MalformedRecordError: If a word is empty, too long or undecodable
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "rb") as f:
        vocabulary, matrix = parse_binary(f, config=config)

    logger.info(f"Parsed {len(vocabulary)} binary records from {path.name}")
    return vocabulary, matrix
