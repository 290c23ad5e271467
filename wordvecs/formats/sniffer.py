"""Format sniffer - classify an embedding file as text or binary.

Neither encoding carries a magic number, so the format is inferred from a
bounded prefix of the file:

1. a ``.bin`` suffix is binary without looking at the content
2. the first 8 bytes read as two little-endian int32 ``(vocab_size, dim)``
   with both positive and ``dim`` under a sanity bound is binary
3. up to ``sniff_max_lines`` lines are scanned; a ``"<int> <int>"`` header
   line is skipped, a ``word float float ...`` line is text
4. a line that is not valid UTF-8 is binary
5. otherwise the configured fallback format is returned

Example:
    from wordvecs.formats.sniffer import classify

    fmt = classify("vectors.txt")
"""

from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from ..config import DEFAULT_FALLBACK_FORMAT, LoaderConfig
from ..types import EmbeddingFormat
from ..utils.logging import get_logger

logger = get_logger(__name__)


# Suffixes classified as binary without inspecting content
BINARY_EXTENSIONS = [".bin"]


def parse_float(token: str) -> Optional[float]:
    """Parse a numeric token, or return None.

    Scientific notation is accepted; underscore digit groups (``1_000``) are
    not numbers.
    """
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def is_float(token: str) -> bool:
    """Check whether a token parses as a float (scientific notation included)."""
    return parse_float(token) is not None


def is_int(token: str) -> bool:
    """Check whether a token parses as an integer."""
    if "_" in token:
        return False
    try:
        int(token)
    except ValueError:
        return False
    return True


def is_header_tokens(tokens: List[str]) -> bool:
    """Check for an advisory ``"<vocab_size> <dim>"`` header line."""
    return len(tokens) == 2 and all(is_int(t) for t in tokens)


def is_data_tokens(tokens: List[str], sample: Optional[int] = None) -> bool:
    """Check for a ``word float float ...`` row.

    Args:
        tokens: Whitespace-split tokens of one line
        sample: Only check this many vector tokens (None checks all)

    Returns:
        True if the first token is not a number and the vector tokens are
    """
    if len(tokens) < 2 or is_float(tokens[0]):
        return False
    vector_tokens = tokens[1:] if sample is None else tokens[1:1 + sample]
    return all(is_float(t) for t in vector_tokens)


def probe_binary_header(head: bytes, dim_limit: int) -> bool:
    """Read the first 8 bytes as two int32 and check they look like sizes."""
    if len(head) < 8:
        return False
    vocab_size, dim = np.frombuffer(head[:8], dtype="<i4")
    return bool(vocab_size > 0 and 0 < dim < dim_limit)


def classify_prefix(
    head: bytes,
    truncated: bool = False,
    config: Optional[LoaderConfig] = None,
) -> EmbeddingFormat:
    """Classify a file from a prefix of its bytes.

    This is a pure function of the prefix, so it can be used on any byte
    source.

    Args:
        head: The first bytes of the file
        truncated: True if the file continues past ``head``; the trailing
            partial line is then ignored
        config: Sniffer limits (defaults to LoaderConfig())

    Returns:
        EmbeddingFormat.TEXT or EmbeddingFormat.BINARY
    """
    config = config or LoaderConfig()

    if probe_binary_header(head, config.header_dim_limit):
        logger.debug("Binary header probe matched")
        return EmbeddingFormat.BINARY

    lines = head.split(b"\n")
    if truncated:
        lines = lines[:-1]

    for raw_line in lines[:config.sniff_max_lines]:
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Undecodable line in prefix, classifying as binary")
            return EmbeddingFormat.BINARY

        tokens = line.split()
        if not tokens or is_header_tokens(tokens):
            continue
        if is_data_tokens(tokens, sample=config.sniff_float_sample):
            return EmbeddingFormat.TEXT

    logger.debug(f"No text row found, falling back to {config.fallback_format.value}")
    return config.fallback_format


def classify(path: Union[str, Path], config: Optional[LoaderConfig] = None) -> EmbeddingFormat:
    """Classify an embedding file as text or binary.

    Reads at most ``config.sniff_max_bytes`` bytes.

    Args:
        path: Path to the embedding file
        config: Sniffer limits (defaults to LoaderConfig())

    Returns:
        EmbeddingFormat.TEXT or EmbeddingFormat.BINARY

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
    """
    config = config or LoaderConfig()
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() in BINARY_EXTENSIONS:
        return EmbeddingFormat.BINARY

    with open(path, "rb") as f:
        head = f.read(config.sniff_max_bytes)
        truncated = bool(f.read(1))

    fmt = classify_prefix(head, truncated=truncated, config=config)
    logger.debug(f"Classified {path.name} as {fmt.value}")
    return fmt
