"""Load pretrained word embeddings from disk.

Example:
    from wordvecs import load_pretrained

    store = load_pretrained("vectors.txt")          # format detected
    store = load_pretrained("vectors.bin", fmt="binary")
    print(store.get_embedding("king"))
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .config import LoaderConfig
from .exceptions import ConfigurationError
from .formats.binary import parse_binary_file
from .formats.sniffer import classify
from .formats.text import parse_text
from .store import EmbeddingStore, MatrixLike
from .types import EmbeddingFormat
from .utils.logging import get_logger

logger = get_logger(__name__)


AUTO = "auto"


def resolve_format(
    path: Union[str, Path],
    fmt: Union[str, EmbeddingFormat] = AUTO,
    config: Optional[LoaderConfig] = None,
) -> EmbeddingFormat:
    """Turn a format argument into a concrete format, sniffing if needed.

    Raises:
        ConfigurationError: If ``fmt`` is not "auto", "text" or "binary"
    """
    if isinstance(fmt, str) and fmt.strip().lower() == AUTO:
        return classify(path, config=config)
    try:
        return EmbeddingFormat.parse(fmt)
    except ValueError:
        raise ConfigurationError(f"fmt must be 'auto', 'text' or 'binary', got {fmt!r}")


def parse_file(
    path: Union[str, Path],
    fmt: Union[str, EmbeddingFormat] = AUTO,
    config: Optional[LoaderConfig] = None,
) -> Tuple[List[str], MatrixLike]:
    """Parse an embedding file into (vocabulary, matrix) without validating.

    Args:
        path: Path to the embedding file
        fmt: "auto", "text" or "binary"
        config: Loader configuration (defaults to LoaderConfig())

    Returns:
        Tuple of (vocabulary, matrix); the text parser returns a list of rows

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If ``fmt`` is invalid
        FormatError: If the file cannot be parsed
    """
    config = config or LoaderConfig()
    resolved = resolve_format(path, fmt, config)

    if resolved is EmbeddingFormat.TEXT:
        return parse_text(path)
    return parse_binary_file(path, config=config)


def load_pretrained(
    path: Union[str, Path],
    fmt: Union[str, EmbeddingFormat] = AUTO,
    config: Optional[LoaderConfig] = None,
) -> EmbeddingStore:
    """Load an embedding file into an EmbeddingStore.

    Args:
        path: Path to the embedding file
        fmt: "auto" to detect, or "text" / "binary"
        config: Loader configuration (defaults to LoaderConfig())

    Returns:
        Validated, read-only EmbeddingStore

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If ``fmt`` is invalid
        FormatError: If the file cannot be parsed
        ValidationError: If the parsed data violates store invariants
    """
    path = Path(path)
    config = config or LoaderConfig()
    resolved = resolve_format(path, fmt, config)
    logger.info(f"Loading {resolved.value} embeddings from {path}")

    vocabulary, matrix = parse_file(path, resolved, config)
    store = EmbeddingStore.build(vocabulary, matrix)

    logger.info(f"Loaded {store.vocabulary_size} words, dimension {store.dimension}")
    return store


def load_embeddings(
    path: Union[str, Path],
    fmt: Union[str, EmbeddingFormat] = AUTO,
    config: Optional[LoaderConfig] = None,
) -> Dict[str, np.ndarray]:
    """Load an embedding file as a word -> vector dictionary.

    No store invariants are checked. When a word occurs more than once the
    last occurrence wins.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If ``fmt`` is invalid
        FormatError: If the file cannot be parsed
    """
    vocabulary, matrix = parse_file(path, fmt, config)
    return {word: np.asarray(row) for word, row in zip(vocabulary, matrix)}
