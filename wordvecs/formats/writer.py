"""Writers for the text and packed binary embedding formats.

Both writers emit every vocabulary entry in store order, duplicates included,
so a store written and read back has the same vocabulary and matrix.

Example:
    from wordvecs.formats.writer import write_binary

    write_binary(store, "vectors.bin")
"""

from pathlib import Path
from typing import Union

import numpy as np

from ..store import EmbeddingStore
from ..types import BINARY_FLOAT
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _check_word(word: str) -> None:
    if not word or any(ch.isspace() for ch in word):
        raise ValueError(f"Word cannot be written to an embedding file: {word!r}")


def write_text(store: EmbeddingStore, path: Union[str, Path], header: bool = True) -> str:
    """Write a store as a text embedding file.

    Args:
        store: Store to write
        path: Output path
        header: Write a leading ``"<vocab_size> <dim>"`` line

    Returns:
        Path to the written file

    Raises:
        ValueError: If a word is empty or contains whitespace
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        if header:
            f.write(f"{store.vocabulary_size} {store.dimension}\n")
        for word, row in zip(store.vocabulary, store.matrix):
            _check_word(word)
            # repr of the widened float32 value reads back to the same float32
            values = " ".join(repr(float(v)) for v in row)
            f.write(f"{word} {values}\n")

    logger.info(f"Wrote {store.vocabulary_size} text rows to {path.name}")
    return str(path)


def write_binary(store: EmbeddingStore, path: Union[str, Path]) -> str:
    """Write a store as a packed binary embedding file.

    Each record is the UTF-8 word, a space, ``dim`` little-endian float32
    values and a line feed.

    Args:
        store: Store to write
        path: Output path

    Returns:
        Path to the written file

    Raises:
        ValueError: If a word is empty or contains whitespace
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "wb") as f:
        f.write(f"{store.vocabulary_size} {store.dimension}\n".encode("ascii"))
        for word, row in zip(store.vocabulary, store.matrix):
            _check_word(word)
            f.write(word.encode("utf-8") + b" ")
            f.write(np.asarray(row, dtype=BINARY_FLOAT).tobytes())
            f.write(b"\n")

    logger.info(f"Wrote {store.vocabulary_size} binary records to {path.name}")
    return str(path)
