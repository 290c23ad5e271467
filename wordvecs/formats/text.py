"""Text parser for ``word float float ...`` embedding files.

Each data line is a word followed by its vector components, whitespace
separated. An optional ``"<vocab_size> <dim>"`` header line, blank lines and
lines that don't look like ``word float ...`` are skipped.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from ..exceptions import EmptyVocabularyError
from ..types import DTYPE
from ..utils.logging import get_logger
from .sniffer import is_float, parse_float

logger = get_logger(__name__)


def _parse_row(tokens: List[str]) -> Optional[List[float]]:
    # a data row is a non-numeric word followed by at least one float
    if len(tokens) < 2 or is_float(tokens[0]):
        return None
    values = [parse_float(t) for t in tokens[1:]]
    if any(v is None for v in values):
        return None
    return values


def parse_text_lines(lines: Iterable[Union[bytes, str]]) -> Tuple[List[str], List[np.ndarray]]:
    """Parse embedding rows from an iterable of lines.

    Rows are returned as they appear; rows whose length differs from the
    first row are kept and rejected later by EmbeddingStore.build.

    Args:
        lines: Lines as bytes (decoded as UTF-8) or str

    Returns:
        Tuple of (vocabulary, rows) in file order

    Raises:
        EmptyVocabularyError: If no line is a data row
    """
    vocabulary: List[str] = []
    rows: List[np.ndarray] = []
    skipped = 0

    for lineno, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug(f"Skipping undecodable line {lineno}")
                skipped += 1
                continue

        tokens = line.split()
        if not tokens:
            continue

        values = _parse_row(tokens)
        if values is None:
            logger.debug(f"Skipping line {lineno}: {line[:40]!r}")
            skipped += 1
            continue

        vocabulary.append(tokens[0])
        rows.append(np.array(values, dtype=DTYPE))

    if not vocabulary:
        raise EmptyVocabularyError("No embedding rows found")

    if skipped:
        logger.debug(f"Skipped {skipped} non-data lines")

    return vocabulary, rows


def parse_text(path: Union[str, Path]) -> Tuple[List[str], List[np.ndarray]]:
    """Parse a text-format embedding file.

    Args:
        path: Path to the text file

    Returns:
        Tuple of (vocabulary, rows) in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        EmptyVocabularyError: If no line is a data row
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "rb") as f:
        vocabulary, rows = parse_text_lines(f)

    logger.info(f"Parsed {len(vocabulary)} text rows from {path.name}")
    return vocabulary, rows
