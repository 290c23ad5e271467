"""Embedding Store - immutable vocabulary + matrix with derived lookups.

An EmbeddingStore pairs an ordered vocabulary with a dense ``(V, D)`` float32
matrix (one contiguous row per vocabulary entry), a word -> row index and a
cached Euclidean norm per row. Stores are only created through
``EmbeddingStore.build`` (or ``from_mapping``), which validates everything
before returning, so a store that exists is always consistent:

- the matrix has exactly one row per vocabulary entry
- every row has a strictly positive norm

Duplicate words keep one row per occurrence in the matrix; the index points
at the last occurrence.

Example:
    store = EmbeddingStore.build(["king", "queen"], [[0.1, 0.2], [0.3, 0.4]])
    vec = store.get_embedding("queen")      # read-only view into the matrix
    norm = store.get_embedding_norm("queen")
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .exceptions import EmptyVocabularyError, ShapeMismatchError, WordNotFoundError, ZeroNormVectorError
from .types import DTYPE
from .utils.logging import get_logger

logger = get_logger(__name__)


MatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]


def _as_matrix(vocabulary: Sequence[str], matrix: MatrixLike) -> np.ndarray:
    """Coerce ``matrix`` to a C-contiguous (V, D) float32 array.

    Raises:
        ShapeMismatchError: If the row count differs from len(vocabulary) or
            rows have different lengths
    """
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise ShapeMismatchError(f"Embedding matrix must be 2-D, got shape {matrix.shape}")
        if matrix.shape[0] != len(vocabulary):
            raise ShapeMismatchError(
                f"Embedding matrix has {matrix.shape[0]} rows for {len(vocabulary)} vocabulary entries"
            )
        return np.ascontiguousarray(matrix, dtype=DTYPE)

    rows = list(matrix)
    if len(rows) != len(vocabulary):
        raise ShapeMismatchError(
            f"Got {len(rows)} embedding rows for {len(vocabulary)} vocabulary entries"
        )
    if not rows:
        raise EmptyVocabularyError("Cannot infer embedding dimension from an empty row list")

    dim = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != dim:
            raise ShapeMismatchError(
                f"Row {i} ({vocabulary[i]!r}) has {len(row)} values, expected {dim}"
            )

    return np.ascontiguousarray(np.array(rows, dtype=DTYPE))


@dataclass(frozen=True, eq=False, repr=False)
class EmbeddingStore:
    """Immutable word embedding collection.

    Attributes:
        vocabulary: Words in file order, duplicates included
        matrix: Read-only array of shape (vocabulary_size, dimension)
        norms: Read-only float64 array with the Euclidean norm of each
            matrix row
        word_to_index: Read-only mapping from word to its (last) row
    """
    vocabulary: Tuple[str, ...]
    matrix: np.ndarray
    norms: np.ndarray
    word_to_index: Mapping[str, int]

    @classmethod
    def build(cls, vocabulary: Sequence[str], matrix: MatrixLike) -> "EmbeddingStore":
        """Validate a vocabulary and matrix and freeze them into a store.

        The store takes ownership of ``matrix``: a C-contiguous float32 array
        is used without copying and is marked read-only.

        Args:
            vocabulary: Words, one per matrix row
            matrix: 2-D array of shape (V, D) or a sequence of V rows

        Returns:
            EmbeddingStore

        Raises:
            ShapeMismatchError: If the matrix doesn't have one row per word
            ZeroNormVectorError: If any row has zero (or non-finite) norm
        """
        vocabulary = tuple(vocabulary)
        matrix = _as_matrix(vocabulary, matrix)

        # sum of squares in float64; float32 overflows past ~1e19 and underflows below ~1e-23
        norms = np.linalg.norm(matrix.astype(np.float64), axis=1)
        bad = np.flatnonzero(~np.isfinite(norms) | ~(norms > 0))
        if bad.size:
            position = int(bad[0])
            raise ZeroNormVectorError(vocabulary[position], position)

        word_to_index = {word: i for i, word in enumerate(vocabulary)}
        if len(word_to_index) < len(vocabulary):
            logger.warning(
                f"{len(vocabulary) - len(word_to_index)} duplicate words; "
                "lookups resolve to the last occurrence"
            )

        matrix.flags.writeable = False
        norms.flags.writeable = False

        return cls(
            vocabulary=vocabulary,
            matrix=matrix,
            norms=norms,
            word_to_index=MappingProxyType(word_to_index),
        )

    @classmethod
    def from_mapping(
        cls,
        word_to_vector: Mapping[str, Sequence[float]],
        order: Optional[Sequence[str]] = None,
    ) -> "EmbeddingStore":
        """Build a store from a word -> vector mapping.

        Rows are laid out in ``order`` when given, otherwise in sorted word
        order; the mapping's own iteration order is never used.

        Args:
            word_to_vector: Mapping of words to vectors of equal length
            order: Words of the mapping in the desired row order

        Returns:
            EmbeddingStore

        Raises:
            EmptyVocabularyError: If the mapping is empty
            WordNotFoundError: If ``order`` names a word missing from the mapping
        """
        if not word_to_vector:
            raise EmptyVocabularyError("Cannot build a store from an empty mapping")

        words: List[str] = list(order) if order is not None else sorted(word_to_vector)
        rows = []
        for word in words:
            if word not in word_to_vector:
                raise WordNotFoundError(word)
            rows.append(word_to_vector[word])

        return cls.build(words, rows)

    def __repr__(self) -> str:
        return f"EmbeddingStore(vocabulary_size={self.vocabulary_size}, dimension={self.dimension})"

    def __len__(self) -> int:
        return self.vocabulary_size

    def __contains__(self, word: object) -> bool:
        return word in self.word_to_index

    def __iter__(self) -> Iterator[str]:
        return iter(self.vocabulary)

    @property
    def vocabulary_size(self) -> int:
        """Number of matrix rows (duplicates counted)."""
        return self.matrix.shape[0]

    @property
    def dimension(self) -> int:
        """Length of every embedding vector."""
        return self.matrix.shape[1]

    def index_of(self, word: str) -> int:
        """Get the matrix row of a word.

        Raises:
            WordNotFoundError: If the word is not in the vocabulary
        """
        try:
            return self.word_to_index[word]
        except KeyError:
            raise WordNotFoundError(word) from None

    def get_embedding(self, word: str) -> np.ndarray:
        """Get a read-only view of a word's embedding row.

        The view shares memory with the store's matrix (no copy).

        Raises:
            WordNotFoundError: If the word is not in the vocabulary
        """
        return self.matrix[self.index_of(word)]

    def get_embedding_norm(self, word: str) -> float:
        """Get the cached Euclidean norm of a word's embedding.

        Raises:
            WordNotFoundError: If the word is not in the vocabulary
        """
        return float(self.norms[self.index_of(word)])

    def to_dict(self) -> Dict[str, np.ndarray]:
        """Map each word to its embedding view (last occurrence wins)."""
        return {word: self.matrix[i] for word, i in self.word_to_index.items()}
